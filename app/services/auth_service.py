"""認證服務"""
import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import storage_errors
from app.exceptions import Unauthorized
from app.models.admin_session import AdminSession
from app.timeutils import as_utc, utcnow

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32


class AuthService:
    """
    Admin 認證服務

    只有一組共用的 admin 密碼（ADMIN_PASSWORD），登入成功後建立一筆有期限的 session，
    之後的寫入請求都以 token 查詢 session 是否仍有效。
    """

    def __init__(self, db: Session):
        settings = get_settings()
        self.db = db
        self.admin_password = settings.admin_password
        self.session_lifetime = timedelta(hours=settings.session_lifetime_hours)

    def verify_password(self, password: str) -> bool:
        """驗證密碼（固定時間比較）"""
        if not isinstance(password, str):
            return False
        return secrets.compare_digest(password.encode("utf-8"), self.admin_password.encode("utf-8"))

    def login(self, password: str, now: Optional[datetime] = None) -> AdminSession:
        """密碼正確時建立 session 並回傳"""
        if not self.verify_password(password):
            logger.warning("Admin login failed: invalid password")
            raise Unauthorized("Invalid password")

        now = now or utcnow()
        session = AdminSession(
            token=secrets.token_hex(TOKEN_BYTES),
            created_at=now,
            expires_at=now + self.session_lifetime,
        )
        with storage_errors(self.db, "creating session"):
            self.db.add(session)
            self.db.commit()
            self.db.refresh(session)

        logger.info("Admin logged in, session expires at %s", session.expires_at)
        return session

    def logout(self, token: Optional[str]) -> None:
        """刪除 session（token 不存在時不做任何事）"""
        if not token:
            return
        with storage_errors(self.db, "deleting session"):
            self.db.query(AdminSession).filter(AdminSession.token == token).delete()
            self.db.commit()

    def get_valid_session(self, token: Optional[str], now: Optional[datetime] = None) -> Optional[AdminSession]:
        """
        以 token 取得有效的 session

        過期的 session 在發現時立即刪除，並回傳 None。
        """
        if not token:
            return None

        now = now or utcnow()
        with storage_errors(self.db, "fetching session"):
            session = self.db.query(AdminSession).filter(AdminSession.token == token).first()
            if not session:
                return None

            if as_utc(session.expires_at) <= now:
                session_id = session.id
                self.db.delete(session)
                self.db.commit()
                logger.info("Purged expired admin session %d", session_id)
                return None

        return session

    def require_session(self, token: Optional[str], now: Optional[datetime] = None) -> AdminSession:
        """取得有效 session，沒有就丟出 Unauthorized"""
        if not token:
            raise Unauthorized("Unauthorized: No session found")
        session = self.get_valid_session(token, now=now)
        if not session:
            raise Unauthorized("Unauthorized: Invalid or expired session")
        return session

    def clean_expired_sessions(self, now: Optional[datetime] = None) -> int:
        """刪除所有已過期的 session，回傳刪除筆數"""
        now = now or utcnow()
        with storage_errors(self.db, "cleaning expired sessions"):
            removed = (
                self.db.query(AdminSession)
                .filter(AdminSession.expires_at <= now)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        return removed
