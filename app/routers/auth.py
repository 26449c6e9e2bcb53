from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from typing import Optional

from app.database import get_db
from app.models.admin_session import AdminSession
from app.schemas.auth import LoginRequest, LoginResponse, AuthStatus, MessageResponse
from app.services.auth_service import AuthService
from app.timeutils import as_utc

router = APIRouter(prefix="/api", tags=["認證"])

SESSION_TOKEN_KEY = "token"


def get_session_token(request: Request) -> Optional[str]:
    """從 Authorization: Bearer 標頭或 session cookie 取得 token"""
    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.session.get(SESSION_TOKEN_KEY)


def require_admin(request: Request, db: Session = Depends(get_db)) -> AdminSession:
    """寫入類 API 共用的登入檢查，未登入或 session 過期時回 401"""
    return AuthService(db).require_session(get_session_token(request))


@router.post("/login", response_model=LoginResponse)
async def login(request: Request, body: LoginRequest, db: Session = Depends(get_db)):
    """以 admin 密碼登入"""
    session = AuthService(db).login(body.password)
    request.session[SESSION_TOKEN_KEY] = session.token
    return LoginResponse(
        message="Login successful",
        token=session.token,
        expires_at=as_utc(session.expires_at),
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(request: Request, db: Session = Depends(get_db)):
    """登出（刪除 session 並清除 cookie）"""
    AuthService(db).logout(get_session_token(request))
    request.session.clear()
    return MessageResponse(message="Logout successful")


@router.get("/auth/status", response_model=AuthStatus)
async def auth_status(request: Request, db: Session = Depends(get_db)):
    """目前是否已登入"""
    session = AuthService(db).get_valid_session(get_session_token(request))
    return AuthStatus(is_logged_in=session is not None)
