import logging
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.database import storage_errors
from app.exceptions import InvalidArgument, NotFound, ValidationError
from app.models.content import Content
from app.services.content_validator import parse_content_type, validate_content
from app.timeutils import utcnow

logger = logging.getLogger(__name__)

MIN_DAY = 1
MAX_DAY = 30
TITLE_MAX_LENGTH = 255


def validate_day(day: Any) -> int:
    """確認 day 是 1..30 的整數"""
    if isinstance(day, bool) or not isinstance(day, int) or not MIN_DAY <= day <= MAX_DAY:
        raise InvalidArgument(
            f"Invalid day parameter. Must be between {MIN_DAY} and {MAX_DAY}.",
            errors=[{"field": "day", "message": f"must be an integer between {MIN_DAY} and {MAX_DAY}"}],
        )
    return day


def default_title(day: int) -> str:
    return f"Day {day}"


class ContentService:
    """
    每日內容服務

    day 是唯一對外的鍵，id 只是資料庫內部使用，不提供以 id 查詢的操作。
    """

    def __init__(self, db: Session):
        self.db = db

    def _find(self, day: int) -> Optional[Content]:
        return self.db.query(Content).filter(Content.day == day).first()

    def get_by_day(self, day: int) -> Content:
        """取得指定天的內容，不存在時丟出 NotFound"""
        validate_day(day)
        with storage_errors(self.db, "fetching content"):
            content = self._find(day)
        if not content:
            raise NotFound(f"No content found for day {day}")
        return content

    def get_all(self) -> list[Content]:
        """取得所有內容（依 day 由小到大）"""
        with storage_errors(self.db, "fetching all content"):
            return self.db.query(Content).order_by(Content.day).all()

    def upsert_by_day(
        self,
        day: int,
        content_type: Any,
        payload: Any,
        title: Optional[str] = None,
    ) -> Content:
        """
        建立或更新某天的內容

        - 該天沒有資料：新增一筆，未給標題時使用 "Day {day}"
        - 該天已有資料：覆寫 type / content（有給標題才覆寫標題），保留原本的 id

        Raises:
            InvalidArgument: day 不在 1..30
            ValidationError: 標題、type 或 payload 驗證失敗（會列出所有錯誤欄位）
        """
        validate_day(day)

        errors = []
        if title is not None and not isinstance(title, str):
            errors.append({"field": "title", "message": "must be a string"})
        elif title is not None and len(title) > TITLE_MAX_LENGTH:
            errors.append({"field": "title", "message": f"must be at most {TITLE_MAX_LENGTH} characters"})

        ctype = None
        normalized = None
        try:
            ctype = parse_content_type(content_type)
            normalized = validate_content(ctype, payload)
        except ValidationError as e:
            errors.extend(e.errors)

        if errors:
            raise ValidationError("Invalid content data", errors=errors)

        # 空白標題視同未提供
        if title is not None and not title.strip():
            title = None

        with storage_errors(self.db, "updating content"):
            try:
                content = self._write(day, ctype.value, normalized, title)
            except IntegrityError:
                # 同一天被另一個請求搶先建立：改為更新那一筆（後寫入者為準）
                self.db.rollback()
                logger.info("Day %d was created concurrently, retrying as update", day)
                content = self._write(day, ctype.value, normalized, title)

        logger.info("Saved %s content for day %d", ctype.value, day)
        return content

    def _write(self, day: int, content_type: str, payload: dict, title: Optional[str]) -> Content:
        content = self._find(day)
        if content:
            if title is not None:
                content.title = title
            content.type = content_type
            content.content = payload
            content.updated_at = utcnow()
        else:
            content = Content(
                day=day,
                title=title or default_title(day),
                type=content_type,
                content=payload,
                updated_at=utcnow(),
            )
            self.db.add(content)

        self.db.commit()
        self.db.refresh(content)
        return content

    def delete_by_day(self, day: int) -> bool:
        """
        刪除某天的內容（冪等：沒有資料時不做任何事）

        Returns:
            bool: 是否真的刪除了資料
        """
        validate_day(day)
        with storage_errors(self.db, "deleting content"):
            deleted = self.db.query(Content).filter(Content.day == day).delete()
            self.db.commit()
        if deleted:
            logger.info("Deleted content for day %d", day)
        return bool(deleted)
