import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.database import storage_errors
from app.exceptions import ValidationError
from app.models.app_settings import AppSettings, DEFAULT_SETTINGS, SETTINGS_ROW_ID
from app.schemas.settings import SettingsUpdate
from app.services.content_validator import pydantic_errors
from app.timeutils import utcnow

logger = logging.getLogger(__name__)


class SettingsService:
    """畫面設定服務（資料表只有一筆，主鍵固定為 SETTINGS_ROW_ID，第一次讀取時自動建立）"""

    def __init__(self, db: Session):
        self.db = db

    def get(self) -> AppSettings:
        """取得設定，不存在時以預設值建立"""
        with storage_errors(self.db, "fetching settings"):
            settings = self.db.get(AppSettings, SETTINGS_ROW_ID)
            if settings:
                return settings

            try:
                settings = AppSettings(id=SETTINGS_ROW_ID, **DEFAULT_SETTINGS, updated_at=utcnow())
                self.db.add(settings)
                self.db.commit()
                self.db.refresh(settings)
            except IntegrityError:
                # 另一個請求先建立了預設值：改用那一筆
                self.db.rollback()
                logger.info("Default settings were created concurrently")
                return self.db.get(AppSettings, SETTINGS_ROW_ID)

        logger.info("Initialized default settings")
        return settings

    def update(self, changes: dict[str, Any]) -> AppSettings:
        """
        更新設定（只合併有提供的欄位）

        Args:
            changes: 要更新的欄位，可用 camelCase（titleColor）或 snake_case（title_color）

        Raises:
            ValidationError: 任一欄位不符合限制時，列出所有錯誤欄位，不會寫入任何變更
        """
        try:
            validated = SettingsUpdate.model_validate(changes)
        except PydanticValidationError as e:
            raise ValidationError("Invalid settings data", errors=pydantic_errors(e))

        fields = validated.model_dump(exclude_unset=True)

        settings = self.get()
        with storage_errors(self.db, "updating settings"):
            for key, value in fields.items():
                setattr(settings, key, value)
            settings.updated_at = utcnow()
            self.db.commit()
            self.db.refresh(settings)

        if fields:
            logger.info("Updated settings: %s", ", ".join(sorted(fields)))
        return settings
