from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """應用程式設定"""

    # 資料庫設定
    database_url: str = "sqlite:///./calendar.db"

    # 應用程式設定
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Admin 後台設定（單一共用密碼，無帳號）
    admin_password: str = "9999"
    session_secret_key: str = "calendar-secret-key-change-in-production"
    session_lifetime_hours: int = Field(default=24, ge=24, le=168)  # 24 小時 ~ 7 天
    session_https_only: bool = False

    # 內容驗證：是否允許 payload 帶有未定義的欄位（允許時會直接丟棄）
    content_allow_extra_keys: bool = True

    # 檔案上傳設定
    upload_dir: str = "./uploads"
    max_upload_size: int = 10 * 1024 * 1024  # 10MB

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """取得設定（使用快取）"""
    return Settings()
