from app.schemas.content import (
    ContentType,
    ContentUpdate,
    ContentResponse,
    CONTENT_SCHEMAS,
)
from app.schemas.settings import SettingsUpdate, SettingsResponse
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    AuthStatus,
    MessageResponse,
    UploadResponse,
)

__all__ = [
    "ContentType",
    "ContentUpdate",
    "ContentResponse",
    "CONTENT_SCHEMAS",
    "SettingsUpdate",
    "SettingsResponse",
    "LoginRequest",
    "LoginResponse",
    "AuthStatus",
    "MessageResponse",
    "UploadResponse",
]
