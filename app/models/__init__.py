from app.models.user import User
from app.models.content import Content
from app.models.app_settings import AppSettings, DEFAULT_SETTINGS
from app.models.admin_session import AdminSession

__all__ = [
    "User",
    "Content",
    "AppSettings",
    "DEFAULT_SETTINGS",
    "AdminSession",
]
