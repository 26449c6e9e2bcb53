from app.services.content_service import ContentService
from app.services.settings_service import SettingsService
from app.services.auth_service import AuthService
from app.services.upload_service import UploadService
from app.services.content_validator import validate_content

__all__ = ["ContentService", "SettingsService", "AuthService", "UploadService", "validate_content"]
