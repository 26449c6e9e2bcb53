import logging
import uuid
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from app.config import get_settings
from app.exceptions import ValidationError

logger = logging.getLogger(__name__)

# 允許的 MIME 類型 -> (類型, 子目錄, 副檔名)
# 副檔名一律由 MIME 決定，不沿用上傳的檔名；不接受 SVG
UPLOAD_KINDS = {
    "image/png": ("image", "images", ".png"),
    "image/jpeg": ("image", "images", ".jpg"),
    "image/gif": ("image", "images", ".gif"),
    "image/webp": ("image", "images", ".webp"),
    "image/avif": ("image", "images", ".avif"),
    "video/mp4": ("video", "videos", ".mp4"),
    "video/webm": ("video", "videos", ".webm"),
    "video/ogg": ("video", "videos", ".ogv"),
    "video/quicktime": ("video", "videos", ".mov"),
}


class UploadService:
    """圖片 / 影片上傳服務（存到 upload_dir 底下，並回傳可直接用於內容的網址）"""

    def __init__(self, upload_dir: Optional[str] = None, max_size: Optional[int] = None):
        settings = get_settings()
        self.upload_dir = Path(upload_dir or settings.upload_dir)
        self.max_size = max_size or settings.max_upload_size

    @staticmethod
    def classify(content_type: Optional[str]) -> tuple[str, str, str]:
        """依 MIME 類型決定檔案類型、子目錄與副檔名，只接受常見的圖片與影片格式"""
        mime = (content_type or "").split(";", 1)[0].strip().lower()
        if mime in UPLOAD_KINDS:
            return UPLOAD_KINDS[mime]
        raise ValidationError(
            "Unsupported file type. Only images and videos are allowed.",
            errors=[{"field": "file", "message": f"unsupported content type: {content_type}"}],
        )

    async def save(self, file: UploadFile, base_url: str) -> dict:
        """
        儲存上傳的檔案

        Args:
            file: 上傳的檔案
            base_url: 服務的根網址（例如 http://localhost:8000/），用來組出完整的檔案網址

        Returns:
            dict: success / file_url / file_type / original_name / size
        """
        file_type, subdir, ext = self.classify(file.content_type)

        data = await file.read(self.max_size + 1)
        if len(data) > self.max_size:
            raise ValidationError(
                "File too large",
                errors=[{"field": "file", "message": f"must be at most {self.max_size} bytes"}],
            )
        if not data:
            raise ValidationError(
                "No file was uploaded",
                errors=[{"field": "file", "message": "file is empty"}],
            )

        filename = f"{file_type}-{uuid.uuid4().hex}{ext}"
        target_dir = self.upload_dir / subdir
        target_dir.mkdir(parents=True, exist_ok=True)
        (target_dir / filename).write_bytes(data)

        logger.info("Stored uploaded %s %s (%d bytes)", file_type, filename, len(data))
        return {
            "success": True,
            "file_url": f"{base_url.rstrip('/')}/uploads/{subdir}/{filename}",
            "file_type": file_type,
            "original_name": file.filename or filename,
            "size": len(data),
        }
