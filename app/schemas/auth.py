from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from datetime import datetime


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class LoginRequest(BaseModel):
    """登入請求"""
    password: str


class LoginResponse(CamelModel):
    """登入成功回應（token 同時寫入 session cookie）"""
    message: str
    token: str
    expires_at: datetime


class AuthStatus(CamelModel):
    is_logged_in: bool


class MessageResponse(BaseModel):
    message: str


class UploadResponse(CamelModel):
    """檔案上傳回應"""
    success: bool
    file_url: str
    file_type: str  # image 或 video
    original_name: str
    size: int
