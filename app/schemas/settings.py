from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from datetime import datetime

from app.schemas.content import UrlStr

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class SettingsUpdate(BaseModel):
    """
    更新畫面設定（只送要改的欄位）

    欄位預設值不會被驗證，所以沒送的欄位維持 None；
    明確送 null 則會因型別不符而驗證失敗。
    """
    app_title: str = Field(None, min_length=1, max_length=100)
    app_description: str = Field(None, max_length=500)
    title_color: str = Field(None, pattern=HEX_COLOR_PATTERN)
    star_color: str = Field(None, pattern=HEX_COLOR_PATTERN)
    star_border_color: str = Field(None, pattern=HEX_COLOR_PATTERN)
    background_image: UrlStr = None
    total_days: int = Field(None, ge=1, le=30)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class SettingsResponse(BaseModel):
    """畫面設定回應格式"""
    id: int
    app_title: str
    app_description: str
    title_color: str
    star_color: str
    star_border_color: str
    background_image: str
    total_days: int
    updated_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
