from pydantic import AfterValidator, AnyUrl, BaseModel, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from typing import Annotated, Any, Optional
from datetime import datetime
import enum


class ContentType(str, enum.Enum):
    """內容類型"""
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    CITATION = "citation"
    LINK = "link"


_url_adapter = TypeAdapter(AnyUrl)


def _check_absolute_url(value: str) -> str:
    """確認是完整網址（需有 scheme 與 host），回傳原字串不做正規化"""
    try:
        url = _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValueError("must be a valid absolute URL")
    if not url.host:
        raise ValueError("must be a valid absolute URL")
    return value


UrlStr = Annotated[str, AfterValidator(_check_absolute_url)]


class ContentPayload(BaseModel):
    """
    各類型 payload 的共用設定

    JSON 欄位只認 camelCase 名稱；選填欄位預設 None 不會被驗證，
    明確送 null 則驗證失敗。
    """

    class Config:
        alias_generator = to_camel


class TextContent(ContentPayload):
    text: str = Field(min_length=1)


class ImageContent(ContentPayload):
    image_url: UrlStr
    image_caption: str = None


class VideoContent(ContentPayload):
    video_url: UrlStr


class AudioContent(ContentPayload):
    audio_url: UrlStr


class CitationContent(ContentPayload):
    citation_text: str = Field(min_length=1)
    citation_source: str = None


class LinkContent(ContentPayload):
    link_url: UrlStr
    link_description: str = None


# type -> payload 形狀，六種類型一一對應
CONTENT_SCHEMAS: dict[ContentType, type[ContentPayload]] = {
    ContentType.TEXT: TextContent,
    ContentType.IMAGE: ImageContent,
    ContentType.VIDEO: VideoContent,
    ContentType.AUDIO: AudioContent,
    ContentType.CITATION: CitationContent,
    ContentType.LINK: LinkContent,
}


class ContentUpdate(BaseModel):
    """PUT /api/content/{day} 的請求內容（type 與 content 由服務層驗證）"""
    title: Optional[str] = None
    type: Any = None
    content: Any = None


class ContentResponse(BaseModel):
    """每日內容回應格式"""
    id: int
    day: int
    title: str
    type: ContentType
    content: dict
    updated_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
