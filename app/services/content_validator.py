"""
內容驗證

type 決定 payload 必須符合六種形狀中的哪一種，兩者不可分開信任。
驗證是全有或全無：任何欄位錯誤都會丟出 ValidationError，並列出所有錯誤欄位。
"""
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from app.config import get_settings
from app.exceptions import ValidationError
from app.schemas.content import CONTENT_SCHEMAS, ContentPayload, ContentType


def pydantic_errors(exc, prefix: Optional[str] = None) -> list[dict]:
    """將 pydantic（或 FastAPI RequestValidationError）的錯誤轉成 [{"field": ..., "message": ...}]"""
    errors = []
    for err in exc.errors():
        path = ".".join(str(part) for part in err["loc"])
        if prefix:
            field = f"{prefix}.{path}" if path else prefix
        else:
            field = path
        errors.append({"field": field, "message": err["msg"]})
    return errors


def parse_content_type(value: Any) -> ContentType:
    """確認 type 是六種類型之一"""
    try:
        return ContentType(value)
    except ValueError:
        allowed = ", ".join(t.value for t in ContentType)
        raise ValidationError(
            "Invalid content data",
            errors=[{"field": "type", "message": f"must be one of: {allowed}"}],
        )


def _extra_keys(schema: type[ContentPayload], payload: dict) -> list[str]:
    known = {field.alias or name for name, field in schema.model_fields.items()}
    return [key for key in payload if key not in known]


def validate_content(
    content_type: Any,
    payload: Any,
    allow_extra_keys: Optional[bool] = None,
) -> dict:
    """
    驗證內容 payload

    Args:
        content_type: 宣告的內容類型（text / image / video / audio / citation / link）
        payload: 使用者送來的 JSON 物件
        allow_extra_keys: 是否允許未定義的欄位（None 時使用設定檔 CONTENT_ALLOW_EXTRA_KEYS）

    Returns:
        dict: 正規化後的 payload（只保留該類型認得的欄位，未填的選填欄位不會出現）

    Raises:
        ValidationError: type 不認得或 payload 不符合該類型的形狀
    """
    ctype = parse_content_type(content_type)
    schema = CONTENT_SCHEMAS[ctype]

    if payload is None:
        raise ValidationError(
            "Invalid content data",
            errors=[{"field": "content", "message": "Field required"}],
        )
    if not isinstance(payload, dict):
        raise ValidationError(
            "Invalid content data",
            errors=[{"field": "content", "message": "must be a JSON object"}],
        )

    if allow_extra_keys is None:
        allow_extra_keys = get_settings().content_allow_extra_keys

    errors = []
    validated = None
    try:
        validated = schema.model_validate(payload)
    except PydanticValidationError as e:
        errors.extend(pydantic_errors(e, prefix="content"))

    if not allow_extra_keys:
        for key in _extra_keys(schema, payload):
            errors.append({
                "field": f"content.{key}",
                "message": f"not allowed for type '{ctype.value}'",
            })

    if errors:
        raise ValidationError("Invalid content data", errors=errors)

    return validated.model_dump(by_alias=True, exclude_unset=True)
