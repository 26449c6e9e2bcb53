"""
內容驗證單元測試

- type 必須是六種之一
- payload 必須符合 type 對應的形狀（必填欄位、網址格式）
- 多個錯誤會一次列出
- 未定義欄位預設丟棄，可設定為拒絕
"""

import pytest

from app.exceptions import ValidationError
from app.schemas.content import ContentType
from app.services.content_validator import validate_content


class TestRequiredFields:
    """必填欄位"""

    def test_text_requires_text(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_content("text", {})
        assert exc_info.value.fields == ["content.text"]

    def test_empty_text_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_content("text", {"text": ""})
        assert exc_info.value.fields == ["content.text"]

    def test_whitespace_text_is_accepted(self):
        """不做 trim，只擋空字串"""
        assert validate_content("text", {"text": " "}) == {"text": " "}

    def test_citation_without_source(self):
        """citationSource 為選填"""
        assert validate_content("citation", {"citationText": "x"}) == {"citationText": "x"}

    @pytest.mark.parametrize("content_type, payload, field", [
        ("citation", {"citationText": "x", "citationSource": None}, "content.citationSource"),
        ("image", {"imageUrl": "https://example.com/a.png", "imageCaption": None}, "content.imageCaption"),
        ("link", {"linkUrl": "https://example.com", "linkDescription": None}, "content.linkDescription"),
    ])
    def test_null_optional_field_is_rejected(self, content_type, payload, field):
        """選填欄位可以省略，但不能送 null"""
        with pytest.raises(ValidationError) as exc_info:
            validate_content(content_type, payload)
        assert exc_info.value.fields == [field]

    def test_citation_with_source(self):
        payload = {"citationText": "Words", "citationSource": "Someone"}
        assert validate_content("citation", payload) == payload

    def test_empty_citation_text_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_content("citation", {"citationText": "", "citationSource": "Someone"})
        assert exc_info.value.fields == ["content.citationText"]

    def test_payload_of_other_type_is_rejected(self):
        """payload 必須符合宣告的 type，而不是任一種形狀"""
        with pytest.raises(ValidationError) as exc_info:
            validate_content("video", {"imageUrl": "https://example.com/a.png"})
        assert exc_info.value.fields == ["content.videoUrl"]

    def test_non_string_text_is_rejected(self):
        with pytest.raises(ValidationError):
            validate_content("text", {"text": 42})


class TestUrlFields:
    """網址欄位"""

    def test_invalid_image_url(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_content("image", {"imageUrl": "not-a-url"})
        assert exc_info.value.fields == ["content.imageUrl"]

    def test_relative_url_is_rejected(self):
        with pytest.raises(ValidationError):
            validate_content("audio", {"audioUrl": "/uploads/song.mp3"})

    def test_url_is_returned_unchanged(self):
        """網址不會被正規化（例如補上結尾斜線）"""
        result = validate_content("link", {"linkUrl": "https://example.com"})
        assert result == {"linkUrl": "https://example.com"}

    def test_image_with_caption(self):
        payload = {"imageUrl": "https://example.com/a.png", "imageCaption": "A picture"}
        assert validate_content("image", payload) == payload

    def test_all_errors_are_listed(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_content("link", {"linkUrl": "nope", "linkDescription": 5})
        assert sorted(exc_info.value.fields) == ["content.linkDescription", "content.linkUrl"]


class TestTypeAndShape:
    """type 與 payload 本身"""

    def test_unknown_type(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_content("poem", {"text": "hello"})
        assert exc_info.value.fields == ["type"]

    def test_missing_type(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_content(None, {"text": "hello"})
        assert exc_info.value.fields == ["type"]

    def test_enum_type_is_accepted(self):
        assert validate_content(ContentType.VIDEO, {"videoUrl": "https://example.com/v.mp4"}) == {
            "videoUrl": "https://example.com/v.mp4"
        }

    def test_payload_must_be_object(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_content("text", ["hello"])
        assert exc_info.value.fields == ["content"]

    def test_missing_payload(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_content("text", None)
        assert exc_info.value.fields == ["content"]


class TestExtraKeys:
    """未定義的欄位"""

    def test_extra_keys_are_dropped_by_default(self):
        result = validate_content("text", {"text": "hello", "color": "red"})
        assert result == {"text": "hello"}

    def test_extra_keys_rejected_when_configured(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_content("text", {"text": "hello", "color": "red"}, allow_extra_keys=False)
        assert exc_info.value.fields == ["content.color"]

    def test_known_keys_pass_when_extra_keys_rejected(self):
        payload = {"imageUrl": "https://example.com/a.png", "imageCaption": "x"}
        assert validate_content("image", payload, allow_extra_keys=False) == payload

    def test_snake_case_key_is_not_a_field_name(self):
        """只認 camelCase 欄位名稱，image_url 不會被當成 imageUrl"""
        with pytest.raises(ValidationError) as exc_info:
            validate_content("image", {"image_url": "https://example.com/a.png"})
        assert exc_info.value.fields == ["content.imageUrl"]

    def test_snake_case_key_rejected_when_configured(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_content(
                "citation",
                {"citationText": "x", "citation_source": "Someone"},
                allow_extra_keys=False,
            )
        assert exc_info.value.fields == ["content.citation_source"]

    def test_snake_case_key_dropped_by_default(self):
        result = validate_content("citation", {"citationText": "x", "citation_source": "Someone"})
        assert result == {"citationText": "x"}
