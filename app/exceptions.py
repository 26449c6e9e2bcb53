"""
錯誤類別

服務層只丟出這裡定義的例外，由 app.main 的 exception handler 轉成 HTTP 回應：
- ValidationError / InvalidArgument -> 400
- Unauthorized -> 401
- NotFound -> 404
- StorageError -> 500
"""
from typing import Optional


class CalendarError(Exception):
    """所有應用程式錯誤的基底類別"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CalendarError):
    """輸入資料格式錯誤（使用者可修正）"""

    status_code = 400

    def __init__(self, message: str, errors: Optional[list[dict]] = None):
        super().__init__(message)
        # 每一筆為 {"field": "content.imageUrl", "message": "..."}
        self.errors = errors or []

    @property
    def fields(self) -> list[str]:
        return [e["field"] for e in self.errors]


class InvalidArgument(ValidationError):
    """參數超出範圍（例如 day 不在 1..30）"""


class NotFound(CalendarError):
    status_code = 404


class Unauthorized(CalendarError):
    status_code = 401


class StorageError(CalendarError):
    """資料庫寫入 / 讀取失敗，不自動重試"""
