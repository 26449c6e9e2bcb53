from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from app.database import get_db
from app.exceptions import InvalidArgument
from app.routers.auth import require_admin
from app.schemas.auth import MessageResponse
from app.schemas.content import ContentResponse, ContentUpdate
from app.services.content_service import ContentService, validate_day

router = APIRouter(prefix="/api/content", tags=["每日內容"])


def parse_day(raw: str) -> int:
    """路徑參數 day 必須是 1..30 的十進位整數（只接受 ASCII 數字）"""
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidArgument(
            "Invalid day parameter. Must be between 1 and 30.",
            errors=[{"field": "day", "message": "must be an integer"}],
        )
    return validate_day(int(raw))


@router.get("", response_model=List[ContentResponse])
async def get_all_content(db: Session = Depends(get_db)):
    """取得所有內容（依 day 排序）"""
    return ContentService(db).get_all()


@router.get("/{day}", response_model=ContentResponse)
async def get_content(day: str, db: Session = Depends(get_db)):
    """取得指定天的內容"""
    return ContentService(db).get_by_day(parse_day(day))


@router.put("/{day}", response_model=ContentResponse, dependencies=[Depends(require_admin)])
async def update_content(day: str, body: ContentUpdate, db: Session = Depends(get_db)):
    """建立或更新指定天的內容"""
    return ContentService(db).upsert_by_day(
        parse_day(day),
        content_type=body.type,
        payload=body.content,
        title=body.title,
    )


@router.delete("/{day}", response_model=MessageResponse, dependencies=[Depends(require_admin)])
async def delete_content(day: str, db: Session = Depends(get_db)):
    """刪除指定天的內容（沒有資料時一樣回 200）"""
    day_number = parse_day(day)
    ContentService(db).delete_by_day(day_number)
    return MessageResponse(message=f"Content for day {day_number} deleted")
