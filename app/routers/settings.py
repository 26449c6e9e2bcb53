from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session
from typing import Any

from app.database import get_db
from app.routers.auth import require_admin
from app.schemas.settings import SettingsResponse
from app.services.settings_service import SettingsService

router = APIRouter(prefix="/api/settings", tags=["畫面設定"])


@router.get("", response_model=SettingsResponse)
async def read_settings(db: Session = Depends(get_db)):
    """取得畫面設定（第一次呼叫時自動建立預設值）"""
    return SettingsService(db).get()


@router.put("", response_model=SettingsResponse, dependencies=[Depends(require_admin)])
async def update_settings(
    changes: dict[str, Any] = Body(...),
    db: Session = Depends(get_db)
):
    """更新畫面設定（只需送出要修改的欄位）"""
    return SettingsService(db).update(changes)
