from fastapi import APIRouter, Depends, File, Request, UploadFile

from app.routers.auth import require_admin
from app.schemas.auth import UploadResponse
from app.services.upload_service import UploadService

router = APIRouter(prefix="/api", tags=["檔案上傳"])


@router.post("/upload", response_model=UploadResponse, dependencies=[Depends(require_admin)])
async def upload_file(request: Request, file: UploadFile = File(...)):
    """上傳圖片或影片，回傳可填入 imageUrl / videoUrl 的網址"""
    result = await UploadService().save(file, base_url=str(request.base_url))
    return UploadResponse(**result)
