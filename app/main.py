import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware
from contextlib import asynccontextmanager
from pathlib import Path

from app.config import get_settings
from app.database import init_db
from app.exceptions import CalendarError, StorageError, ValidationError
from app.routers import auth_router, content_router, settings_router, upload_router
from app.services.content_validator import pydantic_errors

# 取得設定
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """應用程式生命週期管理"""
    # 啟動時：初始化資料庫
    logger.info("🚀 Initializing database...")
    init_db()
    logger.info("✅ Database initialized")

    yield

    logger.info("👋 Shutting down")


# 建立 FastAPI 應用程式
app = FastAPI(
    title="Day Calendar",
    description="每日內容日曆：公開頁面顯示 1..N 天的內容，admin 後台編輯內容與畫面設定",
    version="1.0.0",
    lifespan=lifespan,
)

# 掛載上傳檔案目錄
upload_dir = Path(settings.upload_dir)
upload_dir.mkdir(parents=True, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=str(upload_dir)), name="uploads")

# 設定 Session（認證用，cookie 只存 session token）
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret_key,
    max_age=settings.session_lifetime_hours * 3600,
    https_only=settings.session_https_only,
)

# 設定 CORS（跨域請求）
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 註冊路由
app.include_router(auth_router)
app.include_router(settings_router)
app.include_router(content_router)
app.include_router(upload_router)


# ===== 錯誤處理 =====

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "errors": exc.errors},
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    # 細節已在服務層記錄，回應不透露資料庫錯誤內容
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(CalendarError)
async def calendar_error_handler(request: Request, exc: CalendarError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """請求格式錯誤一律回 400，格式與 ValidationError 相同"""
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request data", "errors": pydantic_errors(exc)},
    )


@app.get("/health")
async def health():
    """健康檢查端點"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
