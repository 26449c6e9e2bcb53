from app.routers.auth import router as auth_router
from app.routers.content import router as content_router
from app.routers.settings import router as settings_router
from app.routers.upload import router as upload_router

__all__ = ["auth_router", "content_router", "settings_router", "upload_router"]
