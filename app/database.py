import logging
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from app.config import get_settings
from app.exceptions import StorageError

logger = logging.getLogger(__name__)

settings = get_settings()

# 建立資料庫引擎（根據資料庫類型設定不同參數）
connect_args = {}
engine_kwargs = {}
if settings.database_url.startswith("sqlite"):
    connect_args = {"check_same_thread": False}  # SQLite 需要這個設定
    if settings.database_url in ("sqlite://", "sqlite:///:memory:"):
        # 記憶體資料庫：所有連線共用同一個 connection，否則每次連線都是空資料庫
        engine_kwargs["poolclass"] = StaticPool

engine = create_engine(
    settings.database_url,
    connect_args=connect_args,
    pool_pre_ping=True,  # 自動檢查連線是否有效
    **engine_kwargs,
)

# 建立 Session 工廠
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 建立 Base 類別
Base = declarative_base()


def get_db():
    """取得資料庫 Session（依賴注入用）"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """初始化資料庫（建立所有表、補齊預設設定、清除過期 session）"""
    from app.models import user, content, app_settings, admin_session  # noqa: F401
    from app.services.settings_service import SettingsService
    from app.services.auth_service import AuthService

    # checkfirst=True: 如果表已存在就跳過，避免多 worker 競爭問題
    Base.metadata.create_all(bind=engine, checkfirst=True)
    # 執行資料庫遷移（加入缺少的欄位）
    run_migrations()

    db = SessionLocal()
    try:
        SettingsService(db).get()
        removed = AuthService(db).clean_expired_sessions()
        if removed:
            logger.info("Removed %d expired admin sessions", removed)
    finally:
        db.close()


def run_migrations():
    """執行資料庫遷移（加入缺少的欄位）"""
    from sqlalchemy import text, inspect

    inspector = inspect(engine)
    table_names = inspector.get_table_names()

    # 舊版 settings 表沒有 app_title / app_description
    if "settings" in table_names:
        columns = [col["name"] for col in inspector.get_columns("settings")]
        missing = {
            "app_title": "VARCHAR(100) NOT NULL DEFAULT 'Calendrier de Riḍván'",
            "app_description": "VARCHAR(500) NOT NULL DEFAULT 'The Festival of Paradise'",
        }
        with engine.connect() as conn:
            for column, ddl in missing.items():
                if column not in columns:
                    conn.execute(text(f"ALTER TABLE settings ADD COLUMN {column} {ddl}"))
                    logger.info("Migration: added '%s' column to settings table", column)
            conn.commit()


@contextmanager
def storage_errors(db, action: str):
    """將 SQLAlchemy 錯誤轉成 StorageError（先 rollback，記錄後往上丟，不重試）"""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Database error while %s", action)
        raise StorageError(f"Error {action}") from e
