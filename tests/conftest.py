"""
測試共用設定

在匯入 app 之前先設定環境變數：使用記憶體 SQLite、固定的 admin 密碼與暫存上傳目錄。
每個測試前都會重建所有資料表。
"""

import os
import tempfile

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_PASSWORD"] = "test-password"
os.environ["SESSION_SECRET_KEY"] = "test-session-secret"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="calendar-uploads-")

import pytest
from fastapi.testclient import TestClient

from app import models  # noqa: F401
from app.database import Base, SessionLocal, engine
from app.main import app as fastapi_app

ADMIN_PASSWORD = "test-password"


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(fastapi_app) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client):
    """已登入的 client（session cookie 已設定）"""
    response = client.post("/api/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client
