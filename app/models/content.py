from sqlalchemy import Column, Integer, String, DateTime, JSON
from sqlalchemy.sql import func
from app.database import Base


class Content(Base):
    """每日內容資料表（一天最多一筆）"""
    __tablename__ = "content"

    id = Column(Integer, primary_key=True, index=True)
    day = Column(Integer, unique=True, index=True, nullable=False)  # 1..30
    title = Column(String(255), nullable=False)
    type = Column(String(20), nullable=False)  # text, image, video, audio, citation, link
    content = Column(JSON, nullable=False)  # 依 type 驗證過的 payload
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Content(day={self.day}, type={self.type}, title={self.title})>"
