from sqlalchemy import CheckConstraint, Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from app.database import Base

DEFAULT_BACKGROUND_IMAGE = (
    "https://images.unsplash.com/photo-1462331940025-496dfbfc7564"
    "?ixlib=rb-1.2.1&auto=format&fit=crop&w=2048&q=80"
)

# 第一次讀取設定時寫入的預設值
DEFAULT_SETTINGS = {
    "app_title": "Calendrier de Riḍván",
    "app_description": "The Festival of Paradise",
    "title_color": "#1E3A8A",
    "star_color": "#FCD34D",
    "star_border_color": "#F59E0B",
    "background_image": DEFAULT_BACKGROUND_IMAGE,
    "total_days": 19,
}

# 設定只有一筆，主鍵固定為 1
SETTINGS_ROW_ID = 1


class AppSettings(Base):
    """畫面設定資料表（只會有一筆）"""
    __tablename__ = "settings"
    __table_args__ = (
        CheckConstraint(f"id = {SETTINGS_ROW_ID}", name="ck_settings_single_row"),
    )

    id = Column(Integer, primary_key=True, index=True, default=SETTINGS_ROW_ID)
    app_title = Column(String(100), nullable=False, default=DEFAULT_SETTINGS["app_title"])
    app_description = Column(String(500), nullable=False, default=DEFAULT_SETTINGS["app_description"])

    # 顏色（#RRGGBB）
    title_color = Column(String(7), nullable=False, default=DEFAULT_SETTINGS["title_color"])
    star_color = Column(String(7), nullable=False, default=DEFAULT_SETTINGS["star_color"])
    star_border_color = Column(String(7), nullable=False, default=DEFAULT_SETTINGS["star_border_color"])

    background_image = Column(Text, nullable=False, default=DEFAULT_BACKGROUND_IMAGE)
    total_days = Column(Integer, nullable=False, default=DEFAULT_SETTINGS["total_days"])  # 1..30

    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<AppSettings(title={self.app_title}, total_days={self.total_days})>"
