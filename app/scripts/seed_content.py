"""
每日內容種子資料腳本

將 app/data/sample_content.py 的範例內容匯入資料庫（經過與 API 相同的驗證）
執行方式：python -m app.scripts.seed_content seed [--force]
          python -m app.scripts.seed_content list
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.database import SessionLocal, init_db
from app.data.sample_content import SAMPLE_CONTENT
from app.exceptions import CalendarError
from app.services.content_service import ContentService

logger = logging.getLogger(__name__)


def seed_content(force: bool = False, db: Optional[Session] = None) -> list[int]:
    """
    將範例內容寫入資料庫

    Args:
        force: 是否覆蓋已有內容的天數
        db: 資料庫 Session（未提供時自行建立並初始化資料庫）

    Returns:
        list[int]: 實際寫入的天數
    """
    own_session = db is None
    if own_session:
        init_db()
        db = SessionLocal()

    try:
        service = ContentService(db)
        existing = {c.day for c in service.get_all()}
        written = []

        for item in SAMPLE_CONTENT:
            if item["day"] in existing and not force:
                logger.info("Day %d already has content, skipped (use --force to overwrite)", item["day"])
                continue
            service.upsert_by_day(
                item["day"],
                content_type=item["type"],
                payload=item["content"],
                title=item["title"],
            )
            written.append(item["day"])

        return written

    finally:
        if own_session:
            db.close()


def list_content(db: Optional[Session] = None) -> list[str]:
    """列出資料庫中的所有內容，回傳每一行的文字"""
    own_session = db is None
    if own_session:
        db = SessionLocal()

    try:
        return [
            f"Day {c.day}: {c.title} [{c.type}]"
            for c in ContentService(db).get_all()
        ]
    finally:
        if own_session:
            db.close()


if __name__ == "__main__":
    import argparse

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    parser = argparse.ArgumentParser(description="每日內容種子資料管理")
    parser.add_argument("action", choices=["seed", "list"], help="執行動作")
    parser.add_argument("--force", "-f", action="store_true", help="強制覆蓋已存在的資料")

    args = parser.parse_args()

    if args.action == "seed":
        try:
            days = seed_content(args.force)
        except CalendarError as e:
            logger.error("匯入失敗: %s", e.message)
            raise SystemExit(1)
        logger.info("成功匯入 %d 天的內容: %s", len(days), days)
    elif args.action == "list":
        lines = list_content()
        if not lines:
            logger.info("資料庫中尚無內容")
        for line in lines:
            logger.info(line)
