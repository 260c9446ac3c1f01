# ============================================================================
# FILE: ytclone/services/history_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy.orm import Session
from ytclone.config import settings
from ytclone.db.models.history import History, ActionType
from ytclone.schemas.history import HistoryCreate
from ytclone.core.exceptions import BadRequest, NotFound
import logging

logger = logging.getLogger(__name__)

class HistoryService:
    """Service layer for watch and search history"""

    def add_entry(self, db: Session, user_id: int, entry: HistoryCreate) -> History:
        """Record one action; at least a video id or a search query is required"""
        if not entry.video_id and not entry.search_query:
            raise BadRequest("Video ID or search query is required")

        action_type = entry.action_type or ActionType.WATCH
        history_entry = History(
            user_id=user_id,
            video_id=entry.video_id or "",
            video_title=entry.video_title or "",
            thumbnail_url=entry.thumbnail_url or "",
            search_query=entry.search_query or "",
            action_type=ActionType(action_type).value,
        )
        try:
            db.add(history_entry)
            db.commit()
            db.refresh(history_entry)
        except Exception:
            db.rollback()
            raise

        logger.info(f"History saved for user {user_id}: {history_entry.action_type}")
        return history_entry

    def list_entries(self, db: Session, user_id: int, limit: Optional[int] = None) -> List[History]:
        """Most recent entries first, capped at `limit` (HISTORY_LIMIT by default)"""
        if limit is None:
            limit = settings.HISTORY_LIMIT
        return db.query(History).filter(
            History.user_id == user_id
        ).order_by(
            History.watched_at.desc(), History.id.desc()
        ).limit(limit).all()

    def delete_entry(self, db: Session, user_id: int, entry_id: int):
        """Delete one entry owned by the user; a foreign or missing id is NotFound"""
        try:
            deleted = db.query(History).filter(
                History.id == entry_id,
                History.user_id == user_id
            ).delete(synchronize_session=False)
            db.commit()
        except Exception:
            db.rollback()
            raise

        if deleted == 0:
            raise NotFound("History item not found")
        logger.info(f"History item {entry_id} deleted for user {user_id}")

    def clear(self, db: Session, user_id: int) -> int:
        """Delete every entry of the user; returns the number of rows removed"""
        try:
            deleted = db.query(History).filter(
                History.user_id == user_id
            ).delete(synchronize_session=False)
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(f"History cleared for user {user_id} ({deleted} entries)")
        return deleted

# Create singleton instance
history_service = HistoryService()
