# ============================================================================
# FILE: ytclone/db/models/history.py
# ============================================================================
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index, func
from sqlalchemy.orm import relationship
from ytclone.db.base import Base
import enum

class ActionType(str, enum.Enum):
    WATCH = "watch"
    SEARCH = "search"

class History(Base):
    """One watch or search action reported by a logged-in user"""
    __tablename__ = "history"
    __table_args__ = (
        Index("ix_history_user_watched", "user_id", "watched_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    video_id = Column(String(50), nullable=False, default="")  # empty for pure searches
    video_title = Column(String(255), nullable=False, default="")
    thumbnail_url = Column(Text, nullable=False, default="")
    search_query = Column(String(255), nullable=False, default="")
    action_type = Column(String(10), nullable=False, default=ActionType.WATCH.value)
    watched_at = Column(DateTime, server_default=func.now(), nullable=False)

    # Relationships
    user = relationship("User", back_populates="history")
