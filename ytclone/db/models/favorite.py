# ============================================================================
# FILE: ytclone/db/models/favorite.py
# ============================================================================
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship
from ytclone.db.base import Base

class Favorite(Base):
    """Saved video; a user can save a given video only once"""
    __tablename__ = "favorites"
    __table_args__ = (
        UniqueConstraint("user_id", "video_id", name="uq_favorites_user_video"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    video_id = Column(String(50), nullable=False)
    video_title = Column(String(255), nullable=True)
    thumbnail_url = Column(Text, nullable=True)
    added_at = Column(DateTime, server_default=func.now(), nullable=False)

    # Relationships
    user = relationship("User", back_populates="favorites")
