# ============================================================================
# FILE: ytclone/db/models/user.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from ytclone.db.base import Base

class User(Base):
    """Registered account; rows are never updated or deleted by the API"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    # Relationships
    history = relationship("History", back_populates="user", cascade="all, delete-orphan")
    favorites = relationship("Favorite", back_populates="user", cascade="all, delete-orphan")

    def to_dict(self):
        return {"id": self.id, "username": self.username, "email": self.email}
