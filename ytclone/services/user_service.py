# ============================================================================
# FILE: ytclone/services/user_service.py
# ============================================================================
from typing import Optional
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ytclone.db.models.user import User
from ytclone.schemas.user import UserCreate
from ytclone.core.exceptions import BadRequest, Conflict, InvalidCredentials
from ytclone.core.security import get_password_hash, verify_password
import logging

logger = logging.getLogger(__name__)

class UserService:
    """Service layer for user operations"""

    def create_user(self, db: Session, user_data: UserCreate) -> User:
        """
        Register a new user account

        Raises:
            BadRequest: a field is empty
            Conflict: username or email already registered
        """
        if not (user_data.username and user_data.email and user_data.password):
            raise BadRequest("Username, email and password are required")

        existing = db.query(User).filter(
            or_(User.username == user_data.username, User.email == user_data.email)
        ).first()
        if existing:
            raise Conflict("User already exists")

        user = User(
            username=user_data.username,
            email=user_data.email,
            password_hash=get_password_hash(user_data.password),
        )
        try:
            db.add(user)
            db.commit()
            db.refresh(user)
        except IntegrityError:
            # Lost a race with a concurrent registration
            db.rollback()
            raise Conflict("User already exists")
        except Exception:
            db.rollback()
            raise

        logger.info(f"User created: {user.username}")
        return user

    def get_user(self, db: Session, user_id: int) -> Optional[User]:
        return db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email).first()

    def authenticate_user(self, db: Session, email: str, password: str) -> User:
        """
        Check an email/password pair

        Unknown email and wrong password raise the same InvalidCredentials
        so callers cannot probe which accounts exist.
        """
        user = self.get_user_by_email(db, email) if email else None
        if not user or not verify_password(password or "", user.password_hash):
            raise InvalidCredentials("Invalid credentials")
        return user

# Create singleton instance
user_service = UserService()
