"""
User repository.

Thin data-access layer around the User model.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from backend.src.models import User


class UserRepository:
    """Lookup and persistence queries for users."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def list_all(self) -> List[User]:
        return self.db.query(User).order_by(User.id.asc()).all()

    def add(self, user: User) -> User:
        """Stage a new user and flush to assign its ID."""
        self.db.add(user)
        self.db.flush()
        return user
