"""
User model for notification recipients.

Users are the people notifications can be addressed to. A notification may
reference a user instead of (or in addition to) a raw recipient email.

Design Rationale:
- Email is globally unique (enforced by a unique index, the service layer
  checks first for a friendlier error)
- Notifications point at users through a nullable foreign key; the reverse
  direction is a repository query, not a relationship collection
"""

from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime

from backend.src.models import Base


class User(Base):
    """
    User model representing a notification recipient.

    Attributes:
        id: Primary key
        email: Email address (unique)
        first_name: First name
        last_name: Last name
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)

    email = Column(String(255), unique=True, nullable=False, index=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False
    )

    @property
    def full_name(self) -> str:
        """First and last name joined with a space."""
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, email='{self.email}')>"

    def __str__(self) -> str:
        """Human-readable string representation."""
        return self.full_name
