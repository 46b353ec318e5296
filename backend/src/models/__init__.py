"""
SQLAlchemy models for the Notification API.

This module provides the declarative base class and imports all models
to ensure they are registered with SQLAlchemy's metadata.
"""

from sqlalchemy.orm import declarative_base

# Create the declarative base class
# All models will inherit from this Base class
Base = declarative_base()


# Import all models here so they are registered with Base.metadata
# This is required for Alembic autogenerate to detect models
from backend.src.models.user import User
from backend.src.models.email_template import EmailTemplate
from backend.src.models.notification import Notification, NotificationStatus
from backend.src.models.notification_attachment import NotificationAttachment

__all__ = [
    "Base",
    "User",
    "EmailTemplate",
    "Notification",
    "NotificationStatus",
    "NotificationAttachment",
]
