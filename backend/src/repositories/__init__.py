"""
Repository layer for data access.

Each repository wraps one model and owns the lookup, count and persist
queries the services need. Reverse lookups (notifications of a user,
attachments of a notification) live here instead of on the models.
"""

from backend.src.repositories.user_repository import UserRepository
from backend.src.repositories.email_template_repository import EmailTemplateRepository
from backend.src.repositories.notification_repository import NotificationRepository
from backend.src.repositories.notification_attachment_repository import (
    NotificationAttachmentRepository,
)

__all__ = [
    "UserRepository",
    "EmailTemplateRepository",
    "NotificationRepository",
    "NotificationAttachmentRepository",
]
