"""
Service layer for business logic.

This module exports all service classes for use in API endpoints.
"""

from backend.src.services.exceptions import (
    ServiceError,
    NotFoundError,
    ConflictError,
    ValidationError,
    InvalidStateError,
    InUseError,
)
from backend.src.services.user_service import UserService
from backend.src.services.email_template_service import EmailTemplateService
from backend.src.services.notification_attachment_service import NotificationAttachmentService
from backend.src.services.notification_service import NotificationService

__all__ = [
    "ServiceError",
    "NotFoundError",
    "ConflictError",
    "ValidationError",
    "InvalidStateError",
    "InUseError",
    "UserService",
    "EmailTemplateService",
    "NotificationAttachmentService",
    "NotificationService",
]
