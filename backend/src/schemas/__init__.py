"""
Pydantic schemas for API request/response validation.

This module exports all schema classes for use in API endpoints.
"""

from backend.src.schemas.common import format_datetime
from backend.src.schemas.user import (
    CreateUserRequest,
    UserResponse,
    user_to_response,
)
from backend.src.schemas.email_template import (
    CreateEmailTemplateRequest,
    EmailTemplateResponse,
    email_template_to_response,
)
from backend.src.schemas.notification_attachment import (
    AttachmentPayload,
    CreateNotificationAttachmentRequest,
    NotificationAttachmentResponse,
    attachment_to_response,
)
from backend.src.schemas.notification import (
    CreateNotificationRequest,
    SendNotificationRequest,
    NotificationResponse,
    SendNotificationResponse,
    notification_to_response,
)

__all__ = [
    "format_datetime",
    "CreateUserRequest",
    "UserResponse",
    "user_to_response",
    "CreateEmailTemplateRequest",
    "EmailTemplateResponse",
    "email_template_to_response",
    "AttachmentPayload",
    "CreateNotificationAttachmentRequest",
    "NotificationAttachmentResponse",
    "attachment_to_response",
    "CreateNotificationRequest",
    "SendNotificationRequest",
    "NotificationResponse",
    "SendNotificationResponse",
    "notification_to_response",
]
