"""
Pydantic schemas for notification API request/response validation.

Provides data validation and serialization for:
- Notification creation requests (with optional inline attachments)
- Send requests (optional attachments added at send time)
- Notification response projection

Design:
- user_id and recipient_email are each optional; the service enforces that
  at least one is present
- Status is exposed as its raw value plus a human label
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, StrictInt, field_validator

from backend.src.schemas.common import (
    check_email,
    check_length,
    check_positive,
    format_datetime,
    require_text,
)
from backend.src.schemas.notification_attachment import AttachmentPayload


def _none_to_empty_list(v: Any) -> Any:
    return [] if v is None else v


# ============================================================================
# Request Schemas
# ============================================================================


class CreateNotificationRequest(BaseModel):
    """
    Schema for creating a notification.

    Required:
        subject: max 255 chars
        body: non-blank text

    Optional:
        user_id: Recipient user ID (positive)
        recipient_email: Recipient address (valid email, max 255 chars)
        email_template_id: Linked template ID (positive)
        attachments: File references created alongside the notification

    Example:
        >>> request = CreateNotificationRequest(
        ...     subject="Welcome to Our Service",
        ...     body="Thank you for joining our service!",
        ...     user_id=1,
        ... )
    """

    subject: Optional[str] = Field(default=None, validate_default=True)
    body: Optional[str] = Field(default=None, validate_default=True)
    user_id: Optional[StrictInt] = None
    recipient_email: Optional[str] = None
    email_template_id: Optional[StrictInt] = None
    attachments: List[AttachmentPayload] = Field(default_factory=list)

    @field_validator("subject")
    @classmethod
    def validate_subject(cls, v: Optional[str]) -> str:
        return require_text(v, "Subject", 255)

    @field_validator("body")
    @classmethod
    def validate_body(cls, v: Optional[str]) -> str:
        return require_text(v, "Body")

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, v: Optional[int]) -> Optional[int]:
        return check_positive(v, "User ID")

    @field_validator("email_template_id")
    @classmethod
    def validate_email_template_id(cls, v: Optional[int]) -> Optional[int]:
        return check_positive(v, "Email template ID")

    @field_validator("recipient_email")
    @classmethod
    def validate_recipient_email(cls, v: Optional[str]) -> Optional[str]:
        v = check_length(v, "Recipient email", 255)
        return check_email(v, "Recipient email must be a valid email address")

    @field_validator("attachments", mode="before")
    @classmethod
    def default_attachments(cls, v: Any) -> Any:
        return _none_to_empty_list(v)

    @property
    def has_recipient(self) -> bool:
        """True when user_id or recipient_email is provided."""
        return self.user_id is not None or self.recipient_email is not None

    model_config = {
        "json_schema_extra": {
            "example": {
                "subject": "Welcome to Our Service",
                "body": "Thank you for joining our service!",
                "user_id": 1,
                "email_template_id": 1,
                "attachments": [
                    {
                        "file_name": "welcome_guide.pdf",
                        "mime_type": "application/pdf",
                        "file_path": "/uploads/attachments/welcome_guide_123.pdf",
                    }
                ],
            }
        }
    }


class SendNotificationRequest(BaseModel):
    """Optional body of the send operation."""

    attachments: List[AttachmentPayload] = Field(default_factory=list)

    @field_validator("attachments", mode="before")
    @classmethod
    def default_attachments(cls, v: Any) -> Any:
        return _none_to_empty_list(v)

    @property
    def has_attachments(self) -> bool:
        """True when at least one attachment is supplied."""
        return len(self.attachments) > 0


# ============================================================================
# Response Schemas
# ============================================================================


class NotificationResponse(BaseModel):
    """Response schema for a single notification."""

    id: int
    user_id: Optional[int] = None
    user_name: Optional[str] = Field(None, description="Linked user's full name")
    user_email: Optional[str] = Field(None, description="Linked user's email")
    recipient_email: Optional[str] = None
    subject: str
    body: str
    status: str = Field(..., description="pending, sent, failed, delivered or archived")
    status_label: str
    created_at: str
    sent_at: Optional[str] = None
    attachments_count: int = Field(..., ge=0)
    email_template_id: Optional[int] = None


class SendNotificationResponse(NotificationResponse):
    """Response schema for the send operation."""

    message: str = "Notification sent successfully"


def notification_to_response(notification, attachments_count: int = 0) -> NotificationResponse:
    """
    Convert Notification model to NotificationResponse schema.

    Args:
        notification: Notification model instance
        attachments_count: Number of attachments currently linked

    Returns:
        NotificationResponse schema instance
    """
    user = notification.user
    return NotificationResponse(
        id=notification.id,
        user_id=user.id if user else None,
        user_name=user.full_name if user else None,
        user_email=user.email if user else None,
        recipient_email=notification.recipient_email,
        subject=notification.subject,
        body=notification.body,
        status=notification.status.value,
        status_label=notification.status.label,
        created_at=format_datetime(notification.created_at),
        sent_at=format_datetime(notification.sent_at),
        attachments_count=attachments_count,
        email_template_id=notification.email_template_id,
    )
