"""
Pydantic schemas for notification attachment validation and serialization.

AttachmentPayload is the attachment shape embedded in notification create and
send requests; CreateNotificationAttachmentRequest adds the owning
notification for the standalone attachment endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field, StrictInt, field_validator

from backend.src.schemas.common import check_positive, format_datetime, require_text


class AttachmentPayload(BaseModel):
    """
    File reference fields shared by every attachment request.

    Rules:
        file_name: required, max 255 chars
        mime_type: required, max 100 chars
        file_path: required, max 500 chars
    """

    file_name: Optional[str] = Field(default=None, validate_default=True)
    mime_type: Optional[str] = Field(default=None, validate_default=True)
    file_path: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("file_name")
    @classmethod
    def validate_file_name(cls, v: Optional[str]) -> str:
        return require_text(v, "File name", 255)

    @field_validator("mime_type")
    @classmethod
    def validate_mime_type(cls, v: Optional[str]) -> str:
        return require_text(v, "MIME type", 100)

    @field_validator("file_path")
    @classmethod
    def validate_file_path(cls, v: Optional[str]) -> str:
        return require_text(v, "File path", 500)


class CreateNotificationAttachmentRequest(AttachmentPayload):
    """
    Request schema for creating or replacing a standalone attachment.

    Example:
        {
          "notification_id": 1,
          "file_name": "invoice.pdf",
          "mime_type": "application/pdf",
          "file_path": "/uploads/attachments/invoice_456.pdf"
        }
    """

    notification_id: Optional[StrictInt] = Field(default=None, validate_default=True)

    @field_validator("notification_id")
    @classmethod
    def validate_notification_id(cls, v: Optional[int]) -> int:
        if v is None:
            raise ValueError("Notification ID is required")
        return check_positive(v, "Notification ID")


class NotificationAttachmentResponse(BaseModel):
    """Response schema for a single attachment."""

    id: int
    notification_id: int
    notification_subject: Optional[str] = None
    file_name: str
    mime_type: str
    file_path: str
    created_at: str


def attachment_to_response(attachment) -> NotificationAttachmentResponse:
    """Convert NotificationAttachment model to NotificationAttachmentResponse."""
    notification = attachment.notification
    return NotificationAttachmentResponse(
        id=attachment.id,
        notification_id=attachment.notification_id,
        notification_subject=notification.subject if notification else None,
        file_name=attachment.file_name,
        mime_type=attachment.mime_type,
        file_path=attachment.file_path,
        created_at=format_datetime(attachment.created_at),
    )
