"""
Notification attachment service.

Provides business logic for the standalone attachment endpoints: create,
read, list by notification, replace and delete. Attachments are file
references only; no file content is stored or checked.
"""

from datetime import datetime
from typing import List

from sqlalchemy.orm import Session

from backend.src.models import Notification, NotificationAttachment
from backend.src.repositories import NotificationAttachmentRepository, NotificationRepository
from backend.src.schemas.notification_attachment import (
    AttachmentPayload,
    CreateNotificationAttachmentRequest,
    NotificationAttachmentResponse,
    attachment_to_response,
)
from backend.src.services.exceptions import NotFoundError
from backend.src.utils.logging_config import get_logger


logger = get_logger("services")


class NotificationAttachmentService:
    """
    Service for managing notification attachments.

    Usage:
        >>> service = NotificationAttachmentService(db_session)
        >>> attachment = service.create_attachment(request)
        >>> service.get_attachments_by_notification(attachment.notification_id)
    """

    def __init__(self, db: Session):
        """
        Initialize attachment service.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db
        self.attachments = NotificationAttachmentRepository(db)
        self.notifications = NotificationRepository(db)

    def add_attachments(
        self,
        notification: Notification,
        payloads: List[AttachmentPayload],
    ) -> List[NotificationAttachment]:
        """
        Stage attachments for a notification without committing.

        Used by the notification create and send workflows.

        Args:
            notification: Owning notification (already flushed)
            payloads: Validated attachment payloads

        Returns:
            The staged NotificationAttachment instances
        """
        now = datetime.utcnow()
        return [
            self.attachments.add(NotificationAttachment(
                notification_id=notification.id,
                file_name=payload.file_name,
                mime_type=payload.mime_type,
                file_path=payload.file_path,
                created_at=now,
            ))
            for payload in payloads
        ]

    def create_attachment(
        self,
        request: CreateNotificationAttachmentRequest,
    ) -> NotificationAttachmentResponse:
        """
        Create an attachment for an existing notification.

        Raises:
            NotFoundError: If the notification does not exist
        """
        notification = self._get_notification(request.notification_id)

        attachment = self.add_attachments(notification, [request])[0]
        self.db.commit()
        self.db.refresh(attachment)

        logger.info(
            f"Created attachment {attachment.file_name} (id={attachment.id}) "
            f"for notification {notification.id}"
        )
        return attachment_to_response(attachment)

    def get_attachment_model(self, attachment_id: int) -> NotificationAttachment:
        """
        Get an attachment entity by ID.

        Raises:
            NotFoundError: If attachment not found
        """
        attachment = self.attachments.get_by_id(attachment_id)
        if not attachment:
            raise NotFoundError("Notification attachment", attachment_id)
        return attachment

    def get_attachment(self, attachment_id: int) -> NotificationAttachmentResponse:
        """Get an attachment by ID."""
        return attachment_to_response(self.get_attachment_model(attachment_id))

    def get_all_attachments(self) -> List[NotificationAttachmentResponse]:
        """List all attachments ordered by ID."""
        return [attachment_to_response(a) for a in self.attachments.list_all()]

    def get_attachments_by_notification(
        self,
        notification_id: int,
    ) -> List[NotificationAttachmentResponse]:
        """
        List the attachments of one notification.

        Raises:
            NotFoundError: If the notification does not exist
        """
        notification = self._get_notification(notification_id)
        return [
            attachment_to_response(a)
            for a in self.attachments.list_by_notification(notification.id)
        ]

    def update_attachment(
        self,
        attachment_id: int,
        request: CreateNotificationAttachmentRequest,
    ) -> NotificationAttachmentResponse:
        """
        Replace an attachment's fields, re-linking it if notification_id changes.

        Raises:
            NotFoundError: If the attachment or the new notification is missing
        """
        attachment = self.get_attachment_model(attachment_id)

        if attachment.notification_id != request.notification_id:
            notification = self._get_notification(request.notification_id)
            attachment.notification = notification
            logger.info(
                f"Re-linked attachment {attachment_id} to notification {notification.id}"
            )

        attachment.file_name = request.file_name
        attachment.mime_type = request.mime_type
        attachment.file_path = request.file_path

        self.db.commit()
        self.db.refresh(attachment)

        logger.info(f"Updated attachment {attachment.file_name} (id={attachment_id})")
        return attachment_to_response(attachment)

    def delete_attachment(self, attachment_id: int) -> None:
        """
        Delete an attachment.

        Raises:
            NotFoundError: If attachment not found
        """
        attachment = self.get_attachment_model(attachment_id)
        self.attachments.delete(attachment)
        self.db.commit()
        logger.info(f"Deleted attachment id={attachment_id}")

    def _get_notification(self, notification_id: int) -> Notification:
        notification = self.notifications.get_by_id(notification_id)
        if not notification:
            raise NotFoundError("Notification", notification_id)
        return notification
