"""
Notification service: create, query and send notifications.

Provides the notification workflow:
- Create a pending notification addressed to a user, a raw email address,
  or both, optionally linked to an email template and carrying attachments
- Query by ID, status, user, or the pending outbox
- Send a pending notification (simulated), optionally adding attachments

Status lifecycle:
- Created as pending
- send(): pending -> sent, stamps sent_at
- Any other current status rejects send with InvalidStateError
"""

from datetime import datetime
from typing import List, Optional, Union

from sqlalchemy.orm import Session

from backend.src.models import Notification, NotificationStatus
from backend.src.repositories import (
    EmailTemplateRepository,
    NotificationAttachmentRepository,
    NotificationRepository,
    UserRepository,
)
from backend.src.schemas.notification import (
    CreateNotificationRequest,
    NotificationResponse,
    SendNotificationRequest,
    notification_to_response,
)
from backend.src.services.exceptions import (
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from backend.src.services.notification_attachment_service import NotificationAttachmentService
from backend.src.utils.logging_config import get_logger


logger = get_logger("services")


class NotificationService:
    """
    Service for the notification lifecycle.

    Usage:
        >>> service = NotificationService(db_session)
        >>> created = service.create_notification(request)
        >>> sent = service.send_notification(created.id)
        >>> sent.status
        'sent'
    """

    def __init__(
        self,
        db: Session,
        attachment_service: Optional[NotificationAttachmentService] = None,
    ):
        """
        Initialize notification service.

        Args:
            db: SQLAlchemy database session
            attachment_service: Attachment service sharing the same session
                (built from db when omitted)
        """
        self.db = db
        self.notifications = NotificationRepository(db)
        self.users = UserRepository(db)
        self.templates = EmailTemplateRepository(db)
        self.attachments = NotificationAttachmentRepository(db)
        self.attachment_service = attachment_service or NotificationAttachmentService(db)

    # =========================================================================
    # Create
    # =========================================================================

    def create_notification(self, request: CreateNotificationRequest) -> NotificationResponse:
        """
        Create a pending notification.

        Args:
            request: Validated creation request

        Returns:
            NotificationResponse with attachments_count

        Raises:
            ValidationError: If neither user_id nor recipient_email is given
            NotFoundError: If the referenced user or email template is missing
        """
        if not request.has_recipient:
            raise ValidationError(
                "Either user_id or recipient_email must be provided",
                field="user_id",
            )

        user = None
        if request.user_id is not None:
            user = self.users.get_by_id(request.user_id)
            if not user:
                raise NotFoundError("User", request.user_id)

        template = None
        if request.email_template_id is not None:
            template = self.templates.get_by_id(request.email_template_id)
            if not template:
                raise NotFoundError("Email template", request.email_template_id)

        notification = self.notifications.add(Notification(
            user=user,
            recipient_email=request.recipient_email,
            subject=request.subject,
            body=request.body,
            status=NotificationStatus.PENDING,
            created_at=datetime.utcnow(),
            sent_at=None,
            email_template=template,
        ))
        self.db.commit()

        if request.attachments:
            self.attachment_service.add_attachments(notification, request.attachments)
            self.db.commit()

        self.db.refresh(notification)
        logger.info(
            f"Created notification {notification.id} "
            f"(user_id={notification.user_id}, recipient_email={notification.recipient_email}, "
            f"attachments={len(request.attachments)})"
        )
        return self._to_response(notification)

    # =========================================================================
    # Queries
    # =========================================================================

    def get_notification_model(self, notification_id: int) -> Notification:
        """
        Get a notification entity by ID.

        Raises:
            NotFoundError: If notification not found
        """
        notification = self.notifications.get_by_id(notification_id)
        if not notification:
            raise NotFoundError("Notification", notification_id)
        return notification

    def get_notification(self, notification_id: int) -> NotificationResponse:
        """Get a notification by ID."""
        return self._to_response(self.get_notification_model(notification_id))

    def get_all_notifications(self) -> List[NotificationResponse]:
        """List all notifications ordered by ID."""
        return self._to_responses(self.notifications.list_all())

    def get_pending_notifications(self) -> List[NotificationResponse]:
        """List pending notifications."""
        return self._to_responses(self.notifications.list_pending())

    def get_notifications_by_status(
        self,
        status: Union[NotificationStatus, str],
    ) -> List[NotificationResponse]:
        """
        List notifications in a given status.

        Raises:
            ValidationError: If status is not a known value
        """
        return self._to_responses(self.notifications.list_by_status(parse_status(status)))

    def get_notifications_by_user(
        self,
        user_id: int,
        status: Optional[Union[NotificationStatus, str]] = None,
    ) -> List[NotificationResponse]:
        """
        List notifications addressed to a user.

        Raises:
            NotFoundError: If the user does not exist
            ValidationError: If status is given and not a known value
        """
        if not self.users.get_by_id(user_id):
            raise NotFoundError("User", user_id)
        status_filter = parse_status(status) if status is not None else None
        return self._to_responses(self.notifications.list_by_user(user_id, status_filter))

    def list_notifications(
        self,
        status: Optional[str] = None,
        user_id: Optional[int] = None,
    ) -> List[NotificationResponse]:
        """
        List notifications with optional status and user filters.

        Args:
            status: Status value filter (e.g., "pending")
            user_id: Recipient user filter

        Raises:
            NotFoundError: If user_id is given and the user does not exist
            ValidationError: If status is not a known value
        """
        if user_id is not None:
            return self.get_notifications_by_user(user_id, status)
        if status is not None:
            return self.get_notifications_by_status(status)
        return self.get_all_notifications()

    # =========================================================================
    # Send
    # =========================================================================

    def get_sendable_notification(self, notification_id: int) -> Notification:
        """
        Get a notification that is allowed to be sent.

        Raises:
            NotFoundError: If notification not found
            InvalidStateError: If the notification is not pending
        """
        notification = self.get_notification_model(notification_id)
        if not notification.status.can_be_sent:
            logger.warning(
                f"Rejected send of notification {notification_id}: "
                f"status is {notification.status.value}"
            )
            raise InvalidStateError(
                f"Notification cannot be sent. Current status: {notification.status.value}"
            )
        return notification

    def send_notification(
        self,
        notification_id: int,
        send_request: Optional[SendNotificationRequest] = None,
    ) -> NotificationResponse:
        """
        Send a pending notification.

        Delivery is simulated: the transition is recorded and logged, no
        email is transmitted.

        Args:
            notification_id: Notification ID
            send_request: Optional attachments to add before sending

        Returns:
            NotificationResponse in sent status

        Raises:
            NotFoundError: If notification not found
            InvalidStateError: If the notification is not pending
        """
        notification = self.get_sendable_notification(notification_id)

        if send_request is not None and send_request.has_attachments:
            self.attachment_service.add_attachments(notification, send_request.attachments)
            self.db.commit()

        notification.mark_sent(datetime.utcnow())
        self.db.commit()
        self.db.refresh(notification)

        logger.info(
            f"Sent notification {notification.id} to "
            f"{notification.recipient_email or (notification.user.email if notification.user else None)}"
        )
        return self._to_response(notification)

    # =========================================================================
    # Projection helpers
    # =========================================================================

    def _to_response(self, notification: Notification) -> NotificationResponse:
        return notification_to_response(
            notification,
            attachments_count=self.attachments.count_by_notification(notification.id),
        )

    def _to_responses(self, notifications: List[Notification]) -> List[NotificationResponse]:
        return [self._to_response(n) for n in notifications]


def parse_status(status: Union[NotificationStatus, str]) -> NotificationStatus:
    """
    Coerce a raw status value to NotificationStatus.

    Raises:
        ValidationError: If the value is not a known status
    """
    if isinstance(status, NotificationStatus):
        return status
    try:
        return NotificationStatus(status)
    except ValueError:
        raise ValidationError(
            f"Invalid status: {status}. Must be one of: {', '.join(NotificationStatus.values())}",
            field="status",
        )
