"""
Notification attachment repository.

Thin data-access layer around the NotificationAttachment model.
"""

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from backend.src.models import NotificationAttachment


class NotificationAttachmentRepository:
    """Lookup, count and persistence queries for attachments."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, attachment_id: int) -> Optional[NotificationAttachment]:
        return (
            self.db.query(NotificationAttachment)
            .filter(NotificationAttachment.id == attachment_id)
            .first()
        )

    def list_all(self) -> List[NotificationAttachment]:
        return (
            self.db.query(NotificationAttachment)
            .order_by(NotificationAttachment.id.asc())
            .all()
        )

    def list_by_notification(self, notification_id: int) -> List[NotificationAttachment]:
        return (
            self.db.query(NotificationAttachment)
            .filter(NotificationAttachment.notification_id == notification_id)
            .order_by(NotificationAttachment.id.asc())
            .all()
        )

    def count_by_notification(self, notification_id: int) -> int:
        return (
            self.db.query(func.count(NotificationAttachment.id))
            .filter(NotificationAttachment.notification_id == notification_id)
            .scalar()
        ) or 0

    def add(self, attachment: NotificationAttachment) -> NotificationAttachment:
        self.db.add(attachment)
        self.db.flush()
        return attachment

    def delete(self, attachment: NotificationAttachment) -> None:
        self.db.delete(attachment)
        self.db.flush()
