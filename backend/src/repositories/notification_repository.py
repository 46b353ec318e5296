"""
Notification repository.

Thin data-access layer around the Notification model, including the
reverse lookups and counts used by the user and template projections.
"""

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from backend.src.models import Notification, NotificationStatus


class NotificationRepository:
    """Lookup, count and persistence queries for notifications."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, notification_id: int) -> Optional[Notification]:
        return (
            self.db.query(Notification)
            .filter(Notification.id == notification_id)
            .first()
        )

    def list_all(self) -> List[Notification]:
        return self.db.query(Notification).order_by(Notification.id.asc()).all()

    def list_by_status(self, status: NotificationStatus) -> List[Notification]:
        return (
            self.db.query(Notification)
            .filter(Notification.status == status)
            .order_by(Notification.id.asc())
            .all()
        )

    def list_pending(self) -> List[Notification]:
        return self.list_by_status(NotificationStatus.PENDING)

    def list_by_user(
        self,
        user_id: int,
        status: Optional[NotificationStatus] = None,
    ) -> List[Notification]:
        """
        Notifications addressed to a user, in ID order.

        Args:
            user_id: User ID
            status: Optional status filter
        """
        query = self.db.query(Notification).filter(Notification.user_id == user_id)
        if status is not None:
            query = query.filter(Notification.status == status)
        return query.order_by(Notification.id.asc()).all()

    def count_by_user(self, user_id: int) -> int:
        return (
            self.db.query(func.count(Notification.id))
            .filter(Notification.user_id == user_id)
            .scalar()
        ) or 0

    def count_by_template(self, template_id: int) -> int:
        return (
            self.db.query(func.count(Notification.id))
            .filter(Notification.email_template_id == template_id)
            .scalar()
        ) or 0

    def add(self, notification: Notification) -> Notification:
        """Stage a new notification and flush to assign its ID."""
        self.db.add(notification)
        self.db.flush()
        return notification
