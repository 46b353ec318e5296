"""
NotificationAttachment model for file references owned by a notification.

An attachment records a file's name, MIME type and storage path. It never
exists without its notification: the foreign key is required and cascades
on delete.
"""

from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from backend.src.models import Base


class NotificationAttachment(Base):
    """
    File reference attached to a notification.

    Attributes:
        id: Primary key
        notification_id: Owning notification (FK, required, cascade delete)
        file_name: Original file name (max 255 chars)
        mime_type: MIME type (max 100 chars)
        file_path: Storage path (max 500 chars)
        created_at: Creation timestamp
    """

    __tablename__ = "notification_attachments"

    id = Column(Integer, primary_key=True, autoincrement=True)

    notification_id = Column(
        Integer,
        ForeignKey("notifications.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    file_name = Column(String(255), nullable=False)
    mime_type = Column(String(100), nullable=False)
    file_path = Column(String(500), nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    notification = relationship("Notification", lazy="joined")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<NotificationAttachment("
            f"id={self.id}, "
            f"notification_id={self.notification_id}, "
            f"file_name='{self.file_name}'"
            f")>"
        )
