"""
Notification model and status lifecycle.

A notification is a message record addressed to a user, to a raw email
address, or to both. It is created pending and moved to sent by the send
operation, which is simulated (no transport is involved).

Status lifecycle:
- pending -> sent (send operation, stamps sent_at)
- failed, delivered, archived exist as alternate states for external updates
"""

import enum
from datetime import datetime
from typing import List, Optional

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship

from backend.src.models import Base


class NotificationStatus(str, enum.Enum):
    """
    Notification status enumeration.

    - PENDING: Created, waiting to be sent (the only sendable state)
    - SENT: Send operation completed
    - FAILED: Delivery failed
    - DELIVERED: Delivery confirmed
    - ARCHIVED: Retired from active lists
    """
    PENDING = "pending"
    SENT = "sent"
    FAILED = "failed"
    DELIVERED = "delivered"
    ARCHIVED = "archived"

    @property
    def label(self) -> str:
        """Human-readable label (e.g., "Pending")."""
        return self.value.capitalize()

    @property
    def is_completed(self) -> bool:
        """True once the notification has left the outbox."""
        return self in (
            NotificationStatus.SENT,
            NotificationStatus.DELIVERED,
            NotificationStatus.ARCHIVED,
        )

    @property
    def can_be_sent(self) -> bool:
        """Only pending notifications can be sent."""
        return self is NotificationStatus.PENDING

    @classmethod
    def values(cls) -> List[str]:
        """All raw status values, in declaration order."""
        return [status.value for status in cls]


class Notification(Base):
    """
    Notification message record.

    Attributes:
        id: Primary key
        user_id: Optional recipient user (FK to users)
        recipient_email: Optional raw recipient address
        subject: Subject line (max 255 chars)
        body: Message body
        status: NotificationStatus (default: pending)
        created_at: Creation timestamp
        sent_at: Timestamp of the send operation (null until sent)
        email_template_id: Optional linked template (FK to email_templates)

    Relationships:
        user: Recipient User (many-to-one)
        email_template: Linked EmailTemplate (many-to-one)

    Attachments reference notifications with ON DELETE CASCADE and are
    looked up through NotificationAttachmentRepository.
    """

    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, autoincrement=True)

    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    recipient_email = Column(String(255), nullable=True)

    subject = Column(String(255), nullable=False)
    body = Column(Text, nullable=False)

    # Stored as plain string values (pending, sent, ...)
    status = Column(
        Enum(
            NotificationStatus,
            native_enum=False,
            length=50,
            values_callable=lambda x: [e.value for e in x],
        ),
        default=NotificationStatus.PENDING,
        nullable=False,
        index=True,
    )

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    sent_at = Column(DateTime, nullable=True)

    email_template_id = Column(
        Integer,
        ForeignKey("email_templates.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )

    user = relationship("User", lazy="joined")
    email_template = relationship("EmailTemplate", lazy="select")

    def mark_sent(self, sent_at: Optional[datetime] = None) -> None:
        """Transition to SENT and stamp sent_at (caller checks can_be_sent)."""
        self.status = NotificationStatus.SENT
        self.sent_at = sent_at or datetime.utcnow()

    def __repr__(self) -> str:
        """String representation for debugging."""
        status = self.status.value if self.status else None
        return (
            f"<Notification("
            f"id={self.id}, "
            f"subject='{self.subject}', "
            f"status={status}"
            f")>"
        )

    def __str__(self) -> str:
        """Human-readable string representation."""
        return self.subject
