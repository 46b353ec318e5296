"""
EmailTemplate model for reusable notification content.

Templates hold placeholder-bearing subject and body strings (e.g.
"Welcome {first_name}!"). They are linked from notifications for
branding and usage tracking; this system never renders them.
"""

from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, DateTime

from backend.src.models import Base


class EmailTemplate(Base):
    """
    Email template model.

    Attributes:
        id: Primary key
        name: Template name (unique)
        subject_template: Subject line with placeholders
        html_body_template: HTML body with placeholders
        plain_text_body_template: Plain text body with placeholders
        created_at: Creation timestamp
        updated_at: Last update timestamp

    Constraints:
        - name must be unique
        - Cannot delete a template referenced by notifications (RESTRICT)
    """

    __tablename__ = "email_templates"

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String(255), unique=True, nullable=False, index=True)
    subject_template = Column(String(255), nullable=False)
    html_body_template = Column(Text, nullable=False)
    plain_text_body_template = Column(Text, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<EmailTemplate(id={self.id}, name='{self.name}')>"

    def __str__(self) -> str:
        """Human-readable string representation."""
        return self.name
