"""
Email template repository.

Thin data-access layer around the EmailTemplate model.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from backend.src.models import EmailTemplate


class EmailTemplateRepository:
    """Lookup and persistence queries for email templates."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, template_id: int) -> Optional[EmailTemplate]:
        return self.db.query(EmailTemplate).filter(EmailTemplate.id == template_id).first()

    def get_by_name(self, name: str) -> Optional[EmailTemplate]:
        return self.db.query(EmailTemplate).filter(EmailTemplate.name == name).first()

    def list_all(self) -> List[EmailTemplate]:
        return self.db.query(EmailTemplate).order_by(EmailTemplate.id.asc()).all()

    def add(self, template: EmailTemplate) -> EmailTemplate:
        """Stage a new template and flush to assign its ID."""
        self.db.add(template)
        self.db.flush()
        return template

    def delete(self, template: EmailTemplate) -> None:
        self.db.delete(template)
        self.db.flush()
