"""
Email template service.

Provides business logic for creating, reading, replacing and deleting
email templates.

Design:
- Template names are unique
- Templates referenced by notifications cannot be deleted
- Placeholders are stored verbatim; no rendering happens here
"""

from datetime import datetime
from typing import List

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from backend.src.models import EmailTemplate
from backend.src.repositories import EmailTemplateRepository, NotificationRepository
from backend.src.schemas.email_template import (
    CreateEmailTemplateRequest,
    EmailTemplateResponse,
    email_template_to_response,
)
from backend.src.services.exceptions import NotFoundError, ConflictError, InUseError
from backend.src.utils.logging_config import get_logger


logger = get_logger("services")


def _name_conflict(name: str) -> ConflictError:
    return ConflictError(f'Email template with name "{name}" already exists')


class EmailTemplateService:
    """
    Service for managing email templates.

    Usage:
        >>> service = EmailTemplateService(db_session)
        >>> template = service.create_email_template(request)
        >>> service.delete_email_template(template.id)
    """

    def __init__(self, db: Session):
        """
        Initialize email template service.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db
        self.templates = EmailTemplateRepository(db)
        self.notifications = NotificationRepository(db)

    def create_email_template(self, request: CreateEmailTemplateRequest) -> EmailTemplateResponse:
        """
        Create a new email template.

        Raises:
            ConflictError: If a template with the same name exists
        """
        if self.templates.get_by_name(request.name):
            logger.warning(f"Rejected duplicate template name: {request.name}")
            raise _name_conflict(request.name)

        now = datetime.utcnow()
        try:
            template = self.templates.add(EmailTemplate(
                name=request.name,
                subject_template=request.subject_template,
                html_body_template=request.html_body_template,
                plain_text_body_template=request.plain_text_body_template,
                created_at=now,
                updated_at=now,
            ))
            self.db.commit()
            self.db.refresh(template)

        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Failed to create email template '{request.name}': {e}")
            raise _name_conflict(request.name)

        logger.info(f"Created email template: {template.name} (id={template.id})")
        return email_template_to_response(template, notifications_count=0)

    def get_template_model(self, template_id: int) -> EmailTemplate:
        """
        Get an email template entity by ID.

        Raises:
            NotFoundError: If template not found
        """
        template = self.templates.get_by_id(template_id)
        if not template:
            raise NotFoundError("Email template", template_id)
        return template

    def get_email_template(self, template_id: int) -> EmailTemplateResponse:
        """Get an email template by ID."""
        return self._to_response(self.get_template_model(template_id))

    def get_all_email_templates(self) -> List[EmailTemplateResponse]:
        """List all email templates ordered by ID."""
        return [self._to_response(t) for t in self.templates.list_all()]

    def update_email_template(
        self,
        template_id: int,
        request: CreateEmailTemplateRequest,
    ) -> EmailTemplateResponse:
        """
        Replace all fields of an email template.

        Args:
            template_id: Template ID
            request: Validated replacement values

        Raises:
            NotFoundError: If template not found
            ConflictError: If the new name belongs to another template
        """
        template = self.get_template_model(template_id)

        existing = self.templates.get_by_name(request.name)
        if existing and existing.id != template.id:
            logger.warning(f"Rejected template rename to existing name: {request.name}")
            raise _name_conflict(request.name)

        template.name = request.name
        template.subject_template = request.subject_template
        template.html_body_template = request.html_body_template
        template.plain_text_body_template = request.plain_text_body_template
        template.updated_at = datetime.utcnow()

        try:
            self.db.commit()
            self.db.refresh(template)

        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Failed to update email template {template_id}: {e}")
            raise _name_conflict(request.name)

        logger.info(f"Updated email template: {template.name} (id={template.id})")
        return self._to_response(template)

    def delete_email_template(self, template_id: int) -> None:
        """
        Delete an email template.

        Raises:
            NotFoundError: If template not found
            InUseError: If any notification references the template
        """
        template = self.get_template_model(template_id)

        if self.notifications.count_by_template(template.id) > 0:
            logger.warning(f"Rejected delete of email template {template_id}: in use")
            raise self._in_use(template_id)

        try:
            self.templates.delete(template)
            self.db.commit()

        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Failed to delete email template {template_id}: {e}")
            raise self._in_use(template_id)

        logger.info(f"Deleted email template: {template.name} (id={template_id})")

    @staticmethod
    def _in_use(template_id: int) -> InUseError:
        return InUseError(
            f"Cannot delete email template with ID {template_id} "
            "because it is being used by notifications"
        )

    def _to_response(self, template: EmailTemplate) -> EmailTemplateResponse:
        return email_template_to_response(
            template,
            notifications_count=self.notifications.count_by_template(template.id),
        )
