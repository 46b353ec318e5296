"""
Unit tests for EmailTemplateService.

Tests CRUD operations, name uniqueness and in-use deletion protection.
"""

import pytest
from freezegun import freeze_time

from backend.src.models import EmailTemplate
from backend.src.schemas.email_template import CreateEmailTemplateRequest
from backend.src.services.email_template_service import EmailTemplateService
from backend.src.services.exceptions import NotFoundError, ConflictError, InUseError


@pytest.fixture
def template_service(test_db_session):
    """Create an EmailTemplateService instance for testing."""
    return EmailTemplateService(test_db_session)


@pytest.fixture
def template_request(sample_template_data):
    """Factory for validated template requests."""
    def _create(**kwargs):
        return CreateEmailTemplateRequest(**sample_template_data(**kwargs))
    return _create


class TestEmailTemplateServiceCreate:
    """Tests for template creation."""

    def test_create_template(self, template_service, template_request):
        """Templates are stored verbatim, placeholders included."""
        result = template_service.create_email_template(template_request(name="welcome"))

        assert result.id is not None
        assert result.name == "welcome"
        assert result.subject_template == "Welcome {first_name}!"
        assert result.html_body_template == "<h1>Hello {first_name}</h1>"
        assert result.plain_text_body_template == "Hello {first_name}"
        assert result.notifications_count == 0

    def test_create_template_duplicate_name(self, template_service, template_request, sample_template):
        """Duplicate names are rejected with a conflict."""
        sample_template(name="welcome")

        with pytest.raises(ConflictError) as exc_info:
            template_service.create_email_template(template_request(name="welcome"))

        assert exc_info.value.message == 'Email template with name "welcome" already exists'


class TestEmailTemplateServiceQueries:
    """Tests for template lookups."""

    def test_get_template(self, template_service, sample_template):
        """Test getting a template by ID."""
        template = sample_template(name="reset-password")

        result = template_service.get_email_template(template.id)

        assert result.name == "reset-password"

    def test_get_template_not_found(self, template_service):
        """Missing templates raise NotFoundError."""
        with pytest.raises(NotFoundError) as exc_info:
            template_service.get_email_template(42)

        assert str(exc_info.value) == "Email template with ID 42 not found"

    def test_get_all_templates_with_counts(self, template_service, sample_template, sample_notification):
        """Each projection carries its own notification count."""
        used = sample_template()
        unused = sample_template()
        sample_notification(email_template=used)

        result = {t.id: t.notifications_count for t in template_service.get_all_email_templates()}

        assert result == {used.id: 1, unused.id: 0}


class TestEmailTemplateServiceUpdate:
    """Tests for template replacement."""

    def test_update_template(self, template_service, template_request):
        """All four fields are overwritten and updated_at moves forward."""
        with freeze_time("2026-01-01 08:00:00"):
            created = template_service.create_email_template(template_request(name="welcome"))

        with freeze_time("2026-01-02 08:00:00"):
            result = template_service.update_email_template(
                created.id,
                template_request(
                    name="welcome-v2",
                    subject_template="Hi {first_name}",
                    html_body_template="<p>Hi</p>",
                    plain_text_body_template="Hi",
                ),
            )

        assert result.name == "welcome-v2"
        assert result.subject_template == "Hi {first_name}"
        assert result.html_body_template == "<p>Hi</p>"
        assert result.plain_text_body_template == "Hi"
        assert result.created_at == "2026-01-01 08:00:00"
        assert result.updated_at == "2026-01-02 08:00:00"

    def test_update_template_keeps_own_name(self, template_service, template_request, sample_template):
        """Re-submitting a template's own name is not a conflict."""
        template = sample_template(name="welcome")

        result = template_service.update_email_template(
            template.id, template_request(name="welcome", subject_template="Updated")
        )

        assert result.subject_template == "Updated"

    def test_update_template_name_conflict(self, template_service, template_request, sample_template):
        """Taking another template's name is a conflict."""
        sample_template(name="welcome")
        other = sample_template(name="goodbye")

        with pytest.raises(ConflictError):
            template_service.update_email_template(other.id, template_request(name="welcome"))

    def test_update_template_not_found(self, template_service, template_request):
        """Updating a missing template raises NotFoundError."""
        with pytest.raises(NotFoundError):
            template_service.update_email_template(7, template_request())


class TestEmailTemplateServiceDelete:
    """Tests for template deletion."""

    def test_delete_unused_template(self, template_service, sample_template, test_db_session):
        """Unreferenced templates are removed."""
        template = sample_template()
        template_id = template.id

        template_service.delete_email_template(template_id)

        assert test_db_session.query(EmailTemplate).filter_by(id=template_id).first() is None

    def test_delete_template_in_use(self, template_service, sample_template, sample_notification):
        """Templates referenced by notifications cannot be deleted."""
        template = sample_template()
        sample_notification(email_template=template)

        with pytest.raises(InUseError) as exc_info:
            template_service.delete_email_template(template.id)

        assert exc_info.value.message == (
            f"Cannot delete email template with ID {template.id} "
            "because it is being used by notifications"
        )
        assert exc_info.value.status_code == 400
        assert template_service.get_email_template(template.id).notifications_count == 1

    def test_delete_template_not_found(self, template_service):
        """Deleting a missing template raises NotFoundError."""
        with pytest.raises(NotFoundError):
            template_service.delete_email_template(123)
