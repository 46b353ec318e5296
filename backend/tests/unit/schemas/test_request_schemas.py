"""
Unit tests for request schemas and response adapters.

Tests field rules and their messages, and the wire timestamp format.
"""

import pytest
from datetime import datetime
from pydantic import ValidationError

from backend.src.models import User
from backend.src.schemas.common import MAX_ID, format_datetime
from backend.src.schemas.email_template import CreateEmailTemplateRequest
from backend.src.schemas.notification import CreateNotificationRequest, SendNotificationRequest
from backend.src.schemas.notification_attachment import CreateNotificationAttachmentRequest
from backend.src.schemas.user import CreateUserRequest, user_to_response


def _messages(exc_info):
    return [str(e["ctx"]["error"]) for e in exc_info.value.errors() if "ctx" in e]


class TestCreateUserRequest:
    """Tests for user request rules."""

    def test_valid(self):
        request = CreateUserRequest(email="john@example.com", first_name="John", last_name="Doe")
        assert request.email == "john@example.com"

    def test_missing_fields_all_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateUserRequest()

        assert _messages(exc_info) == [
            "Email is required",
            "First name is required",
            "Last name is required",
        ]

    def test_blank_is_missing(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateUserRequest(email="a@example.com", first_name="   ", last_name="Doe")

        assert _messages(exc_info) == ["First name is required"]

    def test_invalid_email(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateUserRequest(email="not-an-email", first_name="A", last_name="B")

        assert _messages(exc_info) == ["Email must be a valid email address"]

    def test_email_too_long(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateUserRequest(email="a" * 250 + "@example.com", first_name="A", last_name="B")

        assert _messages(exc_info) == ["Email cannot exceed 255 characters"]


class TestCreateEmailTemplateRequest:
    """Tests for template request rules."""

    def test_subject_template_limit(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateEmailTemplateRequest(
                name="n",
                subject_template="x" * 256,
                html_body_template="<p></p>",
                plain_text_body_template="t",
            )

        assert _messages(exc_info) == ["Subject template cannot exceed 255 characters"]


class TestCreateNotificationRequest:
    """Tests for notification request rules."""

    def test_recipient_fields_optional(self):
        request = CreateNotificationRequest(subject="s", body="b")

        assert request.user_id is None
        assert request.recipient_email is None
        assert request.attachments == []
        assert request.has_recipient is False

    def test_null_attachments_become_empty(self):
        request = CreateNotificationRequest(subject="s", body="b", attachments=None)
        assert request.attachments == []

    def test_non_positive_ids(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateNotificationRequest(subject="s", body="b", user_id=0, email_template_id=-1)

        assert _messages(exc_info) == [
            "User ID must be positive",
            "Email template ID must be positive",
        ]

    def test_ids_beyond_integer_range(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateNotificationRequest(subject="s", body="b", user_id=10**20, email_template_id=MAX_ID + 1)

        assert _messages(exc_info) == [
            f"User ID cannot exceed {MAX_ID}",
            f"Email template ID cannot exceed {MAX_ID}",
        ]

    def test_boolean_ids_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateNotificationRequest(subject="s", body="b", user_id=True, email_template_id=False)

        assert [e["loc"] for e in exc_info.value.errors()] == [("user_id",), ("email_template_id",)]

    def test_invalid_recipient_email(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateNotificationRequest(subject="s", body="b", recipient_email="nope")

        assert _messages(exc_info) == ["Recipient email must be a valid email address"]

    def test_invalid_nested_attachment(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateNotificationRequest(
                subject="s",
                body="b",
                user_id=1,
                attachments=[{"file_name": "a.pdf", "mime_type": "m" * 101, "file_path": "/a"}],
            )

        assert _messages(exc_info) == ["MIME type cannot exceed 100 characters"]

    def test_send_request_has_attachments(self):
        assert SendNotificationRequest().has_attachments is False
        assert SendNotificationRequest(
            attachments=[{"file_name": "a", "mime_type": "b", "file_path": "c"}]
        ).has_attachments is True


class TestCreateNotificationAttachmentRequest:
    """Tests for standalone attachment request rules."""

    def test_notification_id_required(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateNotificationAttachmentRequest(file_name="a", mime_type="b", file_path="c")

        assert _messages(exc_info) == ["Notification ID is required"]

    def test_boolean_notification_id_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateNotificationAttachmentRequest(
                notification_id=True, file_name="a", mime_type="b", file_path="c"
            )

        assert [e["loc"] for e in exc_info.value.errors()] == [("notification_id",)]

    def test_file_path_limit(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateNotificationAttachmentRequest(
                notification_id=1, file_name="a", mime_type="b", file_path="p" * 501
            )

        assert _messages(exc_info) == ["File path cannot exceed 500 characters"]


class TestResponseAdapters:
    """Tests for response projections."""

    def test_format_datetime(self):
        assert format_datetime(datetime(2026, 1, 2, 3, 4, 5, 999)) == "2026-01-02 03:04:05"
        assert format_datetime(None) is None

    def test_user_to_response(self):
        user = User(
            id=3,
            email="a@example.com",
            first_name="Ada",
            last_name="Lovelace",
            created_at=datetime(2026, 1, 1, 0, 0, 0),
            updated_at=datetime(2026, 1, 2, 0, 0, 0),
        )

        response = user_to_response(user, notifications_count=4)

        assert response.model_dump() == {
            "id": 3,
            "email": "a@example.com",
            "first_name": "Ada",
            "last_name": "Lovelace",
            "created_at": "2026-01-01 00:00:00",
            "updated_at": "2026-01-02 00:00:00",
            "notifications_count": 4,
        }
