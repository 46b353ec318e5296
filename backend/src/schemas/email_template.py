"""
Pydantic schemas for email template API request/response validation.

The same request schema is used for creation and full replacement (PUT).
Template strings are stored verbatim; placeholders are not parsed.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from backend.src.schemas.common import format_datetime, require_text


class CreateEmailTemplateRequest(BaseModel):
    """
    Schema for creating or replacing an email template.

    Rules:
        name: required, max 255 chars
        subject_template: required, max 255 chars
        html_body_template: required
        plain_text_body_template: required

    Example:
        >>> request = CreateEmailTemplateRequest(
        ...     name="welcome",
        ...     subject_template="Welcome {first_name}!",
        ...     html_body_template="<p>Hello {first_name}</p>",
        ...     plain_text_body_template="Hello {first_name}",
        ... )
    """

    name: Optional[str] = Field(default=None, validate_default=True)
    subject_template: Optional[str] = Field(default=None, validate_default=True)
    html_body_template: Optional[str] = Field(default=None, validate_default=True)
    plain_text_body_template: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> str:
        return require_text(v, "Name", 255)

    @field_validator("subject_template")
    @classmethod
    def validate_subject_template(cls, v: Optional[str]) -> str:
        return require_text(v, "Subject template", 255)

    @field_validator("html_body_template")
    @classmethod
    def validate_html_body_template(cls, v: Optional[str]) -> str:
        return require_text(v, "HTML body template")

    @field_validator("plain_text_body_template")
    @classmethod
    def validate_plain_text_body_template(cls, v: Optional[str]) -> str:
        return require_text(v, "Plain text body template")

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "welcome",
                "subject_template": "Welcome {first_name}!",
                "html_body_template": "<h1>Hello {first_name}</h1>",
                "plain_text_body_template": "Hello {first_name}",
            }
        }
    }


class EmailTemplateResponse(BaseModel):
    """Response schema for a single email template."""

    id: int
    name: str
    subject_template: str
    html_body_template: str
    plain_text_body_template: str
    created_at: str
    updated_at: str
    notifications_count: int = Field(..., ge=0, description="Notifications linked to this template")


def email_template_to_response(template, notifications_count: int = 0) -> EmailTemplateResponse:
    """Convert EmailTemplate model to EmailTemplateResponse schema."""
    return EmailTemplateResponse(
        id=template.id,
        name=template.name,
        subject_template=template.subject_template,
        html_body_template=template.html_body_template,
        plain_text_body_template=template.plain_text_body_template,
        created_at=format_datetime(template.created_at),
        updated_at=format_datetime(template.updated_at),
        notifications_count=notifications_count,
    )
