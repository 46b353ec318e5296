"""
Email templates API endpoints.

Provides CRUD operations for email templates:
- Create, list, get
- Replace (PUT: all fields required)
- Delete (blocked while notifications reference the template)
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session

from backend.src.api.request_body import json_object, parse_request
from backend.src.db.database import get_db
from backend.src.schemas.common import MAX_ID
from backend.src.schemas.email_template import (
    CreateEmailTemplateRequest,
    EmailTemplateResponse,
)
from backend.src.services.email_template_service import EmailTemplateService
from backend.src.utils.logging_config import get_logger


logger = get_logger("api")

router = APIRouter(
    prefix="/email-templates",
    tags=["Email Templates"],
)


# ============================================================================
# Dependencies
# ============================================================================


def get_email_template_service(db: Session = Depends(get_db)) -> EmailTemplateService:
    """Create EmailTemplateService instance with database session."""
    return EmailTemplateService(db=db)


# ============================================================================
# API Endpoints
# ============================================================================


@router.post(
    "",
    response_model=EmailTemplateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create email template",
)
async def create_email_template(
    payload: Dict[str, Any] = Depends(json_object),
    template_service: EmailTemplateService = Depends(get_email_template_service),
) -> EmailTemplateResponse:
    """
    Create a new email template.

    Raises:
        400 Bad Request: Invalid JSON or validation failure
        409 Conflict: Template name already exists

    Example:
        POST /api/email-templates
        {
          "name": "welcome",
          "subject_template": "Welcome {first_name}!",
          "html_body_template": "<h1>Hello {first_name}</h1>",
          "plain_text_body_template": "Hello {first_name}"
        }
    """
    request = parse_request(CreateEmailTemplateRequest, payload)
    template = template_service.create_email_template(request)
    logger.info(f"Created email template via API: {template.name}", extra={"template_id": template.id})
    return template


@router.get(
    "",
    response_model=List[EmailTemplateResponse],
    summary="List email templates",
)
async def list_email_templates(
    template_service: EmailTemplateService = Depends(get_email_template_service),
) -> List[EmailTemplateResponse]:
    """List all email templates with their notification counts."""
    return template_service.get_all_email_templates()


@router.get(
    "/{template_id}",
    response_model=EmailTemplateResponse,
    summary="Get email template",
)
async def get_email_template(
    template_id: int = Path(..., le=MAX_ID),
    template_service: EmailTemplateService = Depends(get_email_template_service),
) -> EmailTemplateResponse:
    """
    Get email template by ID.

    Raises:
        404 Not Found: If template doesn't exist
    """
    return template_service.get_email_template(template_id)


@router.put(
    "/{template_id}",
    response_model=EmailTemplateResponse,
    summary="Replace email template",
)
async def update_email_template(
    template_id: int = Path(..., le=MAX_ID),
    payload: Dict[str, Any] = Depends(json_object),
    template_service: EmailTemplateService = Depends(get_email_template_service),
) -> EmailTemplateResponse:
    """
    Replace all fields of an email template.

    Raises:
        400 Bad Request: Invalid JSON or validation failure
        404 Not Found: If template doesn't exist
        409 Conflict: Name belongs to another template
    """
    request = parse_request(CreateEmailTemplateRequest, payload)
    template = template_service.update_email_template(template_id, request)
    logger.info(f"Updated email template via API: {template.name}", extra={"template_id": template_id})
    return template


@router.delete(
    "/{template_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete email template",
    description="Delete template (blocked while notifications reference it)",
)
async def delete_email_template(
    template_id: int = Path(..., le=MAX_ID),
    template_service: EmailTemplateService = Depends(get_email_template_service),
) -> Response:
    """
    Delete email template by ID.

    Raises:
        400 Bad Request: Template is used by notifications
        404 Not Found: If template doesn't exist
    """
    template_service.delete_email_template(template_id)
    logger.info("Deleted email template via API", extra={"template_id": template_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
