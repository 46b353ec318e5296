"""
Notification attachments API endpoints.

Provides CRUD operations for attachments outside the notification
create/send workflow:
- Create, list, get
- List attachments of one notification
- Replace (PUT, may re-link to another notification)
- Delete
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session

from backend.src.api.request_body import json_object, parse_request
from backend.src.db.database import get_db
from backend.src.schemas.common import MAX_ID
from backend.src.schemas.notification_attachment import (
    CreateNotificationAttachmentRequest,
    NotificationAttachmentResponse,
)
from backend.src.services.notification_attachment_service import NotificationAttachmentService
from backend.src.utils.logging_config import get_logger


logger = get_logger("api")

router = APIRouter(
    prefix="/notification-attachments",
    tags=["Notification Attachments"],
)


# ============================================================================
# Dependencies
# ============================================================================


def get_attachment_service(db: Session = Depends(get_db)) -> NotificationAttachmentService:
    """Create NotificationAttachmentService instance with database session."""
    return NotificationAttachmentService(db=db)


# ============================================================================
# API Endpoints
# ============================================================================


@router.post(
    "",
    response_model=NotificationAttachmentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create attachment",
)
async def create_attachment(
    payload: Dict[str, Any] = Depends(json_object),
    attachment_service: NotificationAttachmentService = Depends(get_attachment_service),
) -> NotificationAttachmentResponse:
    """
    Create an attachment for an existing notification.

    Raises:
        400 Bad Request: Invalid JSON or validation failure
        404 Not Found: Notification doesn't exist

    Example:
        POST /api/notification-attachments
        {
          "notification_id": 1,
          "file_name": "invoice.pdf",
          "mime_type": "application/pdf",
          "file_path": "/uploads/attachments/invoice_456.pdf"
        }
    """
    request = parse_request(CreateNotificationAttachmentRequest, payload)
    attachment = attachment_service.create_attachment(request)
    logger.info(
        f"Created attachment via API: {attachment.file_name}",
        extra={"attachment_id": attachment.id},
    )
    return attachment


@router.get(
    "",
    response_model=List[NotificationAttachmentResponse],
    summary="List attachments",
)
async def list_attachments(
    attachment_service: NotificationAttachmentService = Depends(get_attachment_service),
) -> List[NotificationAttachmentResponse]:
    """List all attachments."""
    return attachment_service.get_all_attachments()


@router.get(
    "/notification/{notification_id}",
    response_model=List[NotificationAttachmentResponse],
    summary="List attachments of a notification",
)
async def list_attachments_by_notification(
    notification_id: int = Path(..., le=MAX_ID),
    attachment_service: NotificationAttachmentService = Depends(get_attachment_service),
) -> List[NotificationAttachmentResponse]:
    """
    List the attachments of one notification.

    Raises:
        404 Not Found: If notification doesn't exist
    """
    return attachment_service.get_attachments_by_notification(notification_id)


@router.get(
    "/{attachment_id}",
    response_model=NotificationAttachmentResponse,
    summary="Get attachment",
)
async def get_attachment(
    attachment_id: int = Path(..., le=MAX_ID),
    attachment_service: NotificationAttachmentService = Depends(get_attachment_service),
) -> NotificationAttachmentResponse:
    """
    Get attachment by ID.

    Raises:
        404 Not Found: If attachment doesn't exist
    """
    return attachment_service.get_attachment(attachment_id)


@router.put(
    "/{attachment_id}",
    response_model=NotificationAttachmentResponse,
    summary="Replace attachment",
)
async def update_attachment(
    attachment_id: int = Path(..., le=MAX_ID),
    payload: Dict[str, Any] = Depends(json_object),
    attachment_service: NotificationAttachmentService = Depends(get_attachment_service),
) -> NotificationAttachmentResponse:
    """
    Replace an attachment's fields.

    Raises:
        400 Bad Request: Invalid JSON or validation failure
        404 Not Found: Attachment or target notification doesn't exist
    """
    request = parse_request(CreateNotificationAttachmentRequest, payload)
    attachment = attachment_service.update_attachment(attachment_id, request)
    logger.info("Updated attachment via API", extra={"attachment_id": attachment_id})
    return attachment


@router.delete(
    "/{attachment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete attachment",
)
async def delete_attachment(
    attachment_id: int = Path(..., le=MAX_ID),
    attachment_service: NotificationAttachmentService = Depends(get_attachment_service),
) -> Response:
    """
    Delete attachment by ID.

    Raises:
        404 Not Found: If attachment doesn't exist
    """
    attachment_service.delete_attachment(attachment_id)
    logger.info("Deleted attachment via API", extra={"attachment_id": attachment_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
