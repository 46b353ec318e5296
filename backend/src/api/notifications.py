"""
Notifications API endpoints.

Provides:
- Create a notification (with optional inline attachments)
- List notifications, optionally filtered by status and/or user
- List the pending outbox
- Get a notification by ID
- Send a pending notification (simulated)

Design:
- /pending is declared before /{notification_id} so it is not parsed as an ID
- The send body is optional; an empty or invalid body means no attachments
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from backend.src.api.request_body import json_object, optional_json_object, parse_request
from backend.src.db.database import get_db
from backend.src.schemas.common import MAX_ID
from backend.src.schemas.notification import (
    CreateNotificationRequest,
    NotificationResponse,
    SendNotificationRequest,
    SendNotificationResponse,
)
from backend.src.services.notification_service import NotificationService
from backend.src.utils.logging_config import get_logger


logger = get_logger("api")

router = APIRouter(
    prefix="/notifications",
    tags=["Notifications"],
)


# ============================================================================
# Dependencies
# ============================================================================


def get_notification_service(db: Session = Depends(get_db)) -> NotificationService:
    """Create NotificationService instance with database session."""
    return NotificationService(db=db)


# ============================================================================
# API Endpoints
# ============================================================================


@router.post(
    "",
    response_model=NotificationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create notification",
)
async def create_notification(
    payload: Dict[str, Any] = Depends(json_object),
    notification_service: NotificationService = Depends(get_notification_service),
) -> NotificationResponse:
    """
    Create a pending notification.

    At least one of user_id or recipient_email is required; both may be set.

    Raises:
        400 Bad Request: Invalid JSON, validation failure or missing recipient
        404 Not Found: Referenced user or email template doesn't exist

    Example:
        POST /api/notifications
        {
          "subject": "Welcome to Our Service",
          "body": "Thank you for joining our service!",
          "user_id": 1,
          "email_template_id": 1,
          "attachments": [
            {
              "file_name": "welcome_guide.pdf",
              "mime_type": "application/pdf",
              "file_path": "/uploads/attachments/welcome_guide_123.pdf"
            }
          ]
        }
    """
    request = parse_request(CreateNotificationRequest, payload)
    notification = notification_service.create_notification(request)
    logger.info(
        f"Created notification via API: {notification.id}",
        extra={"notification_id": notification.id},
    )
    return notification


@router.get(
    "",
    response_model=List[NotificationResponse],
    summary="List notifications",
    description="List notifications with optional status and user filters",
)
async def list_notifications(
    status_filter: Optional[str] = Query(
        None, alias="status", description="Filter by status (pending, sent, failed, delivered, archived)"
    ),
    user_id: Optional[int] = Query(None, le=MAX_ID, description="Filter by recipient user ID"),
    notification_service: NotificationService = Depends(get_notification_service),
) -> List[NotificationResponse]:
    """
    List notifications.

    Query Parameters:
        status: Filter by status (optional)
        user_id: Filter by recipient user (optional)

    Raises:
        400 Bad Request: Unknown status
        404 Not Found: user_id given and the user doesn't exist

    Example:
        GET /api/notifications
        GET /api/notifications?status=sent&user_id=1
    """
    return notification_service.list_notifications(status=status_filter, user_id=user_id)


@router.get(
    "/pending",
    response_model=List[NotificationResponse],
    summary="List pending notifications",
)
async def list_pending_notifications(
    notification_service: NotificationService = Depends(get_notification_service),
) -> List[NotificationResponse]:
    """List notifications still waiting to be sent."""
    return notification_service.get_pending_notifications()


@router.get(
    "/{notification_id}",
    response_model=NotificationResponse,
    summary="Get notification",
)
async def get_notification(
    notification_id: int = Path(..., le=MAX_ID),
    notification_service: NotificationService = Depends(get_notification_service),
) -> NotificationResponse:
    """
    Get notification by ID.

    Raises:
        404 Not Found: If notification doesn't exist
    """
    return notification_service.get_notification(notification_id)


@router.post(
    "/{notification_id}/send",
    response_model=SendNotificationResponse,
    summary="Send notification",
    description="Send a pending notification, optionally adding attachments",
)
async def send_notification(
    notification_id: int = Path(..., le=MAX_ID),
    payload: Optional[Dict[str, Any]] = Depends(optional_json_object),
    notification_service: NotificationService = Depends(get_notification_service),
) -> SendNotificationResponse:
    """
    Send a pending notification.

    Request Body (optional):
        {"attachments": [{"file_name": ..., "mime_type": ..., "file_path": ...}]}

    Raises:
        400 Bad Request: Not pending, or attachment validation failure
        404 Not Found: If notification doesn't exist
    """
    # Existence and state are checked before the body is validated
    notification_service.get_sendable_notification(notification_id)
    send_request = parse_request(SendNotificationRequest, payload) if payload else None
    notification = notification_service.send_notification(notification_id, send_request)
    logger.info(
        f"Sent notification via API: {notification_id}",
        extra={"notification_id": notification_id},
    )
    return SendNotificationResponse(
        **notification.model_dump(),
        message="Notification sent successfully",
    )
