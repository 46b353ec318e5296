"""
Users API endpoints.

Provides:
- Create a user
- List users / get a user by ID
- List the notifications addressed to a user

Service errors propagate to the application exception handlers, which map
each error kind to its HTTP status.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from backend.src.api.request_body import json_object, parse_request
from backend.src.db.database import get_db
from backend.src.schemas.common import MAX_ID
from backend.src.schemas.notification import NotificationResponse
from backend.src.schemas.user import CreateUserRequest, UserResponse
from backend.src.services.notification_service import NotificationService
from backend.src.services.user_service import UserService
from backend.src.utils.logging_config import get_logger


logger = get_logger("api")

router = APIRouter(
    prefix="/users",
    tags=["Users"],
)


# ============================================================================
# Dependencies
# ============================================================================


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Create UserService instance with database session."""
    return UserService(db=db)


def get_notification_service(db: Session = Depends(get_db)) -> NotificationService:
    """Create NotificationService instance with database session."""
    return NotificationService(db=db)


# ============================================================================
# API Endpoints
# ============================================================================


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
)
async def create_user(
    payload: Dict[str, Any] = Depends(json_object),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Create a new user.

    Raises:
        400 Bad Request: Invalid JSON or validation failure
        409 Conflict: Email already registered

    Example:
        POST /api/users
        {
          "email": "john.doe@example.com",
          "first_name": "John",
          "last_name": "Doe"
        }
    """
    request = parse_request(CreateUserRequest, payload)
    user = user_service.create_user(request)
    logger.info(f"Created user via API: {user.email}", extra={"user_id": user.id})
    return user


@router.get(
    "",
    response_model=List[UserResponse],
    summary="List users",
)
async def list_users(
    user_service: UserService = Depends(get_user_service),
) -> List[UserResponse]:
    """List all users with their notification counts."""
    return user_service.get_all_users()


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user",
)
async def get_user(
    user_id: int = Path(..., le=MAX_ID),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Get user by ID.

    Raises:
        404 Not Found: If user doesn't exist
    """
    return user_service.get_user(user_id)


@router.get(
    "/{user_id}/notifications",
    response_model=List[NotificationResponse],
    summary="List user notifications",
    description="Notifications addressed to the user",
)
async def list_user_notifications(
    user_id: int = Path(..., le=MAX_ID),
    status_filter: Optional[str] = Query(
        None, alias="status", description="Filter by status (e.g., pending)"
    ),
    notification_service: NotificationService = Depends(get_notification_service),
) -> List[NotificationResponse]:
    """
    List notifications addressed to a user.

    Raises:
        400 Bad Request: Unknown status filter
        404 Not Found: If user doesn't exist
    """
    return notification_service.get_notifications_by_user(user_id, status_filter)
