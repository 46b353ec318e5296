"""
User Pydantic schemas for API request/response validation.

Defines the user creation request and the user response projection.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from backend.src.schemas.common import check_email, format_datetime, require_text


# ============================================================================
# Request Schemas
# ============================================================================


class CreateUserRequest(BaseModel):
    """
    Request schema for creating a user.

    Rules:
        email: required, valid email format, max 255 chars
        first_name: required, max 255 chars
        last_name: required, max 255 chars
    """

    email: Optional[str] = Field(default=None, validate_default=True)
    first_name: Optional[str] = Field(default=None, validate_default=True)
    last_name: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> str:
        v = require_text(v, "Email", 255)
        return check_email(v, "Email must be a valid email address")

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, v: Optional[str]) -> str:
        return require_text(v, "First name", 255)

    @field_validator("last_name")
    @classmethod
    def validate_last_name(cls, v: Optional[str]) -> str:
        return require_text(v, "Last name", 255)

    model_config = {
        "json_schema_extra": {
            "example": {
                "email": "john.doe@example.com",
                "first_name": "John",
                "last_name": "Doe",
            }
        }
    }


# ============================================================================
# Response Schemas
# ============================================================================


class UserResponse(BaseModel):
    """Response schema for a single user."""

    id: int
    email: str
    first_name: str
    last_name: str
    created_at: str = Field(..., description="Creation time (YYYY-MM-DD HH:MM:SS)")
    updated_at: str = Field(..., description="Last update time (YYYY-MM-DD HH:MM:SS)")
    notifications_count: int = Field(..., ge=0, description="Notifications addressed to this user")


# ============================================================================
# Adapter Functions
# ============================================================================


def user_to_response(user, notifications_count: int = 0) -> UserResponse:
    """
    Convert User model to UserResponse schema.

    Args:
        user: User model instance
        notifications_count: Number of notifications referencing the user

    Returns:
        UserResponse schema instance
    """
    return UserResponse(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        created_at=format_datetime(user.created_at),
        updated_at=format_datetime(user.updated_at),
        notifications_count=notifications_count,
    )
