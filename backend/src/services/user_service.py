"""
User service for managing notification recipients.

Provides business logic for creating and reading users.

Design:
- Email addresses are unique; the service checks first and the unique
  index on users.email is the final guard
- Responses include the number of notifications addressed to the user
"""

from datetime import datetime
from typing import List

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from backend.src.models import User
from backend.src.repositories import NotificationRepository, UserRepository
from backend.src.schemas.user import CreateUserRequest, UserResponse, user_to_response
from backend.src.services.exceptions import NotFoundError, ConflictError
from backend.src.utils.logging_config import get_logger


logger = get_logger("services")


class UserService:
    """
    Service for managing users.

    Usage:
        >>> service = UserService(db_session)
        >>> user = service.create_user(CreateUserRequest(
        ...     email="john.doe@example.com", first_name="John", last_name="Doe"
        ... ))
    """

    def __init__(self, db: Session):
        """
        Initialize user service.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db
        self.users = UserRepository(db)
        self.notifications = NotificationRepository(db)

    def create_user(self, request: CreateUserRequest) -> UserResponse:
        """
        Create a new user.

        Args:
            request: Validated creation request

        Returns:
            UserResponse for the created user

        Raises:
            ConflictError: If the email is already registered
        """
        if self.users.get_by_email(request.email):
            logger.warning(f"Rejected duplicate user email: {request.email}")
            raise ConflictError(f"User with email {request.email} already exists")

        now = datetime.utcnow()
        try:
            user = self.users.add(User(
                email=request.email,
                first_name=request.first_name,
                last_name=request.last_name,
                created_at=now,
                updated_at=now,
            ))
            self.db.commit()
            self.db.refresh(user)

        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Failed to create user '{request.email}': {e}")
            raise ConflictError(f"User with email {request.email} already exists")

        logger.info(f"Created user: {user.email} (id={user.id})")
        return user_to_response(user, notifications_count=0)

    def get_user_model(self, user_id: int) -> User:
        """
        Get a user entity by ID.

        Raises:
            NotFoundError: If user not found
        """
        user = self.users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User", user_id)
        return user

    def get_user(self, user_id: int) -> UserResponse:
        """
        Get a user by ID.

        Raises:
            NotFoundError: If user not found
        """
        user = self.get_user_model(user_id)
        return self._to_response(user)

    def get_all_users(self) -> List[UserResponse]:
        """List all users ordered by ID."""
        return [self._to_response(user) for user in self.users.list_all()]

    def _to_response(self, user: User) -> UserResponse:
        return user_to_response(
            user,
            notifications_count=self.notifications.count_by_user(user.id),
        )
