"""
Custom exceptions for service layer.

Provides specific exception types for business logic errors. Each error
kind carries the HTTP status it maps to, so the API layer translates
them without inspecting message text.
"""

from typing import Any, List, Optional


class ServiceError(Exception):
    """Base exception for service layer errors."""

    status_code: int = 400
    error_kind: str = "service_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(ServiceError):
    """Raised when a requested resource is not found."""

    status_code = 404
    error_kind = "not_found"

    def __init__(self, resource: str, identifier: Any):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} with ID {identifier} not found")


class ConflictError(ServiceError):
    """Raised when an operation conflicts with existing state (duplicate email/name)."""

    status_code = 409
    error_kind = "conflict"


class ValidationError(ServiceError):
    """Raised when input validation fails."""

    status_code = 400
    error_kind = "validation_error"

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[List[str]] = None
    ):
        self.field = field
        self.details = details or []
        super().__init__(message)


class InvalidStateError(ServiceError):
    """Raised when an operation is not allowed in the resource's current state."""

    status_code = 400
    error_kind = "invalid_state"


class InUseError(ServiceError):
    """Raised when deleting a resource that other records still reference."""

    status_code = 400
    error_kind = "in_use"
