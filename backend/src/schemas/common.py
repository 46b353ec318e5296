"""
Shared helpers for request schema validators and response serialization.

Provides:
- Field rule helpers raising ValueError with human-readable messages
- Timestamp format used by all response projections
"""

import re
from datetime import datetime
from typing import Optional


EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# Largest ID a 64-bit INTEGER column can hold
MAX_ID = 2**63 - 1

# Wire format for created_at / updated_at / sent_at
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def require_text(value: Optional[str], label: str, max_length: Optional[int] = None) -> str:
    """
    Enforce a required, non-blank string with an optional length cap.

    Args:
        value: Raw value from the payload (None when missing)
        label: Human label used in messages (e.g., "First name")
        max_length: Maximum allowed length, if any

    Returns:
        The value unchanged

    Raises:
        ValueError: With a human-readable message on violation
    """
    if value is None or not value.strip():
        raise ValueError(f"{label} is required")
    return check_length(value, label, max_length)


def check_length(value: Optional[str], label: str, max_length: Optional[int]) -> Optional[str]:
    """Raise ValueError if value is longer than max_length."""
    if value is not None and max_length is not None and len(value) > max_length:
        raise ValueError(f"{label} cannot exceed {max_length} characters")
    return value


def check_email(value: Optional[str], message: str) -> Optional[str]:
    """Raise ValueError with message if value is not a plausible email address."""
    if value is not None and not EMAIL_PATTERN.match(value):
        raise ValueError(message)
    return value


def check_positive(value: Optional[int], label: str) -> Optional[int]:
    """Raise ValueError if value is present and not a positive integer within ID range."""
    if value is not None and value <= 0:
        raise ValueError(f"{label} must be positive")
    if value is not None and value > MAX_ID:
        raise ValueError(f"{label} cannot exceed {MAX_ID}")
    return value


def format_datetime(value: Optional[datetime]) -> Optional[str]:
    """Format a timestamp for API responses (None stays None)."""
    return value.strftime(DATETIME_FORMAT) if value else None
