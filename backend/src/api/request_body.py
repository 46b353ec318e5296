"""
Request body helpers shared by the API routers.

Write endpoints read the raw JSON body themselves instead of declaring a
pydantic body parameter, so that:
- an empty, unparseable or non-object body yields {"error": "Invalid JSON"}
- every rule violation of a well-formed body is reported together as a
  ValidationError with details
"""

import json
from typing import Any, Dict, List, Optional, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from backend.src.services.exceptions import ValidationError


SchemaT = TypeVar("SchemaT", bound=BaseModel)


class InvalidJSONError(Exception):
    """Raised when a request body is not a non-empty JSON object."""

    message = "Invalid JSON"


async def _decode_object(request: Request) -> Optional[Dict[str, Any]]:
    raw = await request.body()
    if not raw:
        return None
    try:
        payload = json.loads(raw)
    except (ValueError, UnicodeDecodeError):
        return None
    if not isinstance(payload, dict) or not payload:
        return None
    return payload


async def json_object(request: Request) -> Dict[str, Any]:
    """
    FastAPI dependency returning the decoded JSON object body.

    Raises:
        InvalidJSONError: If the body is empty, malformed, or not a
            non-empty JSON object
    """
    payload = await _decode_object(request)
    if payload is None:
        raise InvalidJSONError()
    return payload


async def optional_json_object(request: Request) -> Optional[Dict[str, Any]]:
    """FastAPI dependency returning the JSON object body, or None when absent or invalid."""
    return await _decode_object(request)


def _error_message(error: Dict[str, Any]) -> str:
    """Render one pydantic error entry as a violation message."""
    ctx_error = (error.get("ctx") or {}).get("error")
    if error.get("type") == "value_error" and ctx_error is not None:
        return str(ctx_error)
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error['msg']}" if location else error["msg"]


def violation_messages(errors: List[Dict[str, Any]]) -> List[str]:
    """Collect human-readable messages from pydantic error entries."""
    return [_error_message(error) for error in errors]


def parse_request(schema: Type[SchemaT], payload: Any) -> SchemaT:
    """
    Validate a decoded JSON payload against a request schema.

    Args:
        schema: Request schema class (e.g., CreateUserRequest)
        payload: Decoded JSON body

    Returns:
        Validated schema instance

    Raises:
        ValidationError: With message "Validation failed" and one detail
            entry per violated rule
    """
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError("Validation failed", details=violation_messages(e.errors()))
