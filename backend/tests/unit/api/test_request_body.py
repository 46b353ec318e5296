"""
Unit tests for request body helpers.

Tests JSON object decoding and the bulk ValidationError raised by
parse_request.
"""

import asyncio

import pytest
from starlette.requests import Request

from backend.src.api.request_body import (
    InvalidJSONError,
    json_object,
    optional_json_object,
    parse_request,
)
from backend.src.schemas.user import CreateUserRequest
from backend.src.services.exceptions import ValidationError


def _request(body: bytes) -> Request:
    async def receive():
        return {"type": "http.request", "body": body, "more_body": False}

    return Request({"type": "http", "method": "POST", "headers": []}, receive)


class TestJsonObject:
    """Tests for body decoding."""

    def test_object(self):
        assert asyncio.run(json_object(_request(b'{"a": 1}'))) == {"a": 1}

    @pytest.mark.parametrize("body", [b"", b"{not json", b"{}", b"[1, 2]", b'"text"', b"\xff\xfe"])
    def test_rejects_non_objects(self, body):
        with pytest.raises(InvalidJSONError):
            asyncio.run(json_object(_request(body)))

    def test_optional_returns_none(self):
        assert asyncio.run(optional_json_object(_request(b""))) is None
        assert asyncio.run(optional_json_object(_request(b"oops"))) is None
        assert asyncio.run(optional_json_object(_request(b'{"attachments": []}'))) == {
            "attachments": []
        }


class TestParseRequest:
    """Tests for schema validation wrapper."""

    def test_valid_payload(self):
        request = parse_request(
            CreateUserRequest,
            {"email": "a@example.com", "first_name": "A", "last_name": "B"},
        )
        assert request.first_name == "A"

    def test_collects_all_violations(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_request(CreateUserRequest, {"email": "bad"})

        assert exc_info.value.message == "Validation failed"
        assert exc_info.value.details == [
            "Email must be a valid email address",
            "First name is required",
            "Last name is required",
        ]

    def test_type_errors_include_location(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_request(CreateUserRequest, {"email": 5, "first_name": "A", "last_name": "B"})

        assert exc_info.value.details[0].startswith("email: ")
