"""
Integration tests for Users API endpoints.

Tests end-to-end flows for user management:
- Creation, duplicate email conflict and validation errors
- Listing and lookup by ID
- Notifications addressed to a user
"""

import pytest


class TestUsersAPI:
    """Integration tests for Users API endpoints"""

    def test_create_user(self, test_client, sample_user_data):
        """Test creating a new user via API"""
        response = test_client.post("/api/users", json=sample_user_data())
        assert response.status_code == 201

        user = response.json()
        assert user["id"] > 0
        assert user["email"] == "john.doe@example.com"
        assert user["first_name"] == "John"
        assert user["last_name"] == "Doe"
        assert user["notifications_count"] == 0
        assert len(user["created_at"]) == len("2026-01-01 00:00:00")

    def test_create_user_duplicate_email(self, test_client, sample_user_data):
        """Test that duplicate emails are rejected"""
        assert test_client.post("/api/users", json=sample_user_data()).status_code == 201

        response = test_client.post("/api/users", json=sample_user_data(first_name="Johnny"))
        assert response.status_code == 409
        assert response.json() == {
            "error": "User with email john.doe@example.com already exists",
            "code": 409,
        }

    def test_create_user_validation_details(self, test_client):
        """Test that every violated rule is reported"""
        response = test_client.post(
            "/api/users",
            json={"email": "bad", "first_name": "", "last_name": "x" * 256},
        )
        assert response.status_code == 400

        body = response.json()
        assert body["error"] == "Validation failed"
        assert body["code"] == 400
        assert body["details"] == [
            "Email must be a valid email address",
            "First name is required",
            "Last name cannot exceed 255 characters",
        ]

    @pytest.mark.parametrize("content", [b"", b"{broken", b"{}", b"[]"])
    def test_create_user_invalid_json(self, test_client, content):
        """Test that empty or malformed bodies yield Invalid JSON"""
        response = test_client.post(
            "/api/users",
            content=content,
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON"}

    def test_list_users(self, test_client, sample_user_data):
        """Test listing users"""
        for email in ["a@example.com", "b@example.com"]:
            test_client.post("/api/users", json=sample_user_data(email=email))

        response = test_client.get("/api/users")
        assert response.status_code == 200
        assert [u["email"] for u in response.json()] == ["a@example.com", "b@example.com"]

    def test_get_user(self, test_client, sample_user):
        """Test getting a user by ID"""
        user = sample_user(email="jane@example.com")

        response = test_client.get(f"/api/users/{user.id}")
        assert response.status_code == 200
        assert response.json()["email"] == "jane@example.com"

    def test_get_user_not_found(self, test_client):
        """Test 404 for a missing user"""
        response = test_client.get("/api/users/999")
        assert response.status_code == 404
        assert response.json() == {"error": "User with ID 999 not found", "code": 404}

    def test_get_user_non_integer_id(self, test_client):
        """Test that non-integer path IDs are validation errors"""
        response = test_client.get("/api/users/abc")
        assert response.status_code == 400
        assert response.json()["error"] == "Validation failed"
        assert response.json()["details"]

    def test_get_user_id_beyond_integer_range(self, test_client):
        """Test that an out-of-range path ID is a validation error"""
        response = test_client.get("/api/users/100000000000000000000")
        assert response.status_code == 400
        assert response.json()["error"] == "Validation failed"

    def test_list_user_notifications(self, test_client, sample_user, sample_notification):
        """Test listing notifications addressed to a user"""
        user = sample_user()
        sample_notification(user=user, subject="First")
        sample_notification(subject="Someone else")

        response = test_client.get(f"/api/users/{user.id}/notifications")
        assert response.status_code == 200
        assert [n["subject"] for n in response.json()] == ["First"]

        count = test_client.get(f"/api/users/{user.id}").json()["notifications_count"]
        assert count == 1

    def test_list_user_notifications_user_missing(self, test_client):
        """Test 404 when listing notifications of a missing user"""
        response = test_client.get("/api/users/77/notifications")
        assert response.status_code == 404
