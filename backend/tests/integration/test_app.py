"""
Integration tests for application-level endpoints and error rendering.
"""


class TestApplicationEndpoints:
    """Tests for health, root and framework error responses"""

    def test_health(self, test_client):
        response = test_client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["service"] == "notification-api"

    def test_root(self, test_client):
        response = test_client.get("/")
        assert response.status_code == 200
        assert response.json()["message"] == "Notification API"

    def test_unknown_route(self, test_client):
        """Unknown routes use the API error shape"""
        response = test_client.get("/api/nothing-here")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found", "code": 404}

    def test_method_not_allowed(self, test_client):
        response = test_client.patch("/api/users")
        assert response.status_code == 405
        assert response.json()["code"] == 405
