"""End-to-end tests for the login callback and logout."""

from tests.harness import create_client_fixture

# E2E client fixture - mocked identity and in-memory persistence
client = create_client_fixture()


class TestLoginCallback:
    """Tests for GET /auth/callback."""

    def test_callback_sets_cookie_and_continues(self, client):
        """The callback stores the token and returns to the pending vote."""
        response = client.get(
            "/auth/callback",
            params={"token": "alice@example.com", "continue": "/vote?greeting=1"},
        )

        assert response.status_code == 302
        assert response.headers["location"] == "/vote?greeting=1"
        set_cookie = response.headers["set-cookie"]
        assert "session_token=" in set_cookie
        assert "HttpOnly" in set_cookie

    def test_callback_then_vote_is_recorded(self, client):
        client.post("/sign", data={"content": "Vote for me"})

        callback = client.get(
            "/auth/callback",
            params={"token": "alice@example.com", "continue": "/vote?greeting=1"},
        )
        vote = client.get(callback.headers["location"])

        assert vote.status_code == 302
        assert vote.headers["location"] == "/"
        assert "Score: 1" in client.get("/").text

    def test_callback_rejects_external_continue_target(self, client):
        response = client.get(
            "/auth/callback",
            params={"token": "alice@example.com", "continue": "https://evil.example.com"},
        )

        assert response.status_code == 302
        assert response.headers["location"] == "/"

    def test_callback_without_token_is_rejected(self, client):
        response = client.get("/auth/callback")

        assert response.status_code == 422


class TestLogout:
    """Tests for GET /auth/logout."""

    def test_logout_clears_cookie(self, client):
        client.cookies.set("session_token", "alice@example.com")

        response = client.get("/auth/logout", params={"continue": "/"})

        assert response.status_code == 302
        assert response.headers["location"] == "/"
        set_cookie = response.headers["set-cookie"]
        assert 'session_token=""' in set_cookie or "session_token=;" in set_cookie
        assert "Max-Age=0" in set_cookie
