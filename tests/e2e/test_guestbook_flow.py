"""End-to-end tests for listing, signing and voting."""

from urllib.parse import parse_qs, urlparse

from tests.harness import create_client_fixture

# E2E client fixture - mocked identity and in-memory persistence
client = create_client_fixture()

ALICE = "alice@example.com"
BOB = "bob@example.com"


def sign(client, content: str):
    return client.post("/sign", data={"content": content})


class TestListing:
    """Tests for GET /."""

    def test_empty_guestbook(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert 'action="/sign"' in response.text
        assert ">Login</a>" in response.text

    def test_unusable_identity_renders_anonymous_page(self, client):
        client.cookies.set("session_token", "a" * 501)

        response = client.get("/")

        assert response.status_code == 200
        assert ">Login</a>" in response.text

    def test_identified_caller_sees_logout_link(self, client):
        client.cookies.set("session_token", ALICE)

        response = client.get("/")

        assert ">Logout</a>" in response.text
        assert ">Login</a>" not in response.text

    def test_only_ten_most_recent_greetings_are_listed(self, client):
        for i in range(12):
            sign(client, f"greeting number {i:02d}")

        response = client.get("/")

        assert response.text.count('class="greeting"') == 10
        assert "greeting number 11" in response.text
        assert "greeting number 02" in response.text
        assert "greeting number 01" not in response.text
        assert response.text.index("number 11") < response.text.index("number 10")


class TestSign:
    """Tests for POST /sign."""

    def test_anonymous_sign_redirects_to_listing(self, client):
        response = sign(client, "Hello from nobody")

        assert response.status_code == 302
        assert response.headers["location"] == "/"

        page = client.get("/").text
        assert "An anonymous person wrote:" in page
        assert "<pre>Hello from nobody</pre>" in page

    def test_identified_sign_is_attributed(self, client):
        client.cookies.set("session_token", ALICE)

        sign(client, "Hi!")

        assert f"<b>{ALICE}</b> wrote:" in client.get("/").text

    def test_markup_is_escaped_on_render(self, client):
        sign(client, "<script>alert(1)</script>")

        page = client.get("/").text
        assert "<script>" not in page
        assert "&lt;script&gt;" in page

    def test_missing_content_is_stored_empty(self, client):
        response = client.post("/sign")

        assert response.status_code == 302
        assert "<pre></pre>" in client.get("/").text


class TestVote:
    """Tests for GET /vote."""

    def test_vote_increments_score_once_per_identity(self, client):
        """Two votes by one identity and one by another give a score of 2."""
        sign(client, "Vote for me")
        client.cookies.set("session_token", ALICE)

        first = client.get("/vote", params={"greeting": "1"})
        second = client.get("/vote", params={"greeting": "1"})
        client.cookies.set("session_token", BOB)
        third = client.get("/vote", params={"greeting": "1"})

        for response in (first, second, third):
            assert response.status_code == 302
            assert response.headers["location"] == "/"
        assert "Score: 2" in client.get("/").text

    def test_anonymous_vote_redirects_to_login(self, client):
        """Anonymous voters are sent to login and brought back to the vote."""
        sign(client, "Vote for me")

        response = client.get("/vote", params={"greeting": "1"})

        assert response.status_code == 302
        location = urlparse(response.headers["location"])
        assert location.netloc == "login.example.com"
        assert parse_qs(location.query)["continue"] == ["/vote?greeting=1"]
        assert "Score: 0" in client.get("/").text

    def test_malformed_id_is_bad_request(self, client):
        client.cookies.set("session_token", ALICE)

        response = client.get("/vote", params={"greeting": "abc"})

        assert response.status_code == 400

    def test_missing_id_is_bad_request(self, client):
        client.cookies.set("session_token", ALICE)

        response = client.get("/vote")

        assert response.status_code == 400

    def test_repeated_id_is_bad_request(self, client):
        client.cookies.set("session_token", ALICE)

        response = client.get("/vote?greeting=1&greeting=2")

        assert response.status_code == 400

    def test_malformed_id_is_bad_request_for_anonymous_callers(self, client):
        response = client.get("/vote", params={"greeting": "-5"})

        assert response.status_code == 400

    def test_vote_on_unknown_greeting_still_redirects(self, client):
        client.cookies.set("session_token", ALICE)

        response = client.get("/vote", params={"greeting": "999"})

        assert response.status_code == 302
        assert response.headers["location"] == "/"


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
