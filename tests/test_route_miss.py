"""
Tests for unmatched-route translation through a standalone app.

Drives the sample router and the error translator through TestClient
without the composition root or any configuration file.
"""

from fastapi.testclient import TestClient

from app.interfaces.sample.router import router as sample_router
from app.shared.routing.dispatch import throw_exception_if_no_handler_found
from app.shared.security.rate_limiting import set_default_limit
from app.shared.standalone import standalone_setup

WRONG_URL_BODY = b'{"code":"400-001","message":"wrong url"}'


class TestWrongUrlTranslation:
    """Route misses with the flag applied to the standalone app."""

    def test_unknown_path_returns_wrong_url(self, mock_client: TestClient) -> None:
        """POST to an unregistered path yields 400 and the exact body."""
        response = mock_client.post("/hogehoge", json={"body": "any"})

        assert response.status_code == 400
        assert response.content == WRONG_URL_BODY

    def test_status_is_client_error(self, mock_client: TestClient) -> None:
        """The translated status is in the 4xx class."""
        response = mock_client.post("/hogehoge", json={"body": "any"})

        assert 400 <= response.status_code < 500

    def test_content_type_is_json(self, mock_client: TestClient) -> None:
        """The translated body is served as application/json."""
        response = mock_client.post("/hogehoge", json={"body": "any"})

        assert response.headers["content-type"] == "application/json"

    def test_any_method_and_path_is_translated(self, mock_client: TestClient) -> None:
        """GET, PUT and DELETE on unknown paths are all translated."""
        for method, path in [
            ("GET", "/"),
            ("PUT", "/nope"),
            ("DELETE", "/post/extra/segments"),
        ]:
            response = mock_client.request(method, path)
            assert response.status_code == 400
            assert response.content == WRONG_URL_BODY

    def test_repeated_requests_are_byte_identical(
        self, mock_client: TestClient
    ) -> None:
        """Issuing the same route miss again yields the same bytes."""
        responses = [
            mock_client.post("/hogehoge", json={"body": "any"}) for _ in range(3)
        ]

        assert {r.status_code for r in responses} == {400}
        assert {r.content for r in responses} == {WRONG_URL_BODY}

    def test_error_is_logged_with_method_and_path(
        self, mock_client: TestClient, caplog
    ) -> None:
        """The translator logs the attempted method and path."""
        with caplog.at_level("WARNING", logger="app.shared.errors.handlers"):
            mock_client.post("/hogehoge", json={"body": "any"})

        assert "POST /hogehoge" in caplog.text


class TestEmptyNotFound:
    """Route misses without the flag fall back to an empty 404."""

    def test_without_customizer_returns_empty_404(
        self, plain_client: TestClient
    ) -> None:
        """An app with no customizer answers 404 with no body."""
        response = plain_client.post("/hogehoge", json={"body": "any"})

        assert response.status_code == 404
        assert response.content == b""

    def test_disabled_flag_returns_empty_404(self) -> None:
        """Applying the flag with enabled=False keeps the empty 404."""
        app = standalone_setup(
            sample_router,
            customizers=[throw_exception_if_no_handler_found(enabled=False)],
        )
        response = TestClient(app).post("/hogehoge", json={"body": "any"})

        assert response.status_code == 404
        assert response.content == b""

    def test_last_customizer_wins(self) -> None:
        """Customizers run in order on the same app."""
        app = standalone_setup(
            sample_router,
            customizers=[
                throw_exception_if_no_handler_found(),
                throw_exception_if_no_handler_found(enabled=False),
            ],
        )
        response = TestClient(app).post("/hogehoge", json={"body": "any"})

        assert response.status_code == 404


class TestRegisteredRoute:
    """Matched routes never reach the route-miss translator."""

    def test_post_route_runs_handler(self, mock_client: TestClient) -> None:
        """POST /post with a valid body is handled normally."""
        response = mock_client.post("/post", json={"body": "any"})

        assert response.status_code == 200
        assert response.json() == {"body": "any"}

    def test_invalid_body_is_not_a_route_miss(self, mock_client: TestClient) -> None:
        """A validation failure on a matched route stays a 422."""
        response = mock_client.post("/post", json={"body": ""})

        assert response.status_code == 422
        assert response.content != WRONG_URL_BODY

    def test_wrong_method_on_known_path(self, mock_client: TestClient) -> None:
        """GET on a POST-only path is a method mismatch, not a route miss."""
        response = mock_client.get("/post")

        assert response.status_code == 405

    def test_post_route_keeps_rate_limit(self) -> None:
        """The standalone app enforces the limit set on the endpoint."""
        set_default_limit("1/minute")
        client = TestClient(standalone_setup(sample_router))

        statuses = [
            client.post("/post", json={"body": "any"}).status_code for _ in range(2)
        ]

        assert statuses == [200, 429]
