"""Tests for the legal research API client."""

import json
import pytest

import httpx
from tenacity import wait_none

from legal_review.research.client import (
    ResearchClient,
    ResearchError,
    TransientResearchError,
)


API_URL = "https://research.test/api/legal_research"


def make_client(handler, **kwargs) -> ResearchClient:
    """Build a client backed by a mock transport with no retry delay."""
    kwargs.setdefault("api_token", "secret")
    client = ResearchClient(
        api_url=API_URL,
        transport=httpx.MockTransport(handler),
        **kwargs,
    )
    client.retry_wait = wait_none()
    return client


class TestResearchClient:
    """Tests for the ResearchClient class."""

    def test_posts_prompt_with_bearer_token(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="# Answer")

        result = make_client(handler).research("Is it binding?")

        assert result == "# Answer"
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == API_URL
        assert request.headers["Authorization"] == "Bearer secret"
        assert json.loads(request.content) == {"prompt": "Is it binding?"}

    def test_client_error_not_retried(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(401, text="nope")

        with pytest.raises(ResearchError) as exc_info:
            make_client(handler).research("q")

        assert len(calls) == 1
        assert exc_info.value.status_code == 401
        assert exc_info.value.details == "nope"
        assert str(exc_info.value) == "API request failed: 401"

    def test_server_error_retried(self):
        responses = iter(
            [httpx.Response(503, text="busy"), httpx.Response(200, text="ok")]
        )

        def handler(request: httpx.Request) -> httpx.Response:
            return next(responses)

        assert make_client(handler).research("q") == "ok"

    def test_transport_error_gives_up(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            raise httpx.ConnectError("boom", request=request)

        with pytest.raises(TransientResearchError):
            make_client(handler, max_retries=2).research("q")

        assert len(calls) == 2

    def test_missing_token(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("should not be called")

        client = ResearchClient(
            api_url=API_URL, transport=httpx.MockTransport(handler)
        )

        with pytest.raises(ResearchError, match="API token not configured"):
            client.research("q")

    def test_settings_supply_defaults(self, monkeypatch):
        monkeypatch.setenv("API_TOKEN", "from-env")
        monkeypatch.setenv("LEGAL_RESEARCH_API_URL", API_URL)
        monkeypatch.setenv("LEGAL_REVIEW_TIMEOUT", "30")

        client = ResearchClient()

        assert client.api_token == "from-env"
        assert client.api_url == API_URL
        assert client.timeout == 30.0
