"""Unit tests for WebhookPathRevalidator."""

import json

import httpx
import pytest

from threadline.adapter.revalidation import WebhookPathRevalidator

WEBHOOK_URL = "https://app.example.com/api/revalidate"


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestWebhookPathRevalidator:
    """Tests for WebhookPathRevalidator.revalidate()."""

    @pytest.mark.asyncio
    async def test_posts_path_with_secret(self):
        """The path is sent as JSON, with the shared secret header."""
        # Arrange
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"revalidated": True})

        async with _client(handler) as client:
            revalidator = WebhookPathRevalidator(client, WEBHOOK_URL, secret="s3cret")

            # Act
            await revalidator.revalidate("/profile/edit")

        # Assert
        assert len(requests) == 1
        assert str(requests[0].url) == WEBHOOK_URL
        assert requests[0].method == "POST"
        assert requests[0].headers["X-Revalidate-Secret"] == "s3cret"
        assert json.loads(requests[0].content) == {"path": "/profile/edit"}

    @pytest.mark.asyncio
    async def test_no_secret_header_when_unset(self):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200)

        async with _client(handler) as client:
            await WebhookPathRevalidator(client, WEBHOOK_URL).revalidate("/")

        assert "X-Revalidate-Secret" not in requests[0].headers

    @pytest.mark.asyncio
    async def test_error_status_is_not_raised(self):
        """A failing webhook must not fail the write that triggered it."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="boom")

        async with _client(handler) as client:
            await WebhookPathRevalidator(client, WEBHOOK_URL).revalidate("/")

    @pytest.mark.asyncio
    async def test_transport_error_is_not_raised(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as client:
            await WebhookPathRevalidator(client, WEBHOOK_URL).revalidate("/")

    @pytest.mark.asyncio
    async def test_without_url_sends_nothing(self):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200)

        async with _client(handler) as client:
            await WebhookPathRevalidator(client, None).revalidate("/")

        assert requests == []
