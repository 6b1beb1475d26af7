"""Revalidation infrastructure providers."""

from collections.abc import AsyncIterator

import httpx
from dishka import Scope, provide

from threadline.adapter.revalidation import WebhookPathRevalidator
from threadline.config import RevalidationSettings
from threadline.domain.service import PathRevalidator
from threadline.util.di.base import ProviderBase
from threadline.util.error import ConfigurationError


class RevalidationProvider(ProviderBase):
    """Revalidation component base."""

    __mock_component__ = "revalidation"


class ProdRevalidationProvider(RevalidationProvider):
    """Production provider posting to the frontend's revalidation webhook."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_http_client(
        self, settings: RevalidationSettings
    ) -> AsyncIterator[httpx.AsyncClient]:
        """Provide the shared HTTP client, closed with the container."""
        async with httpx.AsyncClient(timeout=settings.timeout_seconds) as client:
            yield client

    @provide(scope=Scope.APP)
    def get_path_revalidator(
        self, client: httpx.AsyncClient, settings: RevalidationSettings
    ) -> PathRevalidator:
        """Provide path revalidator.

        Raises:
            ConfigurationError: If the webhook URL is set but not http(s)
        """
        url = settings.webhook_url
        if url and not url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"REVALIDATION__WEBHOOK_URL must be an http(s) URL, got {url!r}"
            )
        return WebhookPathRevalidator(
            client=client, webhook_url=url, secret=settings.secret
        )
