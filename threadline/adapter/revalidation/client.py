"""Revalidation clients.

The frontend caches rendered routes. After a write, the backend asks it to
drop the cached copy of the affected route by POSTing to a revalidation
webhook.
"""

import httpx
import logfire

from threadline.adapter.error import RevalidationError
from threadline.domain.service.revalidation import PathRevalidator


class WebhookPathRevalidator(PathRevalidator):
    """Sends ``{"path": ...}`` to the frontend's revalidation endpoint.

    Failures are logged, not raised: by the time this runs the write has
    been made, and a stale cache entry expires on its own.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        webhook_url: str | None,
        secret: str | None = None,
    ) -> None:
        """Initialize revalidator.

        Args:
            client: Shared HTTP client
            webhook_url: Frontend endpoint; None disables the request
            secret: Value for the X-Revalidate-Secret header
        """
        self.client = client
        self.webhook_url = webhook_url
        self.secret = secret

    async def revalidate(self, path: str) -> None:
        """Ask the frontend to revalidate ``path``."""
        if not self.webhook_url:
            logfire.info("Revalidation skipped, no webhook configured", path=path)
            return

        try:
            await self._post(path)
        except RevalidationError as e:
            logfire.warn("Revalidation failed", path=path, error=str(e))
            return

        logfire.info("Path revalidated", path=path)

    async def _post(self, path: str) -> None:
        headers = {"X-Revalidate-Secret": self.secret} if self.secret else {}
        try:
            response = await self.client.post(
                self.webhook_url, json={"path": path}, headers=headers
            )
        except httpx.HTTPError as e:
            raise RevalidationError(f"HTTP error during revalidation: {e}") from e

        if response.status_code >= 400:
            raise RevalidationError(
                f"Revalidation endpoint returned {response.status_code}: {response.text}"
            )


class RecordingPathRevalidator(PathRevalidator):
    """Keeps every revalidated path in memory, for tests."""

    def __init__(self) -> None:
        self.paths: list[str] = []

    async def revalidate(self, path: str) -> None:
        """Record ``path``."""
        self.paths.append(path)
