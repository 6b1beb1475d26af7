"""Cache revalidation port."""


class PathRevalidator:
    """Tells the rendering layer that cached output for a route is stale.

    Called after a committed write that changes what a route displays.
    Implementations live in the adapter layer.
    """

    async def revalidate(self, path: str) -> None:
        """Invalidate cached output for ``path``.

        Args:
            path: Route path, e.g. "/profile/edit" or "/thread/<id>"
        """
        raise NotImplementedError
