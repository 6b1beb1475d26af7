"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class RevalidationError(AdapterError):
    """The frontend rejected or never answered a revalidation request."""

    pass
