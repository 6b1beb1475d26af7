"""Transaction boundary interface."""

from abc import ABC, abstractmethod


class TransactionManager(ABC):
    """Commits the writes made through the request's repositories.

    Services commit before running side effects that other processes
    observe, such as cache revalidation.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make every pending write durable."""
        pass
