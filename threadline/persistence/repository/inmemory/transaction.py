"""In-memory transaction manager for testing."""

from threadline.domain.repository import TransactionManager


class InMemoryTransactionManager(TransactionManager):
    """Writes to in-memory repositories are immediate; this only counts commits."""

    def __init__(self) -> None:
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1
