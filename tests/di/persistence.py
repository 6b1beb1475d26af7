"""Mock persistence providers for testing."""

from dishka import Scope, provide

from threadline.domain.repository import (
    ThreadRepository,
    TransactionManager,
    UserRepository,
)
from threadline.persistence.repository.inmemory import (
    InMemoryThreadRepository,
    InMemoryTransactionManager,
    InMemoryUserRepository,
)
from threadline.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self) -> ThreadRepository:
        """Provide in-memory thread repository."""
        return InMemoryThreadRepository()

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self) -> TransactionManager:
        """Provide commit-counting transaction manager."""
        return InMemoryTransactionManager()
