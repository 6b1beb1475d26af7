"""In-memory repository implementations for testing."""

from .thread import InMemoryThreadRepository
from .transaction import InMemoryTransactionManager
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryThreadRepository",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
]
