"""PostgreSQL repository implementations."""

from threadline.persistence.repository.thread import PostgresThreadRepository
from threadline.persistence.repository.transaction import SessionTransactionManager
from threadline.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresThreadRepository",
    "SessionTransactionManager",
]
