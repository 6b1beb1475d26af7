"""Repository interfaces for Threadline domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from threadline.domain.repository.thread import ThreadRepository
from threadline.domain.repository.transaction import TransactionManager
from threadline.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ThreadRepository",
    "TransactionManager",
]
