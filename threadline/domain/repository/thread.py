"""Thread repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from threadline.domain.model.thread import Thread
from threadline.domain.value import ThreadId, UserId


class ThreadRepository(ABC):
    """Repository for Thread entity.

    Defines the contract for thread persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID.

        Args:
            thread_id: The thread's unique identifier

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, thread_ids: List[ThreadId]) -> List[Thread]:
        """Find all threads whose ID is in ``thread_ids``.

        Unknown IDs are skipped and each thread is returned once.
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Thread]:
        """Find every thread (top-level or reply) written by a user."""
        pass

    @abstractmethod
    async def find_replies(
        self, thread_ids: List[ThreadId], exclude_author_id: UserId
    ) -> List[Thread]:
        """Find threads in ``thread_ids`` not written by ``exclude_author_id``.

        Returns:
            Matching threads, newest first
        """
        pass

    @abstractmethod
    async def find_top_level(self, limit: int = 20, offset: int = 0) -> List[Thread]:
        """Find threads without a parent, newest first."""
        pass

    @abstractmethod
    async def count_top_level(self) -> int:
        """Count threads without a parent."""
        pass

    @abstractmethod
    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update).

        Args:
            thread: The thread to save

        Returns:
            The saved thread
        """
        pass

    @abstractmethod
    async def append_child(self, parent_id: ThreadId, child_id: ThreadId) -> None:
        """Append a reply to the parent's ``children``."""
        pass
