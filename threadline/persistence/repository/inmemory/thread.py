"""In-memory thread repository for testing."""

from typing import Optional

from threadline.domain.model.thread import Thread
from threadline.domain.repository.thread import ThreadRepository
from threadline.domain.value import ThreadId, UserId


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self) -> None:
        self._threads: dict[ThreadId, Thread] = {}

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        return self._threads.get(thread_id)

    async def find_by_ids(self, thread_ids: list[ThreadId]) -> list[Thread]:
        """Find threads by IDs, once each."""
        return [
            self._threads[tid]
            for tid in dict.fromkeys(thread_ids)
            if tid in self._threads
        ]

    async def find_by_author(self, author_id: UserId) -> list[Thread]:
        """Find all threads by an author, oldest first."""
        threads = [t for t in self._threads.values() if t.author_id == author_id]
        threads.sort(key=lambda t: t.created_at)
        return threads

    async def find_replies(
        self, thread_ids: list[ThreadId], exclude_author_id: UserId
    ) -> list[Thread]:
        """Find threads among thread_ids written by someone else."""
        wanted = set(thread_ids)
        replies = [
            t
            for t in self._threads.values()
            if t.id in wanted and t.author_id != exclude_author_id
        ]
        replies.sort(key=lambda t: t.created_at, reverse=True)
        return replies

    async def find_top_level(self, limit: int = 20, offset: int = 0) -> list[Thread]:
        """Find top-level threads, newest first."""
        threads = [t for t in self._threads.values() if t.parent_id is None]
        threads.sort(key=lambda t: (t.created_at, str(t.id)), reverse=True)
        return threads[offset : offset + limit]

    async def count_top_level(self) -> int:
        """Count top-level threads."""
        return sum(1 for t in self._threads.values() if t.parent_id is None)

    async def save(self, thread: Thread) -> Thread:
        """Save or update a thread."""
        self._threads[thread.id] = thread
        return thread

    async def append_child(self, parent_id: ThreadId, child_id: ThreadId) -> None:
        """Append a reply ID to the parent's children."""
        parent = self._threads.get(parent_id)
        if parent:
            self._threads[parent_id] = parent.model_copy(
                update={"children": [*parent.children, child_id]}
            )
