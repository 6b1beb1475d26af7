"""Get thread use case."""

from uuid import UUID

from threadline.application.usecase.responses import ThreadWithRepliesResponse
from threadline.domain.service import ThreadService
from threadline.domain.value import ThreadId


class GetThreadUseCase:
    """Use case for a thread detail page."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, thread_id: str) -> ThreadWithRepliesResponse | None:
        """Return the thread with replies, or None if it does not exist."""
        thread = await self.thread_service.fetch_thread_by_id(ThreadId(UUID(thread_id)))
        return ThreadWithRepliesResponse.from_replies(thread) if thread else None
