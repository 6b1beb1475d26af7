"""Add comment use case."""

from uuid import UUID

from pydantic import BaseModel

from threadline.application.usecase.responses import ThreadResponse
from threadline.domain.service import ThreadService
from threadline.domain.value import ThreadId, UserId


class AddCommentRequest(BaseModel):
    """Reply to a thread. The text has already been validated by the form."""

    thread_id: str  # UUID string
    text: str
    author_id: str  # UUID string
    path: str = ""


class AddCommentUseCase:
    """Use case for replying to a thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize add comment use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: AddCommentRequest) -> ThreadResponse:
        """Execute add comment flow.

        Raises:
            ValueError: If an ID is not a UUID
            NotFoundError: If the parent thread does not exist
            DataAccessError: If the write fails
        """
        comment = await self.thread_service.add_comment_to_thread(
            thread_id=ThreadId(UUID(request.thread_id)),
            text=request.text,
            author_id=UserId(UUID(request.author_id)),
            path=request.path,
        )
        return ThreadResponse.from_domain(comment)
