"""List threads use case."""

from pydantic import BaseModel, Field

from threadline.application.usecase.responses import ThreadWithRepliesResponse
from threadline.domain.service import ThreadService


class ListThreadsRequest(BaseModel):
    """Feed page request."""

    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, gt=0)


class ListThreadsResponse(BaseModel):
    """One page of the feed."""

    threads: list[ThreadWithRepliesResponse]
    is_next: bool


class ListThreadsUseCase:
    """Use case for the home feed of top-level threads."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize list threads use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: ListThreadsRequest) -> ListThreadsResponse:
        """Execute list threads flow."""
        page = await self.thread_service.fetch_posts(
            page_number=request.page_number, page_size=request.page_size
        )
        return ListThreadsResponse(
            threads=[ThreadWithRepliesResponse.from_replies(t) for t in page.threads],
            is_next=page.is_next,
        )
