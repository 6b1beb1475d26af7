"""Thread and comment routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from threadline.application.usecase.responses import (
    ThreadResponse,
    ThreadWithRepliesResponse,
)
from threadline.application.usecase.thread import (
    AddCommentRequest,
    AddCommentUseCase,
    CreateThreadRequest,
    CreateThreadUseCase,
    GetThreadUseCase,
    ListThreadsRequest,
    ListThreadsResponse,
    ListThreadsUseCase,
)
from threadline.config import Settings
from threadline.interface.error import FormError
from threadline.interface.form.comment import CommentForm

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


def _parse_thread_id(thread_id: str) -> str:
    try:
        return str(UUID(thread_id))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Invalid thread ID format",
        )


class CreateThreadAPIRequest(BaseModel):
    """API request for posting a thread."""

    thread: str = ""
    account_id: str = ""
    path: str = "/"


class SubmitCommentAPIRequest(BaseModel):
    """Comment form submission."""

    thread: str = ""
    current_user_id: str  # JSON-encoded user ID, as rendered into the page
    current_user_img: str = ""
    pathname: str = ""


@router.post(
    "", response_model=ThreadResponse, status_code=status.HTTP_201_CREATED
)
async def create_thread(
    request: CreateThreadAPIRequest,
    create_thread_use_case: FromDishka[CreateThreadUseCase],
) -> ThreadResponse:
    """Post a new top-level thread.

    Example:
        POST /threads
        {"thread": "Hello world", "account_id": "<uuid>", "path": "/"}
    """
    return await create_thread_use_case.execute(
        CreateThreadRequest(
            thread=request.thread,
            account_id=request.account_id,
            path=request.path,
        )
    )


@router.get("", response_model=ListThreadsResponse)
async def list_threads(
    list_threads_use_case: FromDishka[ListThreadsUseCase],
    settings: FromDishka[Settings],
    page_number: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, gt=0),
) -> ListThreadsResponse:
    """Get one page of the feed, newest first."""
    size = min(
        page_size or settings.pagination.default_page_size,
        settings.pagination.max_page_size,
    )
    return await list_threads_use_case.execute(
        ListThreadsRequest(page_number=page_number, page_size=size)
    )


@router.get("/{thread_id}", response_model=ThreadWithRepliesResponse)
async def get_thread(
    thread_id: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
) -> ThreadWithRepliesResponse:
    """Get a thread with its replies."""
    thread = await get_thread_use_case.execute(_parse_thread_id(thread_id))
    if not thread:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Thread '{thread_id}' not found",
        )
    return thread


@router.post(
    "/{thread_id}/comments",
    status_code=status.HTTP_201_CREATED,
    response_model=ThreadResponse,
)
async def submit_comment(
    thread_id: str,
    request: SubmitCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
) -> ThreadResponse:
    """Submit the reply form under a thread.

    Raises:
        FormError: If the text is too short (rendered as 422)
    """
    created: list[ThreadResponse] = []

    async def add_comment(target_id: str, text: str, author_id, path: str) -> None:
        created.append(
            await add_comment_use_case.execute(
                AddCommentRequest(
                    thread_id=target_id,
                    text=text,
                    author_id=str(author_id),
                    path=path,
                )
            )
        )

    form = CommentForm(
        thread_id=_parse_thread_id(thread_id),
        current_user_img=request.current_user_img,
        current_user_id=request.current_user_id,
        pathname=request.pathname,
        add_comment=add_comment,
    )
    form.set_value("thread", request.thread)

    try:
        submitted = await form.submit()
    except ValueError as e:
        # Undecodable current_user_id or a non-UUID author
        logfire.warn("Comment rejected", thread_id=thread_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Invalid user ID format",
        )

    if not submitted:
        raise FormError(form.errors)
    return created[0]
