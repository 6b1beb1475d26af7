"""Thread use cases."""

from .add_comment import AddCommentRequest, AddCommentUseCase
from .create_thread import CreateThreadRequest, CreateThreadUseCase
from .get_thread import GetThreadUseCase
from .list_threads import ListThreadsRequest, ListThreadsResponse, ListThreadsUseCase

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "CreateThreadRequest",
    "CreateThreadUseCase",
    "GetThreadUseCase",
    "ListThreadsRequest",
    "ListThreadsResponse",
    "ListThreadsUseCase",
]
