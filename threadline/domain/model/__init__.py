"""Domain model entities for Threadline."""

from threadline.domain.model.thread import (
    PopulatedThread,
    Thread,
    ThreadWithReplies,
    UserPosts,
)
from threadline.domain.model.user import AuthorSummary, User

__all__ = [
    "User",
    "AuthorSummary",
    "Thread",
    "PopulatedThread",
    "ThreadWithReplies",
    "UserPosts",
]
