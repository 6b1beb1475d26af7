"""Thread entity and its populated read models.

A reply is itself a thread: its id is listed in the parent's ``children`` and
its ``parent_id`` points back at the parent.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threadline.domain.model.common import DomainModel
from threadline.domain.model.user import AuthorSummary, User
from threadline.domain.value import ThreadId, UserId


class Thread(DomainModel):
    """Thread entity."""

    id: ThreadId
    author_id: UserId
    text: str = Field(min_length=1)
    parent_id: Optional[ThreadId] = None
    children: list[ThreadId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None


class PopulatedThread(DomainModel):
    """Thread with its author populated."""

    thread: Thread
    author: Optional[AuthorSummary] = None


class ThreadWithReplies(DomainModel):
    """Thread with its children populated, each child with its author."""

    thread: Thread
    author: Optional[AuthorSummary] = None
    children: list[PopulatedThread] = Field(default_factory=list)


class UserPosts(DomainModel):
    """User with the ``threads`` relation expanded two levels deep."""

    user: User
    threads: list[ThreadWithReplies] = Field(default_factory=list)
