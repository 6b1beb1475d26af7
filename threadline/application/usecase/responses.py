"""Response models shared by user and thread use cases."""

from datetime import datetime

from pydantic import BaseModel

from threadline.domain.model import (
    AuthorSummary,
    PopulatedThread,
    Thread,
    ThreadWithReplies,
    User,
)


class AuthorResponse(BaseModel):
    """Populated author: name, image and id."""

    id: str
    name: str
    image: str

    @classmethod
    def from_domain(cls, author: AuthorSummary | None) -> "AuthorResponse | None":
        if author is None:
            return None
        return cls(id=str(author.id), name=author.name, image=author.image)


class UserResponse(BaseModel):
    """User profile."""

    user_id: str
    external_id: str
    username: str
    name: str
    bio: str
    image: str
    onboarded: bool
    thread_ids: list[str]
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            user_id=str(user.id),
            external_id=user.external_id,
            username=user.username,
            name=user.name,
            bio=user.bio,
            image=user.image,
            onboarded=user.onboarded,
            thread_ids=[str(t) for t in user.thread_ids],
            created_at=user.created_at,
        )


class ThreadResponse(BaseModel):
    """Thread with its author populated."""

    thread_id: str
    author_id: str
    author: AuthorResponse | None = None
    text: str
    parent_id: str | None
    children: list[str]
    created_at: datetime

    @classmethod
    def from_domain(
        cls, thread: Thread, author: AuthorSummary | None = None
    ) -> "ThreadResponse":
        return cls(
            thread_id=str(thread.id),
            author_id=str(thread.author_id),
            author=AuthorResponse.from_domain(author),
            text=thread.text,
            parent_id=str(thread.parent_id) if thread.parent_id else None,
            children=[str(c) for c in thread.children],
            created_at=thread.created_at,
        )

    @classmethod
    def from_populated(cls, populated: PopulatedThread) -> "ThreadResponse":
        return cls.from_domain(populated.thread, populated.author)


class ThreadWithRepliesResponse(ThreadResponse):
    """Thread with its replies populated, each with its author."""

    replies: list[ThreadResponse]

    @classmethod
    def from_replies(cls, item: ThreadWithReplies) -> "ThreadWithRepliesResponse":
        base = ThreadResponse.from_domain(item.thread, item.author)
        return cls(
            **base.model_dump(exclude={"author"}),
            author=base.author,
            replies=[ThreadResponse.from_populated(c) for c in item.children],
        )
