"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from threadline.adapter.revalidation import RecordingPathRevalidator
from threadline.domain.model import Thread, User
from threadline.domain.value import ExternalUserId, ThreadId, UserId
from threadline.persistence.repository.inmemory import InMemoryTransactionManager

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_user(
    username: str,
    name: str = "",
    external_id: str | None = None,
    minutes: int = 0,
) -> User:
    """Build a user created ``minutes`` after BASE_TIME."""
    return User(
        id=UserId(uuid4()),
        external_id=ExternalUserId(external_id or f"ext_{username}"),
        username=username,
        name=name,
        onboarded=True,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


def make_thread(
    author: User,
    text: str = "Some thread text",
    parent: Thread | None = None,
    minutes: int = 0,
) -> Thread:
    """Build a thread created ``minutes`` after BASE_TIME."""
    return Thread(
        id=ThreadId(uuid4()),
        author_id=author.id,
        text=text,
        parent_id=parent.id if parent else None,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


class OrderedTransactionManager(InMemoryTransactionManager):
    """Appends "commit" to a shared event list."""

    def __init__(self, events: list[str], fail: bool = False) -> None:
        super().__init__()
        self.events = events
        self.fail = fail

    async def commit(self) -> None:
        if self.fail:
            raise RuntimeError("could not serialize access")
        await super().commit()
        self.events.append("commit")


class OrderedRevalidator(RecordingPathRevalidator):
    """Appends "revalidate" to a shared event list."""

    def __init__(self, events: list[str]) -> None:
        super().__init__()
        self.events = events

    async def revalidate(self, path: str) -> None:
        await super().revalidate(path)
        self.events.append("revalidate")
