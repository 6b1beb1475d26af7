"""Reference population helpers.

Threads store bare user and thread IDs. These helpers resolve them in
batches, one query per level, and drop references that no longer resolve.
"""

from typing import Iterable

from threadline.domain.model import (
    AuthorSummary,
    PopulatedThread,
    Thread,
    ThreadWithReplies,
)
from threadline.domain.repository import ThreadRepository, UserRepository
from threadline.domain.value import UserId


async def load_authors(
    user_repository: UserRepository, author_ids: Iterable[UserId]
) -> dict[UserId, AuthorSummary]:
    """Fetch the author summary for every distinct ID."""
    unique_ids = list(dict.fromkeys(author_ids))
    if not unique_ids:
        return {}
    users = await user_repository.find_by_ids(unique_ids)
    return {user.id: user.to_author() for user in users}


async def populate_authors(
    user_repository: UserRepository, threads: list[Thread]
) -> list[PopulatedThread]:
    """Attach each thread's author."""
    authors = await load_authors(user_repository, (t.author_id for t in threads))
    return [
        PopulatedThread(thread=thread, author=authors.get(thread.author_id))
        for thread in threads
    ]


async def populate_replies(
    thread_repository: ThreadRepository,
    user_repository: UserRepository,
    threads: list[Thread],
) -> list[ThreadWithReplies]:
    """Attach each thread's author, children, and the children's authors.

    Children keep the order of the parent's ``children`` list.
    """
    child_ids = [child_id for thread in threads for child_id in thread.children]
    children = (
        {t.id: t for t in await thread_repository.find_by_ids(child_ids)}
        if child_ids
        else {}
    )

    authors = await load_authors(
        user_repository,
        [t.author_id for t in threads] + [c.author_id for c in children.values()],
    )

    return [
        ThreadWithReplies(
            thread=thread,
            author=authors.get(thread.author_id),
            children=[
                PopulatedThread(
                    thread=children[child_id],
                    author=authors.get(children[child_id].author_id),
                )
                for child_id in thread.children
                if child_id in children
            ],
        )
        for thread in threads
    ]
