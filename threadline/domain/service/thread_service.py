"""Thread domain service."""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire

from threadline.domain.error import DataAccessError, NotFoundError
from threadline.domain.model import Thread, ThreadWithReplies
from threadline.domain.repository import (
    ThreadRepository,
    TransactionManager,
    UserRepository,
)
from threadline.domain.value import PageRequest, ThreadId, UserId

from .base import Service
from .population import populate_replies
from .revalidation import PathRevalidator


@dataclass
class ThreadPage:
    """One page of the top-level thread feed."""

    threads: list[ThreadWithReplies]
    is_next: bool


class ThreadService(Service):
    """Domain service for creating and reading threads."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        user_repository: UserRepository,
        revalidator: PathRevalidator,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            user_repository: User repository
            revalidator: Cache revalidation port
            transaction_manager: Commits writes before paths are revalidated
        """
        self.thread_repository = thread_repository
        self.user_repository = user_repository
        self.revalidator = revalidator
        self.transaction_manager = transaction_manager

    async def create_thread(self, text: str, author_id: UserId, path: str) -> Thread:
        """Create a top-level thread and add it to the author's threads.

        Raises:
            NotFoundError: If the author does not exist
            DataAccessError: If a database operation fails
        """
        with logfire.span(
            "thread_service.create_thread", author_id=str(author_id), path=path
        ):
            try:
                author = await self.user_repository.find_by_id(author_id)
            except Exception as e:
                raise DataAccessError("create thread", e) from e
            if not author:
                logfire.warn("Thread author not found", author_id=str(author_id))
                raise NotFoundError("User", str(author_id))

            thread = Thread(
                id=ThreadId(uuid4()),
                author_id=author_id,
                text=text,
                created_at=datetime.now(),
            )
            try:
                saved = await self.thread_repository.save(thread)
                await self.user_repository.append_thread(author_id, saved.id)
                await self.transaction_manager.commit()
            except Exception as e:
                raise DataAccessError("create thread", e) from e

            await self.revalidator.revalidate(path)
            logfire.info(
                "Thread created", thread_id=str(saved.id), author_id=str(author_id)
            )
            return saved

    async def add_comment_to_thread(
        self, thread_id: ThreadId, text: str, author_id: UserId, path: str
    ) -> Thread:
        """Reply to a thread.

        The reply is stored as its own thread and appended to the parent's
        children.

        Raises:
            NotFoundError: If the author or the parent thread does not exist
            DataAccessError: If a database operation fails
        """
        with logfire.span(
            "thread_service.add_comment_to_thread",
            thread_id=str(thread_id),
            author_id=str(author_id),
            path=path,
        ):
            try:
                author = await self.user_repository.find_by_id(author_id)
                parent = await self.thread_repository.find_by_id(thread_id)
            except Exception as e:
                raise DataAccessError("add comment to thread", e) from e
            if not author:
                logfire.warn("Comment author not found", author_id=str(author_id))
                raise NotFoundError("User", str(author_id))
            if not parent:
                logfire.warn("Parent thread not found", thread_id=str(thread_id))
                raise NotFoundError("Thread", str(thread_id))

            comment = Thread(
                id=ThreadId(uuid4()),
                author_id=author_id,
                text=text,
                parent_id=parent.id,
                created_at=datetime.now(),
            )
            try:
                saved = await self.thread_repository.save(comment)
                await self.thread_repository.append_child(parent.id, saved.id)
                await self.transaction_manager.commit()
            except Exception as e:
                raise DataAccessError("add comment to thread", e) from e

            await self.revalidator.revalidate(path)
            logfire.info(
                "Comment added",
                comment_id=str(saved.id),
                thread_id=str(thread_id),
                author_id=str(author_id),
            )
            return saved

    async def fetch_thread_by_id(self, thread_id: ThreadId) -> ThreadWithReplies | None:
        """Get a thread with its author and replies.

        Returns:
            The populated thread, or None if it does not exist
        """
        with logfire.span("thread_service.fetch_thread_by_id", thread_id=str(thread_id)):
            try:
                thread = await self.thread_repository.find_by_id(thread_id)
                if not thread:
                    logfire.warn("Thread not found", thread_id=str(thread_id))
                    return None
                [populated] = await populate_replies(
                    self.thread_repository, self.user_repository, [thread]
                )
            except Exception as e:
                raise DataAccessError("fetch thread", e) from e
            return populated

    async def fetch_posts(self, page_number: int = 1, page_size: int = 20) -> ThreadPage:
        """Get one page of top-level threads, newest first."""
        page = PageRequest(page_number=page_number, page_size=page_size)

        with logfire.span(
            "thread_service.fetch_posts",
            page_number=page.page_number,
            page_size=page.page_size,
        ):
            try:
                total = await self.thread_repository.count_top_level()
                threads = await self.thread_repository.find_top_level(
                    limit=page.page_size, offset=page.skip
                )
                populated = await populate_replies(
                    self.thread_repository, self.user_repository, threads
                )
            except Exception as e:
                raise DataAccessError("fetch posts", e) from e

            is_next = page.has_next(total, len(threads))
            logfire.info(
                "Posts listed", count=len(threads), total=total, is_next=is_next
            )
            return ThreadPage(threads=populated, is_next=is_next)
