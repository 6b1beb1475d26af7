"""PostgreSQL implementation of Thread repository."""

from typing import List, Optional

import logfire
from sqlalchemy import cast, desc, func, select
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.ext.asyncio import AsyncSession

from threadline.domain.model import Thread
from threadline.domain.repository import ThreadRepository
from threadline.domain.value import ThreadId, UserId
from threadline.persistence.mappers import row_to_thread, thread_to_dict
from threadline.persistence.tables import threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        stmt = select(threads_table).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_thread(row._asdict()) if row else None

    async def find_by_ids(self, thread_ids: List[ThreadId]) -> List[Thread]:
        """Find threads by IDs in one query."""
        if not thread_ids:
            return []
        stmt = select(threads_table).where(threads_table.c.id.in_(set(thread_ids)))
        result = await self.session.execute(stmt)
        return [row_to_thread(row._asdict()) for row in result.fetchall()]

    async def find_by_author(self, author_id: UserId) -> List[Thread]:
        """Find all threads by an author."""
        stmt = (
            select(threads_table)
            .where(threads_table.c.author_id == author_id)
            .order_by(threads_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_thread(row._asdict()) for row in result.fetchall()]

    async def find_replies(
        self, thread_ids: List[ThreadId], exclude_author_id: UserId
    ) -> List[Thread]:
        """Find threads among ``thread_ids`` written by someone else."""
        if not thread_ids:
            return []
        with logfire.span(
            "thread_repository.find_replies",
            candidates=len(thread_ids),
            exclude_author_id=str(exclude_author_id),
        ):
            stmt = (
                select(threads_table)
                .where(threads_table.c.id.in_(set(thread_ids)))
                .where(threads_table.c.author_id != exclude_author_id)
                .order_by(desc(threads_table.c.created_at))
            )
            result = await self.session.execute(stmt)
            return [row_to_thread(row._asdict()) for row in result.fetchall()]

    async def find_top_level(self, limit: int = 20, offset: int = 0) -> List[Thread]:
        """Find top-level threads, newest first."""
        stmt = (
            select(threads_table)
            .where(threads_table.c.parent_id.is_(None))
            .order_by(desc(threads_table.c.created_at), desc(threads_table.c.id))
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_thread(row._asdict()) for row in result.fetchall()]

    async def count_top_level(self) -> int:
        """Count top-level threads."""
        stmt = (
            select(func.count())
            .select_from(threads_table)
            .where(threads_table.c.parent_id.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update)."""
        existing = await self.find_by_id(thread.id)
        thread_dict = thread_to_dict(thread)

        if existing:
            stmt = (
                threads_table.update()
                .where(threads_table.c.id == thread.id)
                .values(**thread_dict)
            )
        else:
            stmt = threads_table.insert().values(**thread_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return thread

    async def append_child(self, parent_id: ThreadId, child_id: ThreadId) -> None:
        """Atomically append a reply ID to the parent's children."""
        stmt = (
            threads_table.update()
            .where(threads_table.c.id == parent_id)
            .values(
                children=func.array_append(
                    threads_table.c.children,
                    cast(child_id, UUID),
                    type_=ARRAY(UUID),
                )
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
