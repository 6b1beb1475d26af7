"""PostgreSQL implementation of User repository."""

from datetime import datetime
from typing import List, Optional
from uuid import uuid4

import logfire
from sqlalchemy import Select, asc, cast, desc, func, or_, select
from sqlalchemy.dialects.postgresql import ARRAY, UUID, insert
from sqlalchemy.ext.asyncio import AsyncSession

from threadline.domain.model import User
from threadline.domain.repository import UserRepository
from threadline.domain.value import (
    ExternalUserId,
    SortOrder,
    ThreadId,
    UserFilter,
    UserId,
)
from threadline.persistence.mappers import row_to_user
from threadline.persistence.tables import users_table


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so the search is a plain substring match."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def apply_user_filter(stmt: Select, user_filter: UserFilter) -> Select:
    """Translate a UserFilter into WHERE clauses."""
    stmt = stmt.where(users_table.c.external_id != user_filter.exclude_external_id)

    if user_filter.search is not None:
        pattern = f"%{_escape_like(user_filter.search)}%"
        stmt = stmt.where(
            or_(
                users_table.c.username.ilike(pattern, escape="\\"),
                users_table.c.name.ilike(pattern, escape="\\"),
            )
        )

    return stmt


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by internal ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_external_id(
        self, external_id: ExternalUserId
    ) -> Optional[User]:
        """Find a user by external auth ID."""
        stmt = select(users_table).where(users_table.c.external_id == external_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        """Find users by internal IDs in one query."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def upsert_profile(
        self,
        external_id: ExternalUserId,
        username: str,
        name: str,
        bio: str,
        image: str,
    ) -> User:
        """Insert the profile, or update it in place on external_id conflict.

        Single INSERT ... ON CONFLICT statement, so two concurrent first
        saves cannot create two rows.
        """
        now = datetime.now()
        stmt = insert(users_table).values(
            id=uuid4(),
            external_id=external_id,
            username=username.lower(),
            name=name,
            bio=bio,
            image=image,
            onboarded=True,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.external_id],
            set_={
                "username": stmt.excluded.username,
                "name": stmt.excluded.name,
                "bio": stmt.excluded.bio,
                "image": stmt.excluded.image,
                "onboarded": True,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(users_table)

        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_user(dict(row))

    async def find_all(
        self,
        user_filter: UserFilter,
        sort: SortOrder = SortOrder.DESC,
        limit: int = 20,
        offset: int = 0,
    ) -> List[User]:
        """Find one page of users matching a filter."""
        with logfire.span(
            "user_repository.find_all",
            search=user_filter.search,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            order = desc if sort == SortOrder.DESC else asc
            stmt = apply_user_filter(select(users_table), user_filter)
            # id breaks created_at ties so pages never overlap
            stmt = (
                stmt.order_by(order(users_table.c.created_at), order(users_table.c.id))
                .offset(offset)
                .limit(limit)
            )

            result = await self.session.execute(stmt)
            return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def count(self, user_filter: UserFilter) -> int:
        """Count users matching a filter."""
        stmt = apply_user_filter(
            select(func.count()).select_from(users_table), user_filter
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def append_thread(self, user_id: UserId, thread_id: ThreadId) -> None:
        """Atomically append a thread ID to the user's thread_ids."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(
                thread_ids=func.array_append(
                    users_table.c.thread_ids,
                    cast(thread_id, UUID),
                    type_=ARRAY(UUID),
                ),
                updated_at=datetime.now(),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
