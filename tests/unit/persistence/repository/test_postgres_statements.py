"""Unit tests for the PostgreSQL statements the repositories execute."""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.ext.asyncio import AsyncSession

from threadline.domain.value import (
    ExternalUserId,
    SortOrder,
    ThreadId,
    UserFilter,
    UserId,
)
from threadline.persistence.repository import (
    PostgresThreadRepository,
    PostgresUserRepository,
)


def _session(rows=None) -> AsyncMock:
    """Session that records statements and returns ``rows``."""
    result = MagicMock()
    result.mappings.return_value.all.return_value = rows or []
    result.mappings.return_value.one.return_value = (rows or [None])[0]
    result.fetchall.return_value = []
    session = AsyncMock(spec=AsyncSession)
    session.execute.return_value = result
    return session


def _executed(session: AsyncMock):
    stmt = session.execute.await_args.args[0]
    return stmt.compile(dialect=postgresql.dialect())


class TestUserStatements:
    """Tests for PostgresUserRepository SQL."""

    @pytest.mark.asyncio
    async def test_upsert_is_single_on_conflict_statement(self):
        """Concurrent first saves must resolve on external_id, not race."""
        # Arrange
        now = datetime(2024, 1, 1, 12, 0, 0)
        row = {
            "id": uuid4(),
            "external_id": "user_1",
            "username": "alice",
            "name": "Alice",
            "bio": "",
            "image": "",
            "onboarded": True,
            "thread_ids": [],
            "created_at": now,
            "updated_at": now,
        }
        session = _session([row])
        repo = PostgresUserRepository(session)

        # Act
        user = await repo.upsert_profile(
            ExternalUserId("user_1"), username="Alice", name="Alice", bio="", image=""
        )

        # Assert
        compiled = _executed(session)
        sql = str(compiled)
        assert session.execute.await_count == 1
        assert "INSERT INTO users" in sql
        assert "ON CONFLICT (external_id) DO UPDATE SET" in sql
        assert "username = excluded.username" in sql
        assert "RETURNING users.id" in sql
        assert compiled.params["username"] == "alice"
        assert compiled.params["external_id"] == "user_1"
        assert user.id == row["id"]

    @pytest.mark.asyncio
    async def test_append_thread_uses_array_append(self):
        """The thread ID is appended in one UPDATE, not read-modify-write."""
        # Arrange
        session = _session()
        repo = PostgresUserRepository(session)

        # Act
        await repo.append_thread(UserId(uuid4()), ThreadId(uuid4()))

        # Assert
        sql = str(_executed(session))
        assert sql.startswith("UPDATE users SET")
        assert "thread_ids=array_append(users.thread_ids, CAST(" in sql
        assert "WHERE users.id =" in sql
        assert session.execute.await_count == 1
        session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_find_all_orders_by_created_at_then_id(self):
        # Arrange
        session = _session()
        repo = PostgresUserRepository(session)

        # Act
        await repo.find_all(UserFilter.build("me"), limit=10, offset=20)

        # Assert
        sql = str(_executed(session))
        assert "ORDER BY users.created_at DESC, users.id DESC" in sql
        assert "LIMIT" in sql
        assert "OFFSET" in sql

    @pytest.mark.asyncio
    async def test_find_all_ascending_applies_to_tiebreaker(self):
        session = _session()
        repo = PostgresUserRepository(session)

        await repo.find_all(UserFilter.build("me"), sort=SortOrder.ASC)

        sql = str(_executed(session))
        assert "ORDER BY users.created_at ASC, users.id ASC" in sql


class TestThreadStatements:
    """Tests for PostgresThreadRepository SQL."""

    @pytest.mark.asyncio
    async def test_append_child_uses_array_append(self):
        # Arrange
        session = _session()
        repo = PostgresThreadRepository(session)

        # Act
        await repo.append_child(ThreadId(uuid4()), ThreadId(uuid4()))

        # Assert
        sql = str(_executed(session))
        assert sql.startswith("UPDATE threads SET")
        assert "children=array_append(threads.children, CAST(" in sql
        assert "WHERE threads.id =" in sql
        session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_top_level_feed_is_newest_first_with_id_tiebreaker(self):
        # Arrange
        session = _session()
        repo = PostgresThreadRepository(session)

        # Act
        await repo.find_top_level(limit=5, offset=10)

        # Assert
        sql = str(_executed(session))
        assert "WHERE threads.parent_id IS NULL" in sql
        assert "ORDER BY threads.created_at DESC, threads.id DESC" in sql
