"""Unit tests for CreateThreadUseCase."""

from uuid import uuid4

import pytest

from threadline.application.usecase.thread import (
    CreateThreadRequest,
    CreateThreadUseCase,
)
from threadline.domain.error import NotFoundError, ValidationError
from threadline.domain.repository import ThreadRepository, UserRepository
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateThreadUseCase:
    """Tests for CreateThreadUseCase."""

    @pytest.mark.asyncio
    async def test_creates_thread(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateThreadUseCase)
        user_repo = await unit_env.get(UserRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        alice = await user_repo.save(make_user("alice", "Alice"))

        # Act
        response = await use_case.execute(
            CreateThreadRequest(thread="My first thread", account_id=str(alice.id), path="/")
        )

        # Assert
        assert response.text == "My first thread"
        assert response.author_id == str(alice.id)
        assert response.parent_id is None
        assert await thread_repo.count_top_level() == 1

    @pytest.mark.asyncio
    async def test_short_text_raises_validation_error(self, unit_env):
        """Invalid input must be rejected before anything is stored."""
        use_case = await unit_env.get(CreateThreadUseCase)
        thread_repo = await unit_env.get(ThreadRepository)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CreateThreadRequest(thread="hi", account_id=str(uuid4()))
            )

        assert "thread" in exc_info.value.errors
        assert await thread_repo.count_top_level() == 0

    @pytest.mark.asyncio
    async def test_missing_account_raises_validation_error(self, unit_env):
        use_case = await unit_env.get(CreateThreadUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(CreateThreadRequest(thread="Hello world"))

        assert "accountId" in exc_info.value.errors

    @pytest.mark.asyncio
    async def test_malformed_account_raises_validation_error(self, unit_env):
        use_case = await unit_env.get(CreateThreadUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CreateThreadRequest(thread="Hello world", account_id="not-a-uuid")
            )

        assert exc_info.value.errors == {"accountId": ["Invalid account id"]}

    @pytest.mark.asyncio
    async def test_unknown_account_raises_not_found(self, unit_env):
        use_case = await unit_env.get(CreateThreadUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateThreadRequest(thread="Hello world", account_id=str(uuid4()))
            )
