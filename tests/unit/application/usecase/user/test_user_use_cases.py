"""Unit tests for user use cases."""

from uuid import uuid4

import pytest

from threadline.application.usecase.user import (
    GetActivityUseCase,
    GetUserPostsUseCase,
    GetUserUseCase,
    ListUsersRequest,
    ListUsersUseCase,
    UpsertUserRequest,
    UpsertUserUseCase,
)
from threadline.domain.repository import ThreadRepository, UserRepository
from threadline.domain.service import PathRevalidator
from tests.conftest import make_thread, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpsertUserUseCase:
    """Tests for UpsertUserUseCase."""

    @pytest.mark.asyncio
    async def test_upsert_returns_profile(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpsertUserUseCase)
        revalidator = await unit_env.get(PathRevalidator)

        # Act
        response = await use_case.execute(
            UpsertUserRequest(
                external_id="user_1",
                username="Alice",
                name="Alice",
                path="/profile/edit",
            )
        )

        # Assert
        assert response.external_id == "user_1"
        assert response.username == "alice"
        assert response.onboarded is True
        assert revalidator.paths == ["/profile/edit"]

    @pytest.mark.asyncio
    async def test_fetch_after_upsert(self, unit_env):
        upsert = await unit_env.get(UpsertUserUseCase)
        get_user = await unit_env.get(GetUserUseCase)

        created = await upsert.execute(
            UpsertUserRequest(external_id="user_1", username="alice")
        )
        fetched = await get_user.execute("user_1")

        assert fetched == created

    @pytest.mark.asyncio
    async def test_get_missing_user_returns_none(self, unit_env):
        get_user = await unit_env.get(GetUserUseCase)

        assert await get_user.execute("nobody") is None


class TestListUsersUseCase:
    """Tests for ListUsersUseCase."""

    @pytest.mark.asyncio
    async def test_list_users_excludes_caller(self, unit_env):
        use_case = await unit_env.get(ListUsersUseCase)
        user_repo = await unit_env.get(UserRepository)
        me = await user_repo.save(make_user("me"))
        await user_repo.save(make_user("alice", "Alice"))

        response = await use_case.execute(
            ListUsersRequest(user_id=me.external_id, search_string="al")
        )

        assert [u.username for u in response.users] == ["alice"]
        assert response.is_next is False


class TestUserPostsAndActivity:
    """Tests for GetUserPostsUseCase and GetActivityUseCase."""

    @pytest.mark.asyncio
    async def test_posts_and_activity(self, unit_env):
        # Arrange
        get_posts = await unit_env.get(GetUserPostsUseCase)
        get_activity = await unit_env.get(GetActivityUseCase)
        user_repo = await unit_env.get(UserRepository)
        thread_repo = await unit_env.get(ThreadRepository)

        alice = await user_repo.save(make_user("alice", "Alice"))
        bob = await user_repo.save(make_user("bob", "Bob"))
        thread = await thread_repo.save(make_thread(alice, "Alice's thread"))
        reply = await thread_repo.save(make_thread(bob, "Bob replies", thread, 1))
        await thread_repo.append_child(thread.id, reply.id)
        await user_repo.append_thread(alice.id, thread.id)

        # Act
        posts = await get_posts.execute(alice.external_id)
        activity = await get_activity.execute(str(alice.id))

        # Assert
        assert [t.thread_id for t in posts.threads] == [str(thread.id)]
        assert posts.threads[0].replies[0].text == "Bob replies"
        assert [r.thread_id for r in activity.replies] == [str(reply.id)]
        assert activity.replies[0].author.name == "Bob"

    @pytest.mark.asyncio
    async def test_activity_rejects_malformed_id(self, unit_env):
        get_activity = await unit_env.get(GetActivityUseCase)

        with pytest.raises(ValueError):
            await get_activity.execute("not-a-uuid")

    @pytest.mark.asyncio
    async def test_posts_for_missing_user(self, unit_env):
        get_posts = await unit_env.get(GetUserPostsUseCase)

        assert await get_posts.execute(str(uuid4())) is None
