"""In-memory user repository for testing."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from threadline.domain.model.user import User
from threadline.domain.repository.user import UserRepository
from threadline.domain.value import (
    ExternalUserId,
    SortOrder,
    ThreadId,
    UserFilter,
    UserId,
)


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by internal ID."""
        return self._users.get(user_id)

    async def find_by_external_id(
        self, external_id: ExternalUserId
    ) -> Optional[User]:
        """Find a user by external auth ID."""
        for user in self._users.values():
            if user.external_id == external_id:
                return user
        return None

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find users by internal IDs."""
        return [self._users[uid] for uid in dict.fromkeys(user_ids) if uid in self._users]

    async def upsert_profile(
        self,
        external_id: ExternalUserId,
        username: str,
        name: str,
        bio: str,
        image: str,
    ) -> User:
        """Insert or update the profile keyed on external_id."""
        existing = await self.find_by_external_id(external_id)
        profile = {
            "username": username.lower(),
            "name": name,
            "bio": bio,
            "image": image,
            "onboarded": True,
            "updated_at": datetime.now(),
        }

        if existing:
            user = existing.model_copy(update=profile)
        else:
            user = User(id=UserId(uuid4()), external_id=external_id, **profile)

        self._users[user.id] = user
        return user

    async def save(self, user: User) -> User:
        """Store a user as-is (test setup helper)."""
        self._users[user.id] = user
        return user

    async def find_all(
        self,
        user_filter: UserFilter,
        sort: SortOrder = SortOrder.DESC,
        limit: int = 20,
        offset: int = 0,
    ) -> list[User]:
        """Find one page of users matching a filter."""
        users = [
            u
            for u in self._users.values()
            if user_filter.matches(u.external_id, u.username, u.name)
        ]
        users.sort(
            key=lambda u: (u.created_at, str(u.id)), reverse=sort == SortOrder.DESC
        )
        return users[offset : offset + limit]

    async def count(self, user_filter: UserFilter) -> int:
        """Count users matching a filter."""
        return sum(
            1
            for u in self._users.values()
            if user_filter.matches(u.external_id, u.username, u.name)
        )

    async def append_thread(self, user_id: UserId, thread_id: ThreadId) -> None:
        """Append a thread ID to the user's thread_ids."""
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.model_copy(
                update={"thread_ids": [*user.thread_ids, thread_id]}
            )
