"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from threadline.domain.model.user import User
from threadline.domain.value import (
    ExternalUserId,
    SortOrder,
    ThreadId,
    UserFilter,
    UserId,
)


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by internal ID.

        Args:
            user_id: The user's internal identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_external_id(
        self, external_id: ExternalUserId
    ) -> Optional[User]:
        """Find a user by the identifier issued by the auth provider.

        Args:
            external_id: External auth identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        """Find all users whose ID is in ``user_ids``.

        Unknown IDs are skipped. Order is not guaranteed.
        """
        pass

    @abstractmethod
    async def upsert_profile(
        self,
        external_id: ExternalUserId,
        username: str,
        name: str,
        bio: str,
        image: str,
    ) -> User:
        """Create or update the profile keyed on ``external_id``.

        Sets ``onboarded`` to True. Must never create a second row for the
        same external ID.

        Returns:
            The stored user
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        user_filter: UserFilter,
        sort: SortOrder = SortOrder.DESC,
        limit: int = 20,
        offset: int = 0,
    ) -> List[User]:
        """Find users matching a filter, ordered by creation time.

        Args:
            user_filter: Exclusion and search predicate
            sort: Direction over created_at
            limit: Maximum number of users to return
            offset: Number of matching users to skip

        Returns:
            One page of users
        """
        pass

    @abstractmethod
    async def count(self, user_filter: UserFilter) -> int:
        """Count all users matching a filter, ignoring pagination."""
        pass

    @abstractmethod
    async def append_thread(self, user_id: UserId, thread_id: ThreadId) -> None:
        """Append a thread to the user's ``thread_ids``."""
        pass
