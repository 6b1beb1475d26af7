"""User domain service."""

from dataclasses import dataclass

import logfire

from threadline.domain.error import DataAccessError
from threadline.domain.model import PopulatedThread, User, UserPosts
from threadline.domain.repository import (
    ThreadRepository,
    TransactionManager,
    UserRepository,
)
from threadline.domain.value import (
    ExternalUserId,
    PageRequest,
    SortOrder,
    UserFilter,
    UserId,
)

from .base import Service
from .population import populate_authors, populate_replies
from .revalidation import PathRevalidator


@dataclass
class UserPage:
    """One page of a user listing."""

    users: list[User]
    is_next: bool


class UserService(Service):
    """Domain service for user profiles, user search and activity."""

    def __init__(
        self,
        user_repository: UserRepository,
        thread_repository: ThreadRepository,
        revalidator: PathRevalidator,
        transaction_manager: TransactionManager,
        profile_edit_path: str = "/profile/edit",
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            thread_repository: Thread repository
            revalidator: Cache revalidation port
            transaction_manager: Commits the profile before it is revalidated
            profile_edit_path: Route whose cache is busted after a profile save
        """
        self.user_repository = user_repository
        self.thread_repository = thread_repository
        self.revalidator = revalidator
        self.transaction_manager = transaction_manager
        self.profile_edit_path = profile_edit_path

    async def upsert_user(
        self,
        external_id: str,
        username: str,
        name: str,
        bio: str,
        image: str,
        path: str,
    ) -> User:
        """Create the user's profile, or overwrite it if it already exists.

        The first save is the normal onboarding path, not an error.

        Args:
            external_id: Identifier from the auth provider
            username: Username, stored lowercase
            name: Display name
            bio: Profile bio
            image: Avatar URL
            path: Route the form was submitted from

        Returns:
            The stored user

        Raises:
            DataAccessError: If the database write fails
        """
        with logfire.span(
            "user_service.upsert_user", external_id=external_id, path=path
        ):
            try:
                user = await self.user_repository.upsert_profile(
                    ExternalUserId(external_id),
                    username=username.lower(),
                    name=name,
                    bio=bio,
                    image=image,
                )
                await self.transaction_manager.commit()
            except Exception as e:
                logfire.error(
                    "User upsert failed", external_id=external_id, error=str(e)
                )
                raise DataAccessError("create/update user", e) from e

            if path == self.profile_edit_path:
                await self.revalidator.revalidate(path)

            logfire.info(
                "User updated successfully",
                user_id=str(user.id),
                username=user.username,
            )
            return user

    async def fetch_user(self, external_id: str) -> User | None:
        """Get a user by external ID.

        Returns:
            User if found, None otherwise

        Raises:
            DataAccessError: If the query fails
        """
        with logfire.span("user_service.fetch_user", external_id=external_id):
            try:
                user = await self.user_repository.find_by_external_id(
                    ExternalUserId(external_id)
                )
            except Exception as e:
                raise DataAccessError("fetch user", e) from e

            if not user:
                logfire.warn("User not found", external_id=external_id)
            return user

    async def fetch_user_posts(self, external_id: str) -> UserPosts | None:
        """Get a user with their threads, each thread's replies and the
        replies' authors.

        Returns:
            UserPosts if the user exists, None otherwise

        Raises:
            DataAccessError: If a query fails
        """
        with logfire.span("user_service.fetch_user_posts", external_id=external_id):
            try:
                user = await self.user_repository.find_by_external_id(
                    ExternalUserId(external_id)
                )
                if not user:
                    logfire.warn("User not found", external_id=external_id)
                    return None

                found = {
                    t.id: t
                    for t in await self.thread_repository.find_by_ids(user.thread_ids)
                }
                threads = [found[tid] for tid in user.thread_ids if tid in found]
                populated = await populate_replies(
                    self.thread_repository, self.user_repository, threads
                )
            except Exception as e:
                raise DataAccessError("fetch user posts", e) from e

            logfire.info(
                "User posts fetched", user_id=str(user.id), count=len(populated)
            )
            return UserPosts(user=user, threads=populated)

    async def fetch_users(
        self,
        user_id: str,
        page_number: int = 1,
        page_size: int = 20,
        search_string: str = "",
        sort_by: SortOrder = SortOrder.DESC,
    ) -> UserPage:
        """List other users, optionally searching username and name.

        Args:
            user_id: External ID of the querying user (always excluded)
            page_number: 1-based page number
            page_size: Users per page
            search_string: Case-insensitive substring; blank means no search
            sort_by: Direction over creation time

        Returns:
            The page and whether another page follows

        Raises:
            DataAccessError: If a query fails
        """
        page = PageRequest(page_number=page_number, page_size=page_size)
        user_filter = UserFilter.build(user_id, search_string)

        with logfire.span(
            "user_service.fetch_users",
            page_number=page.page_number,
            page_size=page.page_size,
            search=user_filter.search,
            sort_by=SortOrder(sort_by).value,
        ):
            try:
                total = await self.user_repository.count(user_filter)
                users = await self.user_repository.find_all(
                    user_filter,
                    sort=SortOrder(sort_by),
                    limit=page.page_size,
                    offset=page.skip,
                )
            except Exception as e:
                raise DataAccessError("fetch users", e) from e

            is_next = page.has_next(total, len(users))
            logfire.info(
                "Users listed", count=len(users), total=total, is_next=is_next
            )
            return UserPage(users=users, is_next=is_next)

    async def get_activity(self, user_id: UserId) -> list[PopulatedThread]:
        """Get replies other users left on any of this user's threads.

        Replies the user wrote on their own threads are not activity.

        Args:
            user_id: Internal user ID

        Returns:
            Replies with their authors, newest first

        Raises:
            DataAccessError: If a query fails
        """
        with logfire.span("user_service.get_activity", user_id=str(user_id)):
            try:
                user_threads = await self.thread_repository.find_by_author(user_id)

                # Flatten every child list; duplicates and order are kept
                child_ids = [
                    child_id for thread in user_threads for child_id in thread.children
                ]
                if not child_ids:
                    return []

                replies = await self.thread_repository.find_replies(
                    child_ids, exclude_author_id=user_id
                )
                activity = await populate_authors(self.user_repository, replies)
            except Exception as e:
                logfire.error(
                    "Error fetching replies", user_id=str(user_id), error=str(e)
                )
                raise DataAccessError("fetch activity", e) from e

            logfire.info("Activity fetched", user_id=str(user_id), count=len(activity))
            return activity
