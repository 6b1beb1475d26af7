"""Get user use cases."""

from pydantic import BaseModel

from threadline.application.usecase.responses import (
    ThreadWithRepliesResponse,
    UserResponse,
)
from threadline.domain.service import UserService


class GetUserUseCase:
    """Use case for fetching a user's profile by external ID."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, external_id: str) -> UserResponse | None:
        """Return the profile, or None if the user never onboarded."""
        user = await self.user_service.fetch_user(external_id)
        return UserResponse.from_domain(user) if user else None


class UserPostsResponse(BaseModel):
    """User with their threads and the replies to them."""

    user: UserResponse
    threads: list[ThreadWithRepliesResponse]


class GetUserPostsUseCase:
    """Use case for a user's profile page: their threads and replies."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user posts use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, external_id: str) -> UserPostsResponse | None:
        """Return the user's threads, or None if the user does not exist."""
        user_posts = await self.user_service.fetch_user_posts(external_id)
        if not user_posts:
            return None

        return UserPostsResponse(
            user=UserResponse.from_domain(user_posts.user),
            threads=[
                ThreadWithRepliesResponse.from_replies(t) for t in user_posts.threads
            ],
        )
