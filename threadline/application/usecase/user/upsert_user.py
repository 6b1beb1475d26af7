"""Upsert user profile use case."""

from pydantic import BaseModel, Field

from threadline.application.usecase.base import BaseUseCase
from threadline.application.usecase.responses import UserResponse
from threadline.domain.service import UserService


class UpsertUserRequest(BaseModel):
    """Profile form submission."""

    external_id: str = Field(min_length=1)
    username: str = Field(min_length=1, max_length=255)
    name: str = Field(default="", max_length=255)
    bio: str = Field(default="", max_length=1000)
    image: str = ""
    path: str = ""  # Route the form was submitted from


class UpsertUserUseCase(BaseUseCase):
    """Use case for saving a user's profile on onboarding or edit."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize upsert user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpsertUserRequest) -> UserResponse:
        """Create or update the profile for ``request.external_id``.

        Raises:
            DataAccessError: If the write fails
        """
        user = await self.user_service.upsert_user(
            external_id=request.external_id,
            username=request.username,
            name=request.name,
            bio=request.bio,
            image=request.image,
            path=request.path,
        )
        return UserResponse.from_domain(user)
