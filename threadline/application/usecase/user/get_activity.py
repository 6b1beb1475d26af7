"""Get activity use case."""

from uuid import UUID

from pydantic import BaseModel

from threadline.application.usecase.responses import ThreadResponse
from threadline.domain.service import UserService
from threadline.domain.value import UserId


class GetActivityResponse(BaseModel):
    """Replies other users left on the user's threads."""

    replies: list[ThreadResponse]


class GetActivityUseCase:
    """Use case for a user's activity feed."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get activity use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, user_id: str) -> GetActivityResponse:
        """Execute get activity flow.

        Args:
            user_id: Internal user ID (UUID string)

        Raises:
            ValueError: If user_id is not a UUID
            DataAccessError: If a query fails
        """
        replies = await self.user_service.get_activity(UserId(UUID(user_id)))
        return GetActivityResponse(
            replies=[ThreadResponse.from_populated(r) for r in replies]
        )
