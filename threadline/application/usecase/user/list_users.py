"""List users use case."""

from pydantic import BaseModel, Field

from threadline.application.usecase.responses import UserResponse
from threadline.domain.service import UserService
from threadline.domain.value import SortOrder


class ListUsersRequest(BaseModel):
    """Search/browse request from the user directory."""

    user_id: str  # External ID of the current user, excluded from results
    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, gt=0)
    search_string: str = ""
    sort_by: SortOrder = SortOrder.DESC


class ListUsersResponse(BaseModel):
    """One page of users."""

    users: list[UserResponse]
    is_next: bool


class ListUsersUseCase:
    """Use case for paginated user search."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize list users use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """Execute list users flow."""
        page = await self.user_service.fetch_users(
            user_id=request.user_id,
            page_number=request.page_number,
            page_size=request.page_size,
            search_string=request.search_string,
            sort_by=request.sort_by,
        )
        return ListUsersResponse(
            users=[UserResponse.from_domain(u) for u in page.users],
            is_next=page.is_next,
        )
