"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from threadline.application.usecase.responses import UserResponse
from threadline.application.usecase.user import (
    GetActivityResponse,
    GetActivityUseCase,
    GetUserPostsUseCase,
    GetUserUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    UpsertUserRequest,
    UpsertUserUseCase,
    UserPostsResponse,
)
from threadline.config import Settings
from threadline.domain.value import SortOrder

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpsertUserAPIRequest(BaseModel):
    """API request for saving a profile."""

    username: str = Field(min_length=1, max_length=255)
    name: str = Field(default="", max_length=255)
    bio: str = Field(default="", max_length=1000)
    image: str = ""
    path: str = ""


@router.put("/{external_id}", response_model=UserResponse)
async def upsert_user(
    external_id: str,
    request: UpsertUserAPIRequest,
    upsert_user_use_case: FromDishka[UpsertUserUseCase],
) -> UserResponse:
    """Create or update a user's profile.

    Used both by onboarding and by the profile edit page.

    Example:
        PUT /users/user_2abc
        {"username": "Alice", "name": "Alice A.", "path": "/profile/edit"}
    """
    return await upsert_user_use_case.execute(
        UpsertUserRequest(
            external_id=external_id,
            username=request.username,
            name=request.name,
            bio=request.bio,
            image=request.image,
            path=request.path,
        )
    )


@router.get("", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    settings: FromDishka[Settings],
    user_id: str = Query(min_length=1),
    page_number: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, gt=0),
    search_string: str = "",
    sort_by: SortOrder = SortOrder.DESC,
) -> ListUsersResponse:
    """Search users other than ``user_id``.

    Example:
        GET /users?user_id=user_2abc&search_string=ali&page_number=2
    """
    size = page_size or settings.pagination.default_page_size
    if size > settings.pagination.max_page_size:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"page_size must be at most {settings.pagination.max_page_size}",
        )

    return await list_users_use_case.execute(
        ListUsersRequest(
            user_id=user_id,
            page_number=page_number,
            page_size=size,
            search_string=search_string,
            sort_by=sort_by,
        )
    )


@router.get("/{external_id}", response_model=UserResponse)
async def get_user(
    external_id: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserResponse:
    """Get a user's profile by external ID."""
    user = await get_user_use_case.execute(external_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User '{external_id}' not found",
        )
    return user


@router.get("/{external_id}/posts", response_model=UserPostsResponse)
async def get_user_posts(
    external_id: str,
    get_user_posts_use_case: FromDishka[GetUserPostsUseCase],
) -> UserPostsResponse:
    """Get a user with their threads and the replies to them."""
    posts = await get_user_posts_use_case.execute(external_id)
    if not posts:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User '{external_id}' not found",
        )
    return posts


@router.get("/{user_id}/activity", response_model=GetActivityResponse)
async def get_activity(
    user_id: str,
    get_activity_use_case: FromDishka[GetActivityUseCase],
) -> GetActivityResponse:
    """Get replies other users left on this user's threads.

    Args:
        user_id: Internal user ID (UUID)
    """
    try:
        return await get_activity_use_case.execute(user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Invalid user ID format",
        )
