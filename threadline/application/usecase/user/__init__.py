"""User use cases."""

from .get_activity import GetActivityResponse, GetActivityUseCase
from .get_user import GetUserPostsUseCase, GetUserUseCase, UserPostsResponse
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .upsert_user import UpsertUserRequest, UpsertUserUseCase

__all__ = [
    "GetActivityResponse",
    "GetActivityUseCase",
    "GetUserPostsUseCase",
    "GetUserUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "UpsertUserRequest",
    "UpsertUserUseCase",
    "UserPostsResponse",
]
