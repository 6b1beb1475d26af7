"""Domain services."""

from .base import Service
from .revalidation import PathRevalidator
from .thread_service import ThreadPage, ThreadService
from .user_service import UserPage, UserService

__all__ = [
    "PathRevalidator",
    "Service",
    "ThreadPage",
    "ThreadService",
    "UserPage",
    "UserService",
]
