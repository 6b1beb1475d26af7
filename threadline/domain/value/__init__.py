"""Domain value objects for Threadline."""

from threadline.domain.value.identifiers import ExternalUserId, ThreadId, UserId
from threadline.domain.value.types import PageRequest, SortOrder, UserFilter

__all__ = [
    # Identifiers
    "UserId",
    "ThreadId",
    "ExternalUserId",
    # Query values
    "PageRequest",
    "SortOrder",
    "UserFilter",
]
