"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand.
"""

from typing import Any, Dict
from uuid import UUID

from threadline.domain.model import Thread, User
from threadline.domain.value import ExternalUserId, ThreadId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        external_id=ExternalUserId(row["external_id"]),
        username=row["username"],
        name=row.get("name") or "",
        bio=row.get("bio") or "",
        image=row.get("image") or "",
        onboarded=row["onboarded"],
        thread_ids=[ThreadId(_uuid(t)) for t in row.get("thread_ids") or []],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict

    Returns:
        Thread domain model
    """
    return Thread(
        id=ThreadId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        text=row["text"],
        parent_id=ThreadId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        children=[ThreadId(_uuid(c)) for c in row.get("children") or []],
        created_at=row["created_at"],
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread domain model to database dict."""
    return thread.model_dump()
