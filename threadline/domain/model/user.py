"""User aggregate root.

A user is created the first time their profile is saved and is keyed on the
identifier issued by the external auth provider.
"""

from datetime import datetime

from pydantic import Field, field_validator

from threadline.domain.model.common import DomainModel
from threadline.domain.value import ExternalUserId, ThreadId, UserId


class User(DomainModel):
    """User aggregate root.

    ``thread_ids`` holds the top-level threads the user authored, in the
    order they were created.
    """

    id: UserId
    external_id: ExternalUserId
    username: str = Field(min_length=1, max_length=255)
    name: str = ""
    bio: str = ""
    image: str = ""
    onboarded: bool = False
    thread_ids: list[ThreadId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("username")
    @classmethod
    def lowercase_username(cls, v: str) -> str:
        """Usernames are stored lowercase."""
        return v.lower()

    def to_author(self) -> "AuthorSummary":
        """Project onto the fields exposed when a user is populated as author."""
        return AuthorSummary(id=self.id, name=self.name, image=self.image)


class AuthorSummary(DomainModel):
    """Author fields populated onto threads: name, image and id only."""

    id: UserId
    name: str
    image: str
