"""Query value objects.

Filters and page requests are plain values built from request input.
Repository implementations translate them into their own query language.
"""

from enum import Enum

from pydantic import Field, computed_field

from threadline.domain.value.common import ValueObject
from threadline.domain.value.identifiers import ExternalUserId


class SortOrder(str, Enum):
    """Sort direction over creation time."""

    ASC = "asc"
    DESC = "desc"


class PageRequest(ValueObject):
    """One page of a listing, 1-based."""

    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, gt=0)

    @computed_field
    @property
    def skip(self) -> int:
        """Number of matching rows before this page."""
        return (self.page_number - 1) * self.page_size

    def has_next(self, total: int, returned: int) -> bool:
        """Whether rows remain past this page.

        Uses the total match count rather than the page size so the last
        full page does not report a phantom next page.
        """
        return total > self.skip + returned


class UserFilter(ValueObject):
    """Predicate for user listings.

    Always excludes the querying user. When ``search`` is set, a user also
    has to contain it (case-insensitively) in their username or name.
    """

    exclude_external_id: ExternalUserId
    search: str | None = None

    @classmethod
    def build(cls, exclude_external_id: str, search_string: str = "") -> "UserFilter":
        """Build the filter from raw request input.

        Blank or whitespace-only search strings add no search clause.
        """
        search = search_string.strip()
        return cls(
            exclude_external_id=ExternalUserId(exclude_external_id),
            search=search or None,
        )

    def matches(self, external_id: str, username: str, name: str) -> bool:
        """Evaluate the predicate in memory."""
        if external_id == self.exclude_external_id:
            return False
        if self.search is None:
            return True
        needle = self.search.casefold()
        return needle in username.casefold() or needle in name.casefold()
