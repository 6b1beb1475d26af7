"""Unit tests for translating UserFilter into SQL."""

from sqlalchemy import select
from sqlalchemy.dialects import postgresql

from threadline.domain.value import UserFilter
from threadline.persistence.repository.user import _escape_like, apply_user_filter
from threadline.persistence.tables import users_table


def _sql(user_filter: UserFilter) -> str:
    stmt = apply_user_filter(select(users_table), user_filter)
    return str(stmt.compile(dialect=postgresql.dialect()))


class TestApplyUserFilter:
    """Tests for apply_user_filter()."""

    def test_always_excludes_querying_user(self):
        sql = _sql(UserFilter.build("user_1"))

        assert "users.external_id !=" in sql
        assert "ILIKE" not in sql.upper()

    def test_search_matches_username_or_name(self):
        sql = _sql(UserFilter.build("user_1", "ali"))

        assert "users.username ILIKE" in sql
        assert "users.name ILIKE" in sql
        assert " OR " in sql

    def test_blank_search_adds_no_clause(self):
        sql = _sql(UserFilter.build("user_1", "   "))

        assert "ILIKE" not in sql.upper()


class TestEscapeLike:
    """Tests for _escape_like()."""

    def test_escapes_wildcards(self):
        assert _escape_like("50%_off") == "50\\%\\_off"

    def test_escapes_backslash_first(self):
        assert _escape_like("a\\b") == "a\\\\b"

    def test_plain_text_unchanged(self):
        assert _escape_like("alice") == "alice"
