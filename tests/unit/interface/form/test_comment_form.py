"""Unit tests for CommentForm."""

import json
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from threadline.domain.error import NotFoundError
from threadline.interface.form.comment import CommentForm


def _form(add_comment, user_id: str = "user_123") -> CommentForm:
    return CommentForm(
        thread_id="thread_1",
        current_user_img="https://img.example.com/me.png",
        current_user_id=json.dumps(user_id),
        pathname="/thread/thread_1",
        add_comment=add_comment,
    )


class TestCommentFormSubmit:
    """Tests for CommentForm.submit()."""

    @pytest.mark.asyncio
    async def test_short_comment_is_rejected_without_calling_mutation(self):
        """'hi' is below the minimum and must never reach add_comment."""
        # Arrange
        add_comment = AsyncMock()
        form = _form(add_comment)
        form.set_value("thread", "hi")

        # Act
        submitted = await form.submit()

        # Assert
        assert submitted is False
        add_comment.assert_not_awaited()
        assert form.errors == {"thread": ["Minimum 3 characters"]}
        assert form.values["thread"] == "hi"

    @pytest.mark.asyncio
    async def test_valid_comment_calls_mutation_and_resets(self):
        """A valid reply is passed on with the decoded user ID, then cleared."""
        # Arrange
        add_comment = AsyncMock()
        form = _form(add_comment)
        form.set_value("thread", "hi there")

        # Act
        submitted = await form.submit()

        # Assert
        assert submitted is True
        add_comment.assert_awaited_once_with(
            "thread_1", "hi there", "user_123", "/thread/thread_1"
        )
        assert form.values == {"thread": ""}
        assert form.errors == {}

    @pytest.mark.asyncio
    async def test_resubmitting_after_error_clears_errors(self):
        add_comment = AsyncMock()
        form = _form(add_comment)
        form.set_value("thread", "no")
        await form.submit()

        form.set_value("thread", "now long enough")
        submitted = await form.submit()

        assert submitted is True
        assert form.errors == {}

    @pytest.mark.asyncio
    async def test_user_id_is_json_decoded(self):
        """The rendered user ID is JSON, so non-string IDs survive."""
        add_comment = AsyncMock()
        user_id = str(uuid4())
        form = _form(add_comment, user_id=user_id)
        form.set_value("thread", "hello")

        await form.submit()

        assert add_comment.await_args.args[2] == user_id

    @pytest.mark.asyncio
    async def test_mutation_errors_propagate(self):
        """Failures from the mutation are not swallowed and keep the input."""
        # Arrange
        add_comment = AsyncMock(side_effect=NotFoundError("Thread", "thread_1"))
        form = _form(add_comment)
        form.set_value("thread", "hello there")

        # Act & Assert
        with pytest.raises(NotFoundError):
            await form.submit()

        assert form.values["thread"] == "hello there"


class TestCommentFormFields:
    """Tests for field handling."""

    def test_starts_empty(self):
        form = _form(AsyncMock())

        assert form.values == {"thread": ""}
        assert form.errors == {}

    def test_unknown_field_is_rejected(self):
        form = _form(AsyncMock())

        with pytest.raises(KeyError):
            form.set_value("title", "nope")
