"""Comment submission form.

Holds the single ``thread`` field of the reply box under a thread, validates
it on submit and hands the text to the add-comment mutation.
"""

import json
from typing import Any, Awaitable, Callable

import logfire

from threadline.domain.validation import CommentValidation, validate

# (thread_id, text, author_id, path) -> anything; the result is ignored
AddComment = Callable[[str, str, Any, str], Awaitable[Any]]


class CommentForm:
    """Reply form bound to one thread and the signed-in user."""

    def __init__(
        self,
        thread_id: str,
        current_user_img: str,
        current_user_id: str,
        pathname: str,
        add_comment: AddComment,
    ) -> None:
        """Initialize comment form.

        Args:
            thread_id: Thread being replied to
            current_user_img: Avatar shown next to the input
            current_user_id: JSON-encoded ID of the signed-in user
            pathname: Route the form is rendered on, revalidated after submit
            add_comment: Mutation that stores the reply
        """
        self.thread_id = thread_id
        self.current_user_img = current_user_img
        self.current_user_id = current_user_id
        self.pathname = pathname
        self.add_comment = add_comment
        self.values: dict[str, str] = {"thread": ""}
        self.errors: dict[str, list[str]] = {}

    def set_value(self, field: str, value: str) -> None:
        """Update a field as the user types."""
        if field not in self.values:
            raise KeyError(field)
        self.values[field] = value

    def reset(self) -> None:
        """Clear the input and any errors."""
        self.values = {"thread": ""}
        self.errors = {}

    async def submit(self) -> bool:
        """Validate and submit the reply.

        Returns:
            True if the mutation ran, False if validation failed

        Raises:
            Whatever the mutation raises, unchanged
        """
        result = validate(CommentValidation, self.values)
        if not result.ok:
            self.errors = result.errors
            logfire.info(
                "Comment form rejected",
                thread_id=self.thread_id,
                fields=sorted(result.errors),
            )
            return False

        self.errors = {}
        await self.add_comment(
            self.thread_id,
            result.value.thread,
            json.loads(self.current_user_id),
            self.pathname,
        )
        self.reset()
        return True
