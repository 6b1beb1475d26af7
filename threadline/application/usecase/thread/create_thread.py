"""Create thread use case."""

from uuid import UUID

from pydantic import BaseModel

from threadline.application.usecase.base import BaseUseCase
from threadline.application.usecase.responses import ThreadResponse
from threadline.domain.error import ValidationError
from threadline.domain.service import ThreadService
from threadline.domain.validation import ThreadValidation, validate
from threadline.domain.value import UserId


class CreateThreadRequest(BaseModel):
    """New thread form submission, validated by the use case."""

    thread: str = ""
    account_id: str = ""  # Internal user ID (UUID string)
    path: str = ""


class CreateThreadUseCase(BaseUseCase):
    """Use case for posting a new top-level thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize create thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: CreateThreadRequest) -> ThreadResponse:
        """Execute create thread flow.

        Raises:
            ValidationError: If the text is too short or the account is
                missing or malformed
            NotFoundError: If the author does not exist
            DataAccessError: If the write fails
        """
        result = validate(
            ThreadValidation,
            {"thread": request.thread, "accountId": request.account_id},
        )
        if not result.ok:
            raise ValidationError(result.errors)

        try:
            author_id = UserId(UUID(result.value.account_id))
        except ValueError:
            raise ValidationError({"accountId": ["Invalid account id"]}) from None

        thread = await self.thread_service.create_thread(
            text=result.value.thread, author_id=author_id, path=request.path
        )
        return ThreadResponse.from_domain(thread)
