"""Domain layer DI providers."""

from dishka import Scope, provide

from threadline.config import RevalidationSettings
from threadline.domain.repository import (
    ThreadRepository,
    TransactionManager,
    UserRepository,
)
from threadline.domain.service import PathRevalidator, ThreadService, UserService
from threadline.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        thread_repository: ThreadRepository,
        revalidator: PathRevalidator,
        transaction_manager: TransactionManager,
        revalidation_settings: RevalidationSettings,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            thread_repository=thread_repository,
            revalidator=revalidator,
            transaction_manager=transaction_manager,
            profile_edit_path=revalidation_settings.profile_edit_path,
        )

    @provide
    def get_thread_service(
        self,
        thread_repository: ThreadRepository,
        user_repository: UserRepository,
        revalidator: PathRevalidator,
        transaction_manager: TransactionManager,
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(
            thread_repository=thread_repository,
            user_repository=user_repository,
            revalidator=revalidator,
            transaction_manager=transaction_manager,
        )
