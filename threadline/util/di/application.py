"""Application layer DI providers."""

from dishka import Scope, provide

from threadline.application.usecase.thread import (
    AddCommentUseCase,
    CreateThreadUseCase,
    GetThreadUseCase,
    ListThreadsUseCase,
)
from threadline.application.usecase.user import (
    GetActivityUseCase,
    GetUserPostsUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpsertUserUseCase,
)
from threadline.domain.service import ThreadService, UserService
from threadline.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # User use cases
    @provide
    def get_upsert_user_use_case(self, user_service: UserService) -> UpsertUserUseCase:
        """Provide upsert user use case."""
        return UpsertUserUseCase(user_service=user_service)

    @provide
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    @provide
    def get_get_user_posts_use_case(
        self, user_service: UserService
    ) -> GetUserPostsUseCase:
        """Provide get user posts use case."""
        return GetUserPostsUseCase(user_service=user_service)

    @provide
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)

    @provide
    def get_get_activity_use_case(
        self, user_service: UserService
    ) -> GetActivityUseCase:
        """Provide get activity use case."""
        return GetActivityUseCase(user_service=user_service)

    # Thread use cases
    @provide
    def get_create_thread_use_case(
        self, thread_service: ThreadService
    ) -> CreateThreadUseCase:
        """Provide create thread use case."""
        return CreateThreadUseCase(thread_service=thread_service)

    @provide
    def get_add_comment_use_case(
        self, thread_service: ThreadService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(thread_service=thread_service)

    @provide
    def get_get_thread_use_case(self, thread_service: ThreadService) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(thread_service=thread_service)

    @provide
    def get_list_threads_use_case(
        self, thread_service: ThreadService
    ) -> ListThreadsUseCase:
        """Provide list threads use case."""
        return ListThreadsUseCase(thread_service=thread_service)
