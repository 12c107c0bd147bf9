from typing import TYPE_CHECKING
from ...domain.repositories.post_repository import PostRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.post import (
    CreatePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
    DeletePostUseCase,
    ToggleLikeUseCase,
    AddCommentUseCase,
    RemoveCommentUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PostProvider:
    """Post use case provider - registers all post-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all post use cases.
        Use cases are created on-demand via factories.
        """
        for use_case in (
            CreatePostUseCase,
            GetPostUseCase,
            ListPostsUseCase,
            UpdatePostUseCase,
            ToggleLikeUseCase,
            AddCommentUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    post_repository=container.get(PostRepository),
                    user_repository=container.get(UserRepository),
                )
            )

        for use_case in (DeletePostUseCase, RemoveCommentUseCase):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    post_repository=container.get(PostRepository)
                )
            )
