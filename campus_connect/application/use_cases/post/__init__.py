from .create_post import CreatePostUseCase
from .get_post import GetPostUseCase
from .list_posts import ListPostsUseCase
from .update_post import UpdatePostUseCase
from .delete_post import DeletePostUseCase
from .likes import ToggleLikeUseCase
from .comments import AddCommentUseCase, RemoveCommentUseCase

__all__ = [
    "CreatePostUseCase",
    "GetPostUseCase",
    "ListPostsUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
    "ToggleLikeUseCase",
    "AddCommentUseCase",
    "RemoveCommentUseCase",
]
