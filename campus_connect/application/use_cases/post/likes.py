# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.mutators import toggle_like
from ...dto.post_dto import LikeResponse
from ...services.user_references import require_actor
from .get_post import load_post

logger = logging.getLogger(__name__)


class ToggleLikeUseCase:
    """Use case for liking a post, or unliking it when already liked"""

    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository

    async def execute(self, post_id: str, user_id: str) -> LikeResponse:
        """
        Toggle a user's like

        Returns:
            LikeResponse with the resulting liked state and like count

        Raises:
            NotFoundError: If the post or the user does not exist
        """
        post = await load_post(self.post_repository, post_id)
        await require_actor(self.user_repository, user_id)

        saved_post = await self.post_repository.apply(post_id, toggle_like(post, user_id))
        is_liked = saved_post.is_liked_by(user_id)
        logger.info(f"User {user_id} {'liked' if is_liked else 'unliked'} post {post_id}")

        return LikeResponse(is_liked=is_liked, like_count=saved_post.like_count)
