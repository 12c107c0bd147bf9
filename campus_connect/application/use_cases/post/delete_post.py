# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Use case for hard-deleting a post with its comments"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str) -> None:
        deleted = await self.post_repository.delete(post_id)
        if not deleted:
            raise NotFoundError("Post not found")
        logger.info(f"Deleted post {post_id}")
