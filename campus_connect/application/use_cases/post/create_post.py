# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.post import Post
from ....domain.constants import PostFields
from ...dto.post_dto import PostCreateRequest, PostResponse
from ...services.presenters import post_user_ids, present_post
from ...services.reference_expander import UserReferenceExpander
from ...services.user_references import ensure_users_exist

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Use case for publishing a post"""

    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(self, request: PostCreateRequest) -> PostResponse:
        """
        Create a new post

        Raises:
            ValidationError: If a field is invalid or the author does not exist
        """
        new_post = Post(
            id=None,
            content=request.content,
            author_id=request.author,
            image_url=request.image_url,
        )
        await ensure_users_exist(self.user_repository, [(PostFields.AUTHOR, [new_post.author_id])])

        saved_post = await self.post_repository.create(new_post)
        logger.info(f"Created post {saved_post.id} by {saved_post.author_id}")

        users = await self.expander.load(post_user_ids(saved_post))
        return present_post(saved_post, users)
