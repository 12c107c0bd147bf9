# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import PostFields
from ....domain.mutators import update_fields
from ...dto.post_dto import PostResponse, PostUpdateRequest
from ...services.presenters import post_user_ids, present_post
from ...services.reference_expander import UserReferenceExpander
from .get_post import load_post

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {
    "content": PostFields.CONTENT,
    "image_url": PostFields.IMAGE_URL,
}


class UpdatePostUseCase:
    """Use case for editing a post's content or image; likes and comments are untouched"""

    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self.post_repository = post_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(self, post_id: str, request: PostUpdateRequest) -> PostResponse:
        post = await load_post(self.post_repository, post_id)

        changes = request.model_dump(exclude_unset=True)
        saved_post = await self.post_repository.apply(
            post_id, update_fields(post, changes, UPDATABLE_FIELDS)
        )
        logger.info(f"Updated post {post_id}: {sorted(changes)}")

        users = await self.expander.load(post_user_ids(saved_post))
        return present_post(saved_post, users)
