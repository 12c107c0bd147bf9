# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.post import Post
from ....domain.exceptions import NotFoundError
from ...dto.post_dto import PostResponse
from ...services.presenters import post_user_ids, present_post
from ...services.reference_expander import UserReferenceExpander


async def load_post(post_repository: PostRepository, post_id: str) -> Post:
    """Find a post or raise NotFoundError (malformed IDs included)"""
    post = await post_repository.find_by_id(post_id)
    if not post:
        raise NotFoundError("Post not found")
    return post


class GetPostUseCase:
    """Use case for getting a post with author and comment authors expanded"""

    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self.post_repository = post_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(self, post_id: str) -> PostResponse:
        post = await load_post(self.post_repository, post_id)
        users = await self.expander.load(post_user_ids(post))
        return present_post(post, users)
