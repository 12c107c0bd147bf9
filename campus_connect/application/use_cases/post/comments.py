# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.mutators import add_comment, remove_comment
from ....utils.datetime_utils import utc_now
from ...dto.post_dto import CommentAddedResponse, CommentCreateRequest, CommentRemovedResponse
from ...services.id_generator import new_id
from ...services.presenters import present_comment
from ...services.reference_expander import UserLookup
from ...services.user_references import require_actor
from .get_post import load_post

logger = logging.getLogger(__name__)


class AddCommentUseCase:
    """Use case for appending a comment to a post"""

    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository

    async def execute(self, post_id: str, request: CommentCreateRequest) -> CommentAddedResponse:
        """
        Add a comment

        Returns:
            CommentAddedResponse with the new comment and the comment count

        Raises:
            NotFoundError: If the post or the author does not exist
            ValidationError: If the content is empty or longer than 500 characters
        """
        post = await load_post(self.post_repository, post_id)
        author = await require_actor(self.user_repository, request.user_id)

        mutation = add_comment(post, author.id, request.content, new_id(), utc_now())
        comment = mutation.entity.comments[-1]
        saved_post = await self.post_repository.apply(post_id, mutation)
        logger.info(f"User {author.id} commented on post {post_id} (comment {comment.id})")

        return CommentAddedResponse(
            comment=present_comment(comment, UserLookup({author.id: author})),
            comment_count=saved_post.comment_count,
        )


class RemoveCommentUseCase:
    """Use case for removing a comment; an unknown comment ID is a no-op"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str, comment_id: str) -> CommentRemovedResponse:
        post = await load_post(self.post_repository, post_id)

        mutation = remove_comment(post, comment_id)
        saved_post = await self.post_repository.apply(post_id, mutation)
        if mutation.changed:
            logger.info(f"Removed comment {comment_id} from post {post_id}")

        return CommentRemovedResponse(comment_count=saved_post.comment_count)
