# Standard library imports
from typing import Any, Dict, List, Optional, Tuple

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.post import Comment, Post
from ...domain.models.filters import PostFilter
from ...domain.models.mutation import Mutation
from ...domain.models.pagination import PageRequest
from ...domain.constants import CommentFields, PostFields
from ...utils.datetime_utils import ensure_utc
from .mongo_base_repository import (
    MongoRepository,
    id_to_str,
    search_clause,
    to_object_id,
    to_object_ids,
)
from .mongo_connection import get_post_collection


class MongoPostRepository(MongoRepository[Post], PostRepository):
    """MongoDB implementation of PostRepository"""

    entity_name = "Post"
    # Comments are embedded sub-documents keyed by their own _id
    key_aliases = {CommentFields.ID: CommentFields.MONGO_ID}

    def __init__(self, post_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        super().__init__(post_collection if post_collection is not None else get_post_collection())

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        return await self._find_by_id(post_id)

    async def list(self, post_filter: PostFilter, page: PageRequest) -> Tuple[List[Post], int]:
        query: Dict[str, Any] = search_clause(post_filter.search, [PostFields.CONTENT])
        if post_filter.author_id:
            query[PostFields.AUTHOR] = to_object_id(post_filter.author_id)
        return await self._paginate(
            query, [(PostFields.CREATED_AT, -1), (PostFields.MONGO_ID, -1)], page
        )

    async def create(self, post: Post) -> Post:
        return await self._insert(post)

    async def apply(self, post_id: str, mutation: Mutation[Post]) -> Post:
        return await self._apply(post_id, mutation)

    async def delete(self, post_id: str) -> bool:
        return await self._delete(post_id)

    def _encode_value(self, field: str, value: Any) -> Any:
        if field in (PostFields.AUTHOR, PostFields.LIKES):
            return to_object_id(value)
        if field == PostFields.COMMENTS:
            # Pushes carry a Comment, pulls carry the comment id
            if isinstance(value, Comment):
                return self._comment_to_dict(value)
            return to_object_id(value)
        return value

    def _document_to_entity(self, document: Dict[str, Any]) -> Post:
        """
        Convert MongoDB document to Post domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Post domain model
        """
        if not document:
            raise ValueError("Invalid document: document is None or empty")

        return Post(
            id=id_to_str(document.get(PostFields.MONGO_ID)),
            content=document.get(PostFields.CONTENT, ""),
            author_id=id_to_str(document.get(PostFields.AUTHOR)),
            image_url=document.get(PostFields.IMAGE_URL),
            like_ids=[str(like) for like in document.get(PostFields.LIKES, [])],
            comments=[
                self._dict_to_comment(comment)
                for comment in document.get(PostFields.COMMENTS, [])
            ],
            created_at=ensure_utc(document.get(PostFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(PostFields.UPDATED_AT)),
        )

    def _entity_to_dict(self, post: Post) -> Dict[str, Any]:
        """
        Convert Post domain model to MongoDB document

        Args:
            post: Post domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        if not post:
            raise ValueError("Post cannot be None")

        post_dict: Dict[str, Any] = {
            PostFields.CONTENT: post.content,
            PostFields.AUTHOR: to_object_id(post.author_id),
            PostFields.LIKES: to_object_ids(post.like_ids),
            PostFields.COMMENTS: [self._comment_to_dict(comment) for comment in post.comments],
        }
        if post.image_url:
            post_dict[PostFields.IMAGE_URL] = post.image_url
        return post_dict

    @staticmethod
    def _comment_to_dict(comment: Comment) -> Dict[str, Any]:
        return {
            CommentFields.MONGO_ID: to_object_id(comment.id),
            CommentFields.AUTHOR: to_object_id(comment.author_id),
            CommentFields.CONTENT: comment.content,
            CommentFields.CREATED_AT: comment.created_at,
        }

    @staticmethod
    def _dict_to_comment(document: Dict[str, Any]) -> Comment:
        return Comment(
            id=id_to_str(document.get(CommentFields.MONGO_ID)),
            author_id=id_to_str(document.get(CommentFields.AUTHOR)),
            content=document.get(CommentFields.CONTENT, ""),
            created_at=ensure_utc(document.get(CommentFields.CREATED_AT)),
        )
