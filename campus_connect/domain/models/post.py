# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

# Local application imports
from ..constants import CommentFields, PostFields
from ..validation import FieldValidator


CONTENT_MAX_LENGTH = 2000
COMMENT_MAX_LENGTH = 500


@dataclass
class Comment:
    """A comment embedded in a post, individually addressable by its own id"""
    id: str
    author_id: str
    content: str
    created_at: datetime

    def __post_init__(self) -> None:
        """Business validations"""
        if isinstance(self.content, str):
            self.content = self.content.strip()

        validator = FieldValidator()
        validator.reference(CommentFields.ID, self.id)
        validator.reference(CommentFields.AUTHOR, self.author_id)
        validator.text(CommentFields.CONTENT, self.content, max_length=COMMENT_MAX_LENGTH,
                       required=True, label="Comment content")
        validator.raise_if_invalid()


@dataclass
class Post:
    """Pure domain model for Post entity. Likes are a set of user ids."""
    id: Optional[str]
    content: str
    author_id: str
    image_url: Optional[str] = None
    like_ids: List[str] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if isinstance(self.content, str):
            self.content = self.content.strip()

        validator = FieldValidator()
        validator.text(PostFields.CONTENT, self.content, max_length=CONTENT_MAX_LENGTH,
                       required=True, label="Post content")
        validator.reference(PostFields.AUTHOR, self.author_id)
        validator.image_url(PostFields.IMAGE_URL, self.image_url)
        validator.references(PostFields.LIKES, self.like_ids)
        validator.raise_if_invalid()

    @property
    def like_count(self) -> int:
        return len(self.like_ids)

    @property
    def comment_count(self) -> int:
        return len(self.comments)

    @property
    def has_image(self) -> bool:
        return bool(self.image_url)

    def is_liked_by(self, user_id: str) -> bool:
        return user_id in self.like_ids

    def find_comment(self, comment_id: str) -> Optional[Comment]:
        return next((comment for comment in self.comments if comment.id == comment_id), None)
