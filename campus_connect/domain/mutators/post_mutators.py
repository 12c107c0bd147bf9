# Standard library imports
from dataclasses import replace
from datetime import datetime

# Local application imports
from ..constants import CommentFields, PostFields
from ..models.mutation import AddToSet, Mutation, Pull, Push
from ..models.post import Comment, Post


def toggle_like(post: Post, user_id: str) -> Mutation[Post]:
    """
    Like the post if the user has not, otherwise unlike it.

    Always succeeds; the resulting state is ``mutation.entity.is_liked_by(user_id)``.
    """
    if post.is_liked_by(user_id):
        return Mutation(
            entity=replace(post, like_ids=[like for like in post.like_ids if like != user_id]),
            effects=[Pull(PostFields.LIKES, user_id)],
        )

    return Mutation(
        entity=replace(post, like_ids=[*post.like_ids, user_id]),
        effects=[AddToSet(PostFields.LIKES, user_id)],
    )


def add_comment(
    post: Post,
    author_id: str,
    content: str,
    comment_id: str,
    now: datetime,
) -> Mutation[Post]:
    """
    Append a comment. Content is trimmed and must be 1-500 characters.

    Raises:
        ValidationError: If the comment content is empty or too long
    """
    comment = Comment(id=comment_id, author_id=author_id, content=content, created_at=now)
    return Mutation(
        entity=replace(post, comments=[*post.comments, comment]),
        effects=[Push(PostFields.COMMENTS, comment)],
    )


def remove_comment(post: Post, comment_id: str) -> Mutation[Post]:
    """Remove a comment by id; an unknown id is a no-op"""
    if post.find_comment(comment_id) is None:
        return Mutation(entity=post)

    return Mutation(
        entity=replace(
            post,
            comments=[comment for comment in post.comments if comment.id != comment_id],
        ),
        effects=[Pull(PostFields.COMMENTS, comment_id, match_key=CommentFields.ID)],
    )
