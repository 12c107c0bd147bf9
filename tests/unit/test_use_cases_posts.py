"""
Unit tests for post, like and comment use cases.
"""
import pytest

from campus_connect.application.dto.post_dto import (
    CommentCreateRequest,
    PostCreateRequest,
    PostUpdateRequest,
)
from campus_connect.application.use_cases.post import (
    AddCommentUseCase,
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    RemoveCommentUseCase,
    ToggleLikeUseCase,
    UpdatePostUseCase,
)
from campus_connect.domain.exceptions import NotFoundError, ValidationError
from campus_connect.domain.models import Post, User

UNKNOWN_ID = "64b7f0c2a1b2c3d4e5f6ffff"


@pytest.fixture
def author(user_repo):
    return user_repo.add(User(id=None, name="Ada Author", email="ada@example.com"))


@pytest.fixture
def reader(user_repo):
    return user_repo.add(User(id=None, name="Ray Reader", email="ray@example.com"))


@pytest.fixture
def post(post_repo, author):
    return post_repo.add(Post(id=None, content="Library open late tonight", author_id=author.id))


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase"""

    @pytest.mark.asyncio
    async def test_create_with_author_expanded(self, post_repo, user_repo, author):
        result = await CreatePostUseCase(post_repo, user_repo).execute(PostCreateRequest(
            content="  Lost keys near the gym  ",
            author=author.id,
            image_url="https://cdn.example.com/keys.png",
        ))
        assert result.content == "Lost keys near the gym"
        assert result.author.name == "Ada Author"
        assert result.author.email is None
        assert result.has_image is True
        assert result.like_count == 0
        assert result.comment_count == 0

    @pytest.mark.asyncio
    async def test_unknown_author(self, post_repo, user_repo):
        with pytest.raises(ValidationError) as exc_info:
            await CreatePostUseCase(post_repo, user_repo).execute(
                PostCreateRequest(content="Hello", author=UNKNOWN_ID)
            )
        assert exc_info.value.errors[0].message == "Referenced user not found"

    @pytest.mark.asyncio
    async def test_blank_content(self, post_repo, user_repo, author):
        with pytest.raises(ValidationError):
            await CreatePostUseCase(post_repo, user_repo).execute(
                PostCreateRequest(content="   ", author=author.id)
            )


class TestToggleLikeUseCase:
    """Tests for ToggleLikeUseCase"""

    @pytest.mark.asyncio
    async def test_like_then_unlike(self, post_repo, user_repo, post, reader):
        use_case = ToggleLikeUseCase(post_repo, user_repo)

        liked = await use_case.execute(post.id, reader.id)
        unliked = await use_case.execute(post.id, reader.id)

        assert (liked.is_liked, liked.like_count) == (True, 1)
        assert (unliked.is_liked, unliked.like_count) == (False, 0)

    @pytest.mark.asyncio
    async def test_unknown_user(self, post_repo, user_repo, post):
        with pytest.raises(NotFoundError, match="User not found"):
            await ToggleLikeUseCase(post_repo, user_repo).execute(post.id, UNKNOWN_ID)

    @pytest.mark.asyncio
    async def test_unknown_post(self, post_repo, user_repo, reader):
        with pytest.raises(NotFoundError, match="Post not found"):
            await ToggleLikeUseCase(post_repo, user_repo).execute(UNKNOWN_ID, reader.id)


class TestComments:
    """Tests for AddCommentUseCase and RemoveCommentUseCase"""

    @pytest.mark.asyncio
    async def test_add_comment(self, post_repo, user_repo, post, reader):
        result = await AddCommentUseCase(post_repo, user_repo).execute(
            post.id, CommentCreateRequest(user_id=reader.id, content=" Thanks! ")
        )
        assert result.comment_count == 1
        assert result.comment.content == "Thanks!"
        assert result.comment.author.name == "Ray Reader"
        assert post_repo.items[post.id].comments[0].id == result.comment.id

    @pytest.mark.asyncio
    async def test_comment_too_long(self, post_repo, user_repo, post, reader):
        with pytest.raises(ValidationError):
            await AddCommentUseCase(post_repo, user_repo).execute(
                post.id, CommentCreateRequest(user_id=reader.id, content="x" * 501)
            )

    @pytest.mark.asyncio
    async def test_comment_by_unknown_user(self, post_repo, user_repo, post):
        with pytest.raises(NotFoundError, match="User not found"):
            await AddCommentUseCase(post_repo, user_repo).execute(
                post.id, CommentCreateRequest(user_id=UNKNOWN_ID, content="Hi")
            )

    @pytest.mark.asyncio
    async def test_remove_comment(self, post_repo, user_repo, post, reader):
        added = await AddCommentUseCase(post_repo, user_repo).execute(
            post.id, CommentCreateRequest(user_id=reader.id, content="First")
        )
        result = await RemoveCommentUseCase(post_repo).execute(post.id, added.comment.id)
        assert result.comment_count == 0

    @pytest.mark.asyncio
    async def test_remove_unknown_comment_is_noop(self, post_repo, user_repo, post, reader):
        await AddCommentUseCase(post_repo, user_repo).execute(
            post.id, CommentCreateRequest(user_id=reader.id, content="Stays")
        )
        result = await RemoveCommentUseCase(post_repo).execute(post.id, UNKNOWN_ID)
        assert result.comment_count == 1

    @pytest.mark.asyncio
    async def test_deleted_commenter_expands_to_none(self, post_repo, user_repo, post, reader):
        await AddCommentUseCase(post_repo, user_repo).execute(
            post.id, CommentCreateRequest(user_id=reader.id, content="Bye")
        )
        await user_repo.delete(reader.id)

        result = await GetPostUseCase(post_repo, user_repo).execute(post.id)

        assert result.comment_count == 1
        assert result.comments[0].author is None


class TestPostQueries:
    """Tests for ListPostsUseCase, UpdatePostUseCase and DeletePostUseCase"""

    @pytest.mark.asyncio
    async def test_list_by_author_newest_first(self, post_repo, user_repo, post, author, reader):
        post_repo.add(Post(id=None, content="Second post", author_id=author.id))
        post_repo.add(Post(id=None, content="Someone else", author_id=reader.id))

        result = await ListPostsUseCase(post_repo, user_repo).execute(author_id=author.id)

        assert [item.content for item in result.posts] == ["Second post", "Library open late tonight"]
        assert result.pagination.total == 2

    @pytest.mark.asyncio
    async def test_update_content(self, post_repo, user_repo, post):
        result = await UpdatePostUseCase(post_repo, user_repo).execute(
            post.id, PostUpdateRequest(content="Library closes at midnight")
        )
        assert result.content == "Library closes at midnight"
        assert result.updated_at is not None

    @pytest.mark.asyncio
    async def test_update_rejects_non_image_url(self, post_repo, user_repo, post):
        with pytest.raises(ValidationError):
            await UpdatePostUseCase(post_repo, user_repo).execute(
                post.id, PostUpdateRequest(image_url="https://example.com/page.html")
            )

    @pytest.mark.asyncio
    async def test_delete(self, post_repo, post):
        await DeletePostUseCase(post_repo).execute(post.id)
        assert post.id not in post_repo.items
        with pytest.raises(NotFoundError):
            await DeletePostUseCase(post_repo).execute(post.id)
