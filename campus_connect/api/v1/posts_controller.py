# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Query, status

# Local application imports
from ...application.dto.common_dto import ApiResponse, UserActionRequest
from ...application.dto.post_dto import (
    CommentAddedResponse,
    CommentCreateRequest,
    CommentRemovedResponse,
    LikeResponse,
    PostCreateRequest,
    PostListResponse,
    PostResponse,
    PostUpdateRequest,
)
from ...application.use_cases.post import (
    AddCommentUseCase,
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    RemoveCommentUseCase,
    ToggleLikeUseCase,
    UpdatePostUseCase,
)
from ...di.container import get_container


router = APIRouter(tags=["posts"])


@router.get("", response_model=ApiResponse[PostListResponse])
async def list_posts(
    page: int = Query(1),
    limit: int = Query(10),
    search: Optional[str] = Query(None),
    author_id: Optional[str] = Query(None, alias="authorId"),
) -> ApiResponse[PostListResponse]:
    """
    List posts, newest first

    Args:
        page: 1-based page number
        limit: Page size (1-100)
        search: Search term over post content
        author_id: Only posts by this user

    Returns:
        Posts with authors and commenters expanded, and pagination
    """
    container = get_container()
    list_posts_use_case = container.get(ListPostsUseCase)

    posts = await list_posts_use_case.execute(
        page=page, limit=limit, search=search, author_id=author_id
    )
    return ApiResponse(data=posts)


@router.post("", response_model=ApiResponse[PostResponse], status_code=status.HTTP_201_CREATED)
async def create_post(request: PostCreateRequest) -> ApiResponse[PostResponse]:
    container = get_container()
    create_post_use_case = container.get(CreatePostUseCase)

    post = await create_post_use_case.execute(request)
    return ApiResponse(message="Post created successfully", data=post)


@router.get("/{post_id}", response_model=ApiResponse[PostResponse])
async def get_post(post_id: str) -> ApiResponse[PostResponse]:
    container = get_container()
    get_post_use_case = container.get(GetPostUseCase)

    post = await get_post_use_case.execute(post_id)
    return ApiResponse(data=post)


@router.put("/{post_id}", response_model=ApiResponse[PostResponse])
async def update_post(post_id: str, request: PostUpdateRequest) -> ApiResponse[PostResponse]:
    container = get_container()
    update_post_use_case = container.get(UpdatePostUseCase)

    post = await update_post_use_case.execute(post_id, request)
    return ApiResponse(message="Post updated successfully", data=post)


@router.delete("/{post_id}", response_model=ApiResponse)
async def delete_post(post_id: str) -> ApiResponse:
    container = get_container()
    delete_post_use_case = container.get(DeletePostUseCase)

    await delete_post_use_case.execute(post_id)
    return ApiResponse(message="Post deleted successfully")


@router.post("/{post_id}/like", response_model=ApiResponse[LikeResponse])
async def toggle_like(post_id: str, request: UserActionRequest) -> ApiResponse[LikeResponse]:
    """
    Like a post, or unlike it if the user already liked it

    Returns:
        Resulting liked state and like count
    """
    container = get_container()
    toggle_like_use_case = container.get(ToggleLikeUseCase)

    like = await toggle_like_use_case.execute(post_id, request.user_id)
    message = "Post liked" if like.is_liked else "Post unliked"
    return ApiResponse(message=message, data=like)


@router.post(
    "/{post_id}/comments",
    response_model=ApiResponse[CommentAddedResponse],
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(post_id: str, request: CommentCreateRequest) -> ApiResponse[CommentAddedResponse]:
    container = get_container()
    add_comment_use_case = container.get(AddCommentUseCase)

    comment = await add_comment_use_case.execute(post_id, request)
    return ApiResponse(message="Comment added successfully", data=comment)


@router.delete("/{post_id}/comments/{comment_id}", response_model=ApiResponse[CommentRemovedResponse])
async def remove_comment(post_id: str, comment_id: str) -> ApiResponse[CommentRemovedResponse]:
    container = get_container()
    remove_comment_use_case = container.get(RemoveCommentUseCase)

    removed = await remove_comment_use_case.execute(post_id, comment_id)
    return ApiResponse(message="Comment removed successfully", data=removed)
