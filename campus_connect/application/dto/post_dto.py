from datetime import datetime
from typing import List, Optional
from pydantic import Field
from .common_dto import CamelModel, PaginationResponse, UserSummary


class PostCreateRequest(CamelModel):
    """DTO for post creation request"""
    content: str
    author: str
    image_url: Optional[str] = None


class PostUpdateRequest(CamelModel):
    """DTO for post update; only the fields sent are changed"""
    content: Optional[str] = None
    image_url: Optional[str] = None


class CommentCreateRequest(CamelModel):
    user_id: str
    content: str


class CommentResponse(CamelModel):
    id: str
    author: Optional[UserSummary] = None
    content: str
    created_at: datetime


class PostResponse(CamelModel):
    """DTO for post response with author and comment authors expanded"""
    id: str
    content: str
    author: Optional[UserSummary] = None
    image_url: Optional[str] = None
    has_image: bool
    likes: List[str] = Field(default_factory=list)
    like_count: int
    comments: List[CommentResponse] = Field(default_factory=list)
    comment_count: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PostListResponse(CamelModel):
    posts: List[PostResponse]
    pagination: PaginationResponse


class LikeResponse(CamelModel):
    is_liked: bool
    like_count: int


class CommentAddedResponse(CamelModel):
    comment: CommentResponse
    comment_count: int


class CommentRemovedResponse(CamelModel):
    comment_count: int
