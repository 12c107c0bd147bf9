from datetime import datetime
from typing import List, Optional
from pydantic import EmailStr
from .common_dto import CamelModel, PaginationResponse


class UserCreateRequest(CamelModel):
    """DTO for user creation request"""
    name: str
    email: EmailStr
    bio: Optional[str] = None
    major: Optional[str] = None
    profile_picture_url: Optional[str] = None
    notification_token: Optional[str] = None


class UserUpdateRequest(CamelModel):
    """DTO for profile update; only the fields sent are changed"""
    name: Optional[str] = None
    bio: Optional[str] = None
    major: Optional[str] = None
    profile_picture_url: Optional[str] = None
    notification_token: Optional[str] = None


class AvatarUpdateRequest(CamelModel):
    """DTO for profile picture update"""
    profile_picture_url: Optional[str] = None


class UserResponse(CamelModel):
    """DTO for user response (notification token is never exposed)"""
    id: str
    name: str
    email: str
    bio: Optional[str] = None
    major: Optional[str] = None
    profile_picture_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserListResponse(CamelModel):
    users: List[UserResponse]
    pagination: PaginationResponse


class UserStatsResponse(CamelModel):
    """Derived counts for the profile view"""
    club_memberships: int
    officer_positions: int
    hosted_events_count: int
    attending_events_count: int
    active_listings: int


class UserProfileResponse(CamelModel):
    user: UserResponse
    stats: UserStatsResponse
