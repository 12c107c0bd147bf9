"""
Domain entity -> response DTO conversion.

Reference fields are expanded through a ``UserLookup`` prepared by the use
case; counts always come from the stored identifiers, so a deleted user still
counts as an attendee/member/like even though it is not expanded.
"""

# Standard library imports
from datetime import datetime
from typing import List, Optional

# Local application imports
from ...domain.models.club import Club
from ...domain.models.event import Event, GeoPoint
from ...domain.models.listing import MarketplaceListing
from ...domain.models.pagination import PageInfo
from ...domain.models.post import Comment, Post
from ...domain.models.user import User
from ..dto.club_dto import ClubResponse
from ..dto.common_dto import PaginationResponse, UserSummary
from ..dto.event_dto import EventResponse, GeoPointSchema
from ..dto.listing_dto import ListingResponse
from ..dto.post_dto import CommentResponse, PostResponse
from ..dto.user_dto import UserResponse
from .reference_expander import UserLookup


def present_pagination(page_info: PageInfo) -> PaginationResponse:
    return PaginationResponse(
        page=page_info.page,
        limit=page_info.limit,
        total=page_info.total,
        total_pages=page_info.total_pages,
        has_next=page_info.has_next,
        has_prev=page_info.has_prev,
    )


def present_user(user: User) -> UserResponse:
    return UserResponse(
        id=user.id or "",
        name=user.name,
        email=user.email,
        bio=user.bio,
        major=user.major,
        profile_picture_url=user.profile_picture_url,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def present_user_summary(user: Optional[User], include_email: bool = False) -> Optional[UserSummary]:
    if user is None:
        return None
    return UserSummary(
        id=user.id or "",
        name=user.name,
        profile_picture_url=user.profile_picture_url,
        major=user.major,
        email=user.email if include_email else None,
    )


def present_user_summaries(users: List[User]) -> List[UserSummary]:
    return [present_user_summary(user) for user in users]


def present_geo_point(location: Optional[GeoPoint]) -> Optional[GeoPointSchema]:
    if location is None:
        return None
    return GeoPointSchema(coordinates=[location.longitude, location.latitude])


def present_event(event: Event, users: UserLookup, now: datetime) -> EventResponse:
    return EventResponse(
        id=event.id or "",
        title=event.title,
        description=event.description,
        location_name=event.location_name,
        location_coords=present_geo_point(event.location),
        start_time=event.start_time,
        end_time=event.end_time,
        host=present_user_summary(users.get(event.host_id)),
        attendees=present_user_summaries(users.existing(event.attendee_ids)),
        attendee_count=event.attendee_count,
        is_upcoming=event.is_upcoming(now),
        created_at=event.created_at,
        updated_at=event.updated_at,
    )


def present_club(club: Club, users: UserLookup) -> ClubResponse:
    return ClubResponse(
        id=club.id or "",
        name=club.name,
        description=club.description,
        members=present_user_summaries(users.existing(club.member_ids)),
        officers=present_user_summaries(users.existing(club.officer_ids)),
        member_count=club.member_count,
        officer_count=club.officer_count,
        created_at=club.created_at,
        updated_at=club.updated_at,
    )


def present_listing(listing: MarketplaceListing, users: UserLookup) -> ListingResponse:
    # Buyers contact the seller directly, so the seller projection carries the email
    return ListingResponse(
        id=listing.id or "",
        title=listing.title,
        description=listing.description,
        price=listing.price,
        formatted_price=listing.formatted_price,
        seller=present_user_summary(users.get(listing.seller_id), include_email=True),
        image_urls=list(listing.image_urls),
        has_images=listing.has_images,
        category=listing.category,
        is_available=listing.is_available,
        created_at=listing.created_at,
        updated_at=listing.updated_at,
    )


def present_comment(comment: Comment, users: UserLookup) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        author=present_user_summary(users.get(comment.author_id)),
        content=comment.content,
        created_at=comment.created_at,
    )


def present_post(post: Post, users: UserLookup) -> PostResponse:
    return PostResponse(
        id=post.id or "",
        content=post.content,
        author=present_user_summary(users.get(post.author_id)),
        image_url=post.image_url,
        has_image=post.has_image,
        likes=list(post.like_ids),
        like_count=post.like_count,
        comments=[present_comment(comment, users) for comment in post.comments],
        comment_count=post.comment_count,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


def post_user_ids(post: Post) -> List[str]:
    """Every user a post response expands: author and comment authors"""
    return [post.author_id, *(comment.author_id for comment in post.comments)]
