from .common_dto import (
    ApiResponse,
    CamelModel,
    FieldErrorResponse,
    PaginationResponse,
    UserActionRequest,
    UserSummary,
)
from .user_dto import (
    AvatarUpdateRequest,
    UserCreateRequest,
    UserListResponse,
    UserProfileResponse,
    UserResponse,
    UserStatsResponse,
    UserUpdateRequest,
)
from .event_dto import (
    AttendanceResponse,
    EventAttendeesResponse,
    EventCreateRequest,
    EventListResponse,
    EventResponse,
    EventUpdateRequest,
    GeoPointSchema,
)
from .club_dto import (
    ClubCreateRequest,
    ClubListResponse,
    ClubMembersResponse,
    ClubOfficersResponse,
    ClubResponse,
    ClubUpdateRequest,
    MembershipResponse,
    OfficerResponse,
)
from .listing_dto import (
    AvailabilityResponse,
    CategoryCount,
    CategoryCountsResponse,
    ListingCreateRequest,
    ListingImageRequest,
    ListingListResponse,
    ListingResponse,
    ListingUpdateRequest,
)
from .post_dto import (
    CommentAddedResponse,
    CommentCreateRequest,
    CommentRemovedResponse,
    CommentResponse,
    LikeResponse,
    PostCreateRequest,
    PostListResponse,
    PostResponse,
    PostUpdateRequest,
)
from .media_dto import SignUploadResponse

__all__ = [
    "ApiResponse",
    "CamelModel",
    "FieldErrorResponse",
    "PaginationResponse",
    "UserActionRequest",
    "UserSummary",
    "AvatarUpdateRequest",
    "UserCreateRequest",
    "UserListResponse",
    "UserProfileResponse",
    "UserResponse",
    "UserStatsResponse",
    "UserUpdateRequest",
    "AttendanceResponse",
    "EventAttendeesResponse",
    "EventCreateRequest",
    "EventListResponse",
    "EventResponse",
    "EventUpdateRequest",
    "GeoPointSchema",
    "ClubCreateRequest",
    "ClubListResponse",
    "ClubMembersResponse",
    "ClubOfficersResponse",
    "ClubResponse",
    "ClubUpdateRequest",
    "MembershipResponse",
    "OfficerResponse",
    "AvailabilityResponse",
    "CategoryCount",
    "CategoryCountsResponse",
    "ListingCreateRequest",
    "ListingImageRequest",
    "ListingListResponse",
    "ListingResponse",
    "ListingUpdateRequest",
    "CommentAddedResponse",
    "CommentCreateRequest",
    "CommentRemovedResponse",
    "CommentResponse",
    "LikeResponse",
    "PostCreateRequest",
    "PostListResponse",
    "PostResponse",
    "PostUpdateRequest",
    "SignUploadResponse",
]
