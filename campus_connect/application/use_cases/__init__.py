from .user import (
    CreateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    UpdateAvatarUseCase,
    DeleteUserUseCase,
    GetUserProfileUseCase,
)
from .event import (
    CreateEventUseCase,
    GetEventUseCase,
    ListEventAttendeesUseCase,
    ListEventsUseCase,
    UpdateEventUseCase,
    DeleteEventUseCase,
    AttendEventUseCase,
    LeaveEventUseCase,
)
from .club import (
    CreateClubUseCase,
    GetClubUseCase,
    ListClubMembersUseCase,
    ListClubOfficersUseCase,
    ListClubsUseCase,
    UpdateClubUseCase,
    DeleteClubUseCase,
    JoinClubUseCase,
    LeaveClubUseCase,
    AddOfficerUseCase,
    RemoveOfficerUseCase,
)
from .listing import (
    CreateListingUseCase,
    GetListingUseCase,
    ListListingsUseCase,
    ListCategoryCountsUseCase,
    UpdateListingUseCase,
    DeleteListingUseCase,
    MarkListingSoldUseCase,
    MarkListingAvailableUseCase,
    AddListingImageUseCase,
)
from .post import (
    CreatePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
    DeletePostUseCase,
    ToggleLikeUseCase,
    AddCommentUseCase,
    RemoveCommentUseCase,
)
from .media import SignUploadUseCase

__all__ = [
    "CreateUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
    "UpdateAvatarUseCase",
    "DeleteUserUseCase",
    "GetUserProfileUseCase",
    "CreateEventUseCase",
    "GetEventUseCase",
    "ListEventAttendeesUseCase",
    "ListEventsUseCase",
    "UpdateEventUseCase",
    "DeleteEventUseCase",
    "AttendEventUseCase",
    "LeaveEventUseCase",
    "CreateClubUseCase",
    "GetClubUseCase",
    "ListClubMembersUseCase",
    "ListClubOfficersUseCase",
    "ListClubsUseCase",
    "UpdateClubUseCase",
    "DeleteClubUseCase",
    "JoinClubUseCase",
    "LeaveClubUseCase",
    "AddOfficerUseCase",
    "RemoveOfficerUseCase",
    "CreateListingUseCase",
    "GetListingUseCase",
    "ListListingsUseCase",
    "ListCategoryCountsUseCase",
    "UpdateListingUseCase",
    "DeleteListingUseCase",
    "MarkListingSoldUseCase",
    "MarkListingAvailableUseCase",
    "AddListingImageUseCase",
    "CreatePostUseCase",
    "GetPostUseCase",
    "ListPostsUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
    "ToggleLikeUseCase",
    "AddCommentUseCase",
    "RemoveCommentUseCase",
    "SignUploadUseCase",
]
