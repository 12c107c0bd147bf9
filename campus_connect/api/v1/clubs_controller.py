# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Query, status

# Local application imports
from ...application.dto.common_dto import ApiResponse, UserActionRequest
from ...application.dto.club_dto import (
    ClubCreateRequest,
    ClubListResponse,
    ClubMembersResponse,
    ClubOfficersResponse,
    ClubResponse,
    ClubUpdateRequest,
    MembershipResponse,
    OfficerResponse,
)
from ...application.use_cases.club import (
    AddOfficerUseCase,
    CreateClubUseCase,
    DeleteClubUseCase,
    GetClubUseCase,
    JoinClubUseCase,
    LeaveClubUseCase,
    ListClubMembersUseCase,
    ListClubOfficersUseCase,
    ListClubsUseCase,
    RemoveOfficerUseCase,
    UpdateClubUseCase,
)
from ...di.container import get_container


router = APIRouter(tags=["clubs"])


@router.get("", response_model=ApiResponse[ClubListResponse])
async def list_clubs(
    page: int = Query(1),
    limit: int = Query(10),
    search: Optional[str] = Query(None),
    member_id: Optional[str] = Query(None, alias="memberId"),
) -> ApiResponse[ClubListResponse]:
    """
    List clubs ordered by name

    Args:
        page: 1-based page number
        limit: Page size (1-100)
        search: Search term over name and description
        member_id: Only clubs this user belongs to

    Returns:
        Clubs and pagination
    """
    container = get_container()
    list_clubs_use_case = container.get(ListClubsUseCase)

    clubs = await list_clubs_use_case.execute(
        page=page, limit=limit, search=search, member_id=member_id
    )
    return ApiResponse(data=clubs)


@router.post("", response_model=ApiResponse[ClubResponse], status_code=status.HTTP_201_CREATED)
async def create_club(request: ClubCreateRequest) -> ApiResponse[ClubResponse]:
    container = get_container()
    create_club_use_case = container.get(CreateClubUseCase)

    club = await create_club_use_case.execute(request)
    return ApiResponse(message="Club created successfully", data=club)


@router.get("/{club_id}", response_model=ApiResponse[ClubResponse])
async def get_club(club_id: str) -> ApiResponse[ClubResponse]:
    container = get_container()
    get_club_use_case = container.get(GetClubUseCase)

    club = await get_club_use_case.execute(club_id)
    return ApiResponse(data=club)


@router.put("/{club_id}", response_model=ApiResponse[ClubResponse])
async def update_club(club_id: str, request: ClubUpdateRequest) -> ApiResponse[ClubResponse]:
    container = get_container()
    update_club_use_case = container.get(UpdateClubUseCase)

    club = await update_club_use_case.execute(club_id, request)
    return ApiResponse(message="Club updated successfully", data=club)


@router.delete("/{club_id}", response_model=ApiResponse)
async def delete_club(club_id: str) -> ApiResponse:
    container = get_container()
    delete_club_use_case = container.get(DeleteClubUseCase)

    await delete_club_use_case.execute(club_id)
    return ApiResponse(message="Club deleted successfully")


@router.get("/{club_id}/members", response_model=ApiResponse[ClubMembersResponse])
async def list_club_members(club_id: str) -> ApiResponse[ClubMembersResponse]:
    container = get_container()
    list_members_use_case = container.get(ListClubMembersUseCase)

    members = await list_members_use_case.execute(club_id)
    return ApiResponse(data=members)


@router.get("/{club_id}/officers", response_model=ApiResponse[ClubOfficersResponse])
async def list_club_officers(club_id: str) -> ApiResponse[ClubOfficersResponse]:
    container = get_container()
    list_officers_use_case = container.get(ListClubOfficersUseCase)

    officers = await list_officers_use_case.execute(club_id)
    return ApiResponse(data=officers)


@router.post("/{club_id}/join", response_model=ApiResponse[MembershipResponse])
async def join_club(club_id: str, request: UserActionRequest) -> ApiResponse[MembershipResponse]:
    """
    Join a club

    Returns:
        Resulting member count; 409 if already a member
    """
    container = get_container()
    join_club_use_case = container.get(JoinClubUseCase)

    membership = await join_club_use_case.execute(club_id, request.user_id)
    return ApiResponse(message="Successfully joined club", data=membership)


@router.delete("/{club_id}/leave", response_model=ApiResponse[MembershipResponse])
async def leave_club(club_id: str, request: UserActionRequest) -> ApiResponse[MembershipResponse]:
    """
    Leave a club, giving up any officer position

    Returns:
        Resulting member count; 404 if not a member
    """
    container = get_container()
    leave_club_use_case = container.get(LeaveClubUseCase)

    membership = await leave_club_use_case.execute(club_id, request.user_id)
    return ApiResponse(message="Successfully left club", data=membership)


@router.post("/{club_id}/officers", response_model=ApiResponse[OfficerResponse])
async def add_club_officer(club_id: str, request: UserActionRequest) -> ApiResponse[OfficerResponse]:
    container = get_container()
    add_officer_use_case = container.get(AddOfficerUseCase)

    officer = await add_officer_use_case.execute(club_id, request.user_id)
    return ApiResponse(message="Officer added successfully", data=officer)


@router.delete("/{club_id}/officers", response_model=ApiResponse[OfficerResponse])
async def remove_club_officer(club_id: str, request: UserActionRequest) -> ApiResponse[OfficerResponse]:
    container = get_container()
    remove_officer_use_case = container.get(RemoveOfficerUseCase)

    officer = await remove_officer_use_case.execute(club_id, request.user_id)
    return ApiResponse(message="Officer removed successfully", data=officer)
