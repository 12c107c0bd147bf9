# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Query, status

# Local application imports
from ...application.dto.common_dto import ApiResponse
from ...application.dto.user_dto import (
    AvatarUpdateRequest,
    UserCreateRequest,
    UserListResponse,
    UserProfileResponse,
    UserResponse,
    UserUpdateRequest,
)
from ...application.use_cases.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserProfileUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateAvatarUseCase,
    UpdateUserUseCase,
)
from ...di.container import get_container


router = APIRouter(tags=["users"])


@router.get("", response_model=ApiResponse[UserListResponse])
async def list_users(
    page: int = Query(1),
    limit: int = Query(10),
    search: Optional[str] = Query(None),
) -> ApiResponse[UserListResponse]:
    """
    List users, optionally searching name, email and major

    Args:
        page: 1-based page number
        limit: Page size (1-100)
        search: Search term (2-100 characters)

    Returns:
        Users and pagination
    """
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)

    users = await list_users_use_case.execute(page=page, limit=limit, search=search)
    return ApiResponse(data=users)


@router.post("", response_model=ApiResponse[UserResponse], status_code=status.HTTP_201_CREATED)
async def create_user(request: UserCreateRequest) -> ApiResponse[UserResponse]:
    """
    Create a new user

    Args:
        request: User creation request

    Returns:
        The created user
    """
    container = get_container()
    create_user_use_case = container.get(CreateUserUseCase)

    user = await create_user_use_case.execute(request)
    return ApiResponse(message="User created successfully", data=user)


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
async def get_user(user_id: str) -> ApiResponse[UserResponse]:
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)

    user = await get_user_use_case.execute(user_id)
    return ApiResponse(data=user)


@router.put("/{user_id}", response_model=ApiResponse[UserResponse])
async def update_user(user_id: str, request: UserUpdateRequest) -> ApiResponse[UserResponse]:
    """
    Update allow-listed profile fields (name, bio, major, profilePictureUrl, notificationToken)

    Args:
        user_id: ID of the user
        request: Fields to change

    Returns:
        The updated user
    """
    container = get_container()
    update_user_use_case = container.get(UpdateUserUseCase)

    user = await update_user_use_case.execute(user_id, request)
    return ApiResponse(message="User updated successfully", data=user)


@router.patch("/{user_id}/avatar", response_model=ApiResponse[UserResponse])
async def update_avatar(user_id: str, request: AvatarUpdateRequest) -> ApiResponse[UserResponse]:
    container = get_container()
    update_avatar_use_case = container.get(UpdateAvatarUseCase)

    user = await update_avatar_use_case.execute(user_id, request)
    return ApiResponse(message="Profile picture updated successfully", data=user)


@router.get("/{user_id}/profile", response_model=ApiResponse[UserProfileResponse])
async def get_user_profile(user_id: str) -> ApiResponse[UserProfileResponse]:
    """
    Get a user with activity counts

    Returns:
        The user plus club, officer, event and listing counts
    """
    container = get_container()
    get_user_profile_use_case = container.get(GetUserProfileUseCase)

    profile = await get_user_profile_use_case.execute(user_id)
    return ApiResponse(data=profile)


@router.delete("/{user_id}", response_model=ApiResponse)
async def delete_user(user_id: str) -> ApiResponse:
    container = get_container()
    delete_user_use_case = container.get(DeleteUserUseCase)

    await delete_user_use_case.execute(user_id)
    return ApiResponse(message="User deleted successfully")
