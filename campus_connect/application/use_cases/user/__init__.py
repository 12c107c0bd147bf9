from .create_user import CreateUserUseCase
from .get_user import GetUserUseCase
from .list_users import ListUsersUseCase
from .update_user import UpdateUserUseCase, UpdateAvatarUseCase
from .delete_user import DeleteUserUseCase
from .get_user_profile import GetUserProfileUseCase

__all__ = [
    "CreateUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
    "UpdateAvatarUseCase",
    "DeleteUserUseCase",
    "GetUserProfileUseCase",
]
