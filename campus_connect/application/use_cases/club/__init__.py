from .create_club import CreateClubUseCase
from .get_club import GetClubUseCase, ListClubMembersUseCase, ListClubOfficersUseCase
from .list_clubs import ListClubsUseCase
from .update_club import UpdateClubUseCase
from .delete_club import DeleteClubUseCase
from .membership import JoinClubUseCase, LeaveClubUseCase
from .officers import AddOfficerUseCase, RemoveOfficerUseCase

__all__ = [
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
]
