from typing import TYPE_CHECKING
from ...domain.repositories.club_repository import ClubRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.club import (
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

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ClubProvider:
    """Club use case provider - registers all club-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all club use cases.
        Use cases are created on-demand via factories.
        """
        for use_case in (
            CreateClubUseCase,
            GetClubUseCase,
            ListClubMembersUseCase,
            ListClubOfficersUseCase,
            ListClubsUseCase,
            UpdateClubUseCase,
            JoinClubUseCase,
            LeaveClubUseCase,
            AddOfficerUseCase,
            RemoveOfficerUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    club_repository=container.get(ClubRepository),
                    user_repository=container.get(UserRepository),
                )
            )

        container.register_factory(
            DeleteClubUseCase,
            lambda: DeleteClubUseCase(club_repository=container.get(ClubRepository))
        )
