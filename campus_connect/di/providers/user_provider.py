from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.event_repository import EventRepository
from ...domain.repositories.club_repository import ClubRepository
from ...domain.repositories.listing_repository import ListingRepository
from ...application.use_cases.user import (
    CreateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    UpdateAvatarUseCase,
    DeleteUserUseCase,
    GetUserProfileUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User use case provider - registers all user-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all user use cases.
        Use cases are created on-demand via factories.
        """
        for use_case in (
            CreateUserUseCase,
            GetUserUseCase,
            ListUsersUseCase,
            UpdateUserUseCase,
            UpdateAvatarUseCase,
            DeleteUserUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    user_repository=container.get(UserRepository)
                )
            )

        # Profile view aggregates counts from the other collections
        container.register_factory(
            GetUserProfileUseCase,
            lambda: GetUserProfileUseCase(
                user_repository=container.get(UserRepository),
                event_repository=container.get(EventRepository),
                club_repository=container.get(ClubRepository),
                listing_repository=container.get(ListingRepository),
            )
        )
