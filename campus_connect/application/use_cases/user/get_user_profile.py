# Standard library imports
import asyncio

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.repositories.event_repository import EventRepository
from ....domain.repositories.club_repository import ClubRepository
from ....domain.repositories.listing_repository import ListingRepository
from ....domain.exceptions import NotFoundError
from ...dto.user_dto import UserProfileResponse, UserStatsResponse
from ...services.presenters import present_user


class GetUserProfileUseCase:
    """Use case for the user profile view: the user plus derived activity counts"""

    def __init__(
        self,
        user_repository: UserRepository,
        event_repository: EventRepository,
        club_repository: ClubRepository,
        listing_repository: ListingRepository,
    ) -> None:
        self.user_repository = user_repository
        self.event_repository = event_repository
        self.club_repository = club_repository
        self.listing_repository = listing_repository

    async def execute(self, user_id: str) -> UserProfileResponse:
        """
        Get a user with counts computed from the other collections

        Args:
            user_id: ID of the user

        Returns:
            UserProfileResponse with user and stats (nothing is persisted)

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")

        (
            club_memberships,
            officer_positions,
            hosted_events,
            attending_events,
            active_listings,
        ) = await asyncio.gather(
            self.club_repository.count_memberships(user_id),
            self.club_repository.count_officer_positions(user_id),
            self.event_repository.count_hosted_by(user_id),
            self.event_repository.count_attended_by(user_id),
            self.listing_repository.count_active_by_seller(user_id),
        )

        return UserProfileResponse(
            user=present_user(user),
            stats=UserStatsResponse(
                club_memberships=club_memberships,
                officer_positions=officer_positions,
                hosted_events_count=hosted_events,
                attending_events_count=attending_events,
                active_listings=active_listings,
            ),
        )
