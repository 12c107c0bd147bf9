# Standard library imports
import logging

# Local application imports
from ....domain.repositories.club_repository import ClubRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import ClubFields
from ....domain.exceptions import ConflictError
from ....domain.mutators import update_fields
from ...dto.club_dto import ClubResponse, ClubUpdateRequest
from ...services.presenters import present_club
from ...services.reference_expander import UserReferenceExpander
from .get_club import load_club

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {
    "name": ClubFields.NAME,
    "description": ClubFields.DESCRIPTION,
}


class UpdateClubUseCase:
    """
    Use case for updating a club's name and description.

    Membership is only changed through the membership and officer operations.
    """

    def __init__(self, club_repository: ClubRepository, user_repository: UserRepository) -> None:
        self.club_repository = club_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(self, club_id: str, request: ClubUpdateRequest) -> ClubResponse:
        club = await load_club(self.club_repository, club_id)

        changes = request.model_dump(exclude_unset=True)
        mutation = update_fields(club, changes, UPDATABLE_FIELDS)

        if mutation.entity.name != club.name:
            same_name = await self.club_repository.find_by_name(mutation.entity.name)
            if same_name and same_name.id != club.id:
                raise ConflictError("Club with this name already exists")

        saved_club = await self.club_repository.apply(club_id, mutation)
        logger.info(f"Updated club {club_id}: {sorted(changes)}")

        users = await self.expander.load(saved_club.member_ids)
        return present_club(saved_club, users)
