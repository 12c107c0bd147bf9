# Standard library imports
import logging

# Local application imports
from ....domain.repositories.club_repository import ClubRepository
from ....domain.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class DeleteClubUseCase:
    """Use case for hard-deleting a club"""

    def __init__(self, club_repository: ClubRepository) -> None:
        self.club_repository = club_repository

    async def execute(self, club_id: str) -> None:
        deleted = await self.club_repository.delete(club_id)
        if not deleted:
            raise NotFoundError("Club not found")
        logger.info(f"Deleted club {club_id}")
