# Standard library imports
import logging

# Local application imports
from ....domain.repositories.listing_repository import ListingRepository
from ....domain.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class DeleteListingUseCase:
    """Use case for hard-deleting a listing"""

    def __init__(self, listing_repository: ListingRepository) -> None:
        self.listing_repository = listing_repository

    async def execute(self, listing_id: str) -> None:
        deleted = await self.listing_repository.delete(listing_id)
        if not deleted:
            raise NotFoundError("Listing not found")
        logger.info(f"Deleted listing {listing_id}")
