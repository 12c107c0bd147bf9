# Standard library imports
import logging

# Local application imports
from ....domain.repositories.listing_repository import ListingRepository
from ....domain.exceptions import ConflictError
from ....domain.mutators import mark_as_available, mark_as_sold
from ...dto.listing_dto import AvailabilityResponse
from .get_listing import load_listing

logger = logging.getLogger(__name__)


class MarkListingSoldUseCase:
    """Use case for marking a listing as sold"""

    def __init__(self, listing_repository: ListingRepository) -> None:
        self.listing_repository = listing_repository

    async def execute(self, listing_id: str) -> AvailabilityResponse:
        """
        Mark a listing as sold

        Raises:
            NotFoundError: If the listing does not exist
            ConflictError: If the listing is already sold
        """
        listing = await load_listing(self.listing_repository, listing_id)
        if not listing.is_available:
            raise ConflictError("Listing is already marked as sold")

        saved_listing = await self.listing_repository.apply(listing_id, mark_as_sold(listing))
        logger.info(f"Listing {listing_id} marked as sold")
        return AvailabilityResponse(is_available=saved_listing.is_available)


class MarkListingAvailableUseCase:
    """Use case for putting a sold listing back on the market"""

    def __init__(self, listing_repository: ListingRepository) -> None:
        self.listing_repository = listing_repository

    async def execute(self, listing_id: str) -> AvailabilityResponse:
        """
        Mark a listing as available

        Raises:
            NotFoundError: If the listing does not exist
            ConflictError: If the listing is already available
        """
        listing = await load_listing(self.listing_repository, listing_id)
        if listing.is_available:
            raise ConflictError("Listing is already available")

        saved_listing = await self.listing_repository.apply(listing_id, mark_as_available(listing))
        logger.info(f"Listing {listing_id} marked as available")
        return AvailabilityResponse(is_available=saved_listing.is_available)
