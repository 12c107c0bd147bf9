# Standard library imports
import logging

# Local application imports
from ....domain.repositories.listing_repository import ListingRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.mutators import add_image
from ...dto.listing_dto import ListingImageRequest, ListingResponse
from ...services.presenters import present_listing
from ...services.reference_expander import UserReferenceExpander
from .get_listing import load_listing

logger = logging.getLogger(__name__)


class AddListingImageUseCase:
    """Use case for appending one image to a listing (at most ten images)"""

    def __init__(self, listing_repository: ListingRepository, user_repository: UserRepository) -> None:
        self.listing_repository = listing_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(self, listing_id: str, request: ListingImageRequest) -> ListingResponse:
        """
        Add an image URL to a listing

        Raises:
            NotFoundError: If the listing does not exist
            ValidationError: If the URL is not an image link or the cap is reached
        """
        listing = await load_listing(self.listing_repository, listing_id)

        saved_listing = await self.listing_repository.apply(
            listing_id, add_image(listing, request.image_url)
        )
        logger.info(f"Added image to listing {listing_id} ({len(saved_listing.image_urls)} total)")

        users = await self.expander.load([saved_listing.seller_id])
        return present_listing(saved_listing, users)
