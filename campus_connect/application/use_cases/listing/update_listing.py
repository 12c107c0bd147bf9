# Standard library imports
import logging

# Local application imports
from ....domain.repositories.listing_repository import ListingRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import ListingFields
from ....domain.mutators import update_fields
from ...dto.listing_dto import ListingResponse, ListingUpdateRequest
from ...services.presenters import present_listing
from ...services.reference_expander import UserReferenceExpander
from .get_listing import load_listing

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {
    "title": ListingFields.TITLE,
    "description": ListingFields.DESCRIPTION,
    "price": ListingFields.PRICE,
    "category": ListingFields.CATEGORY,
    "image_urls": ListingFields.IMAGE_URLS,
    "is_available": ListingFields.IS_AVAILABLE,
}


class UpdateListingUseCase:
    """Use case for updating a listing; the seller cannot be changed"""

    def __init__(self, listing_repository: ListingRepository, user_repository: UserRepository) -> None:
        self.listing_repository = listing_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(self, listing_id: str, request: ListingUpdateRequest) -> ListingResponse:
        listing = await load_listing(self.listing_repository, listing_id)

        changes = request.model_dump(exclude_unset=True)
        mutation = update_fields(listing, changes, UPDATABLE_FIELDS)
        saved_listing = await self.listing_repository.apply(listing_id, mutation)
        logger.info(f"Updated listing {listing_id}: {sorted(changes)}")

        users = await self.expander.load([saved_listing.seller_id])
        return present_listing(saved_listing, users)
