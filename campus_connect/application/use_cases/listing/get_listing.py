# Local application imports
from ....domain.repositories.listing_repository import ListingRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.listing import MarketplaceListing
from ....domain.exceptions import NotFoundError
from ...dto.listing_dto import ListingResponse
from ...services.presenters import present_listing
from ...services.reference_expander import UserReferenceExpander


async def load_listing(listing_repository: ListingRepository, listing_id: str) -> MarketplaceListing:
    """Find a listing or raise NotFoundError (malformed IDs included)"""
    listing = await listing_repository.find_by_id(listing_id)
    if not listing:
        raise NotFoundError("Listing not found")
    return listing


class GetListingUseCase:
    """Use case for getting a listing with the seller expanded"""

    def __init__(self, listing_repository: ListingRepository, user_repository: UserRepository) -> None:
        self.listing_repository = listing_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(self, listing_id: str) -> ListingResponse:
        listing = await load_listing(self.listing_repository, listing_id)
        users = await self.expander.load([listing.seller_id])
        return present_listing(listing, users)
