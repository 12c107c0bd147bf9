# Standard library imports
import logging

# Local application imports
from ....domain.repositories.listing_repository import ListingRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.listing import MarketplaceListing
from ....domain.constants import ListingFields
from ...dto.listing_dto import ListingCreateRequest, ListingResponse
from ...services.presenters import present_listing
from ...services.reference_expander import UserReferenceExpander
from ...services.user_references import ensure_users_exist

logger = logging.getLogger(__name__)


class CreateListingUseCase:
    """Use case for creating a marketplace listing"""

    def __init__(self, listing_repository: ListingRepository, user_repository: UserRepository) -> None:
        self.listing_repository = listing_repository
        self.user_repository = user_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(self, request: ListingCreateRequest) -> ListingResponse:
        """
        Create a new listing (available by default)

        Raises:
            ValidationError: If a field is invalid, more than ten images are
                given, or the seller does not exist
        """
        new_listing = MarketplaceListing(
            id=None,
            title=request.title,
            description=request.description,
            price=request.price,
            seller_id=request.seller,
            category=request.category,
            image_urls=list(request.image_urls),
        )
        await ensure_users_exist(
            self.user_repository, [(ListingFields.SELLER, [new_listing.seller_id])]
        )

        saved_listing = await self.listing_repository.create(new_listing)
        logger.info(f"Created listing {saved_listing.id} for seller {saved_listing.seller_id}")

        users = await self.expander.load([saved_listing.seller_id])
        return present_listing(saved_listing, users)
