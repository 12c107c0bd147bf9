# Standard library imports
from typing import Any, Dict, List, Optional, Tuple

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.listing_repository import ListingRepository
from ...domain.models.listing import MarketplaceListing
from ...domain.models.filters import ListingFilter
from ...domain.models.mutation import Mutation
from ...domain.models.pagination import PageRequest
from ...domain.constants import ListingFields
from ...utils.datetime_utils import ensure_utc
from .mongo_base_repository import (
    MongoRepository,
    id_to_str,
    search_clause,
    to_object_id,
    translate_errors,
)
from .mongo_connection import get_listing_collection


class MongoListingRepository(MongoRepository[MarketplaceListing], ListingRepository):
    """MongoDB implementation of ListingRepository"""

    entity_name = "Listing"

    def __init__(self, listing_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        super().__init__(
            listing_collection if listing_collection is not None else get_listing_collection()
        )

    async def find_by_id(self, listing_id: str) -> Optional[MarketplaceListing]:
        return await self._find_by_id(listing_id)

    async def list(
        self,
        listing_filter: ListingFilter,
        page: PageRequest,
    ) -> Tuple[List[MarketplaceListing], int]:
        """
        List listings, newest first

        Args:
            listing_filter: Category, price range, availability, seller and free-text criteria
            page: Requested page

        Returns:
            Tuple of (listings on the page, total matching listings)
        """
        query: Dict[str, Any] = search_clause(
            listing_filter.search, [ListingFields.TITLE, ListingFields.DESCRIPTION]
        )
        if listing_filter.available_only:
            query[ListingFields.IS_AVAILABLE] = True
        if listing_filter.category:
            query[ListingFields.CATEGORY] = listing_filter.category

        price_range: Dict[str, Any] = {}
        if listing_filter.min_price is not None:
            price_range["$gte"] = listing_filter.min_price
        if listing_filter.max_price is not None:
            price_range["$lte"] = listing_filter.max_price
        if price_range:
            query[ListingFields.PRICE] = price_range

        if listing_filter.seller_id:
            query[ListingFields.SELLER] = to_object_id(listing_filter.seller_id)

        return await self._paginate(
            query, [(ListingFields.CREATED_AT, -1), (ListingFields.MONGO_ID, -1)], page
        )

    async def create(self, listing: MarketplaceListing) -> MarketplaceListing:
        return await self._insert(listing)

    async def apply(
        self,
        listing_id: str,
        mutation: Mutation[MarketplaceListing],
    ) -> MarketplaceListing:
        return await self._apply(listing_id, mutation)

    async def delete(self, listing_id: str) -> bool:
        return await self._delete(listing_id)

    async def count_active_by_seller(self, user_id: str) -> int:
        object_id = to_object_id(user_id)
        if object_id is None:
            return 0
        return await self._count({ListingFields.SELLER: object_id, ListingFields.IS_AVAILABLE: True})

    async def count_available_by_category(self) -> Dict[str, int]:
        pipeline = [
            {"$match": {ListingFields.IS_AVAILABLE: True}},
            {"$group": {"_id": f"${ListingFields.CATEGORY}", "count": {"$sum": 1}}},
        ]
        counts: Dict[str, int] = {}
        with translate_errors("counting listings by category"):
            async for row in self.collection.aggregate(pipeline):
                counts[row["_id"]] = row["count"]
        return counts

    def _encode_value(self, field: str, value: Any) -> Any:
        if field == ListingFields.SELLER:
            return to_object_id(value)
        return value

    def _document_to_entity(self, document: Dict[str, Any]) -> MarketplaceListing:
        """
        Convert MongoDB document to MarketplaceListing domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            MarketplaceListing domain model
        """
        if not document:
            raise ValueError("Invalid document: document is None or empty")

        return MarketplaceListing(
            id=id_to_str(document.get(ListingFields.MONGO_ID)),
            title=document.get(ListingFields.TITLE, ""),
            description=document.get(ListingFields.DESCRIPTION),
            price=document.get(ListingFields.PRICE),
            seller_id=id_to_str(document.get(ListingFields.SELLER)),
            category=document.get(ListingFields.CATEGORY),
            image_urls=list(document.get(ListingFields.IMAGE_URLS, [])),
            is_available=document.get(ListingFields.IS_AVAILABLE, True),
            created_at=ensure_utc(document.get(ListingFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(ListingFields.UPDATED_AT)),
        )

    def _entity_to_dict(self, listing: MarketplaceListing) -> Dict[str, Any]:
        """
        Convert MarketplaceListing domain model to MongoDB document

        Args:
            listing: MarketplaceListing domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        if not listing:
            raise ValueError("Listing cannot be None")

        listing_dict: Dict[str, Any] = {
            ListingFields.TITLE: listing.title,
            ListingFields.PRICE: listing.price,
            ListingFields.SELLER: to_object_id(listing.seller_id),
            ListingFields.CATEGORY: listing.category,
            ListingFields.IMAGE_URLS: list(listing.image_urls),
            ListingFields.IS_AVAILABLE: listing.is_available,
        }
        if listing.description:
            listing_dict[ListingFields.DESCRIPTION] = listing.description
        return listing_dict
