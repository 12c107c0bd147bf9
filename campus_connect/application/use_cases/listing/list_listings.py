# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.listing_repository import ListingRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.filters import ListingFilter
from ....domain.models.listing import ListingCategory
from ....domain.models.pagination import PageInfo, PageRequest
from ...dto.listing_dto import CategoryCount, CategoryCountsResponse, ListingListResponse
from ...services.presenters import present_listing, present_pagination
from ...services.reference_expander import UserReferenceExpander


class ListListingsUseCase:
    """Use case for browsing listings, newest first"""

    def __init__(self, listing_repository: ListingRepository, user_repository: UserRepository) -> None:
        self.listing_repository = listing_repository
        self.expander = UserReferenceExpander(user_repository)

    async def execute(
        self,
        page: int = 1,
        limit: int = 10,
        category: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        available: bool = True,
        seller_id: Optional[str] = None,
        search: Optional[str] = None,
    ) -> ListingListResponse:
        """
        List listings

        Args:
            page: 1-based page number
            limit: Page size (1-100)
            category: Only this category
            min_price: Inclusive lower price bound
            max_price: Inclusive upper price bound
            available: When True (default) only available listings are returned
            seller_id: Only listings of this seller
            search: Case-insensitive substring over title and description

        Returns:
            ListingListResponse with listings and pagination
        """
        page_request = PageRequest(page=page, limit=limit)
        listing_filter = ListingFilter(
            category=category,
            min_price=min_price,
            max_price=max_price,
            available_only=available,
            seller_id=seller_id,
            search=search,
        )
        listings, total = await self.listing_repository.list(listing_filter, page_request)

        users = await self.expander.load([listing.seller_id for listing in listings])
        return ListingListResponse(
            listings=[present_listing(listing, users) for listing in listings],
            pagination=present_pagination(PageInfo.from_total(page_request, total)),
        )


class ListCategoryCountsUseCase:
    """Use case for the number of available listings in each category"""

    def __init__(self, listing_repository: ListingRepository) -> None:
        self.listing_repository = listing_repository

    async def execute(self) -> CategoryCountsResponse:
        counts = await self.listing_repository.count_available_by_category()
        categories = [
            CategoryCount(category=category, count=counts[category])
            for category in ListingCategory.values()
            if counts.get(category)
        ]
        return CategoryCountsResponse(
            categories=categories,
            total_available=sum(category.count for category in categories),
            available_categories=ListingCategory.values(),
        )
