# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Query, status

# Local application imports
from ...application.dto.common_dto import ApiResponse
from ...application.dto.listing_dto import (
    AvailabilityResponse,
    CategoryCountsResponse,
    ListingCreateRequest,
    ListingImageRequest,
    ListingListResponse,
    ListingResponse,
    ListingUpdateRequest,
)
from ...application.use_cases.listing import (
    AddListingImageUseCase,
    CreateListingUseCase,
    DeleteListingUseCase,
    GetListingUseCase,
    ListCategoryCountsUseCase,
    ListListingsUseCase,
    MarkListingAvailableUseCase,
    MarkListingSoldUseCase,
    UpdateListingUseCase,
)
from ...di.container import get_container


router = APIRouter(tags=["listings"])


@router.get("", response_model=ApiResponse[ListingListResponse])
async def list_listings(
    page: int = Query(1),
    limit: int = Query(10),
    category: Optional[str] = Query(None),
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    available: bool = Query(True),
    seller_id: Optional[str] = Query(None, alias="sellerId"),
    search: Optional[str] = Query(None),
) -> ApiResponse[ListingListResponse]:
    """
    List marketplace listings, newest first

    Args:
        page: 1-based page number
        limit: Page size (1-100)
        category: Only listings in this category
        min_price: Inclusive lower price bound
        max_price: Inclusive upper price bound
        available: When true (default) only listings still for sale
        seller_id: Only listings from this seller
        search: Search term over title and description

    Returns:
        Listings and pagination
    """
    container = get_container()
    list_listings_use_case = container.get(ListListingsUseCase)

    listings = await list_listings_use_case.execute(
        page=page,
        limit=limit,
        category=category,
        min_price=min_price,
        max_price=max_price,
        available=available,
        seller_id=seller_id,
        search=search,
    )
    return ApiResponse(data=listings)


# Declared before /{listing_id} so "categories" is not taken for an id
@router.get("/categories", response_model=ApiResponse[CategoryCountsResponse])
async def list_listing_categories() -> ApiResponse[CategoryCountsResponse]:
    container = get_container()
    category_counts_use_case = container.get(ListCategoryCountsUseCase)

    counts = await category_counts_use_case.execute()
    return ApiResponse(data=counts)


@router.post("", response_model=ApiResponse[ListingResponse], status_code=status.HTTP_201_CREATED)
async def create_listing(request: ListingCreateRequest) -> ApiResponse[ListingResponse]:
    container = get_container()
    create_listing_use_case = container.get(CreateListingUseCase)

    listing = await create_listing_use_case.execute(request)
    return ApiResponse(message="Listing created successfully", data=listing)


@router.get("/{listing_id}", response_model=ApiResponse[ListingResponse])
async def get_listing(listing_id: str) -> ApiResponse[ListingResponse]:
    container = get_container()
    get_listing_use_case = container.get(GetListingUseCase)

    listing = await get_listing_use_case.execute(listing_id)
    return ApiResponse(data=listing)


@router.put("/{listing_id}", response_model=ApiResponse[ListingResponse])
async def update_listing(listing_id: str, request: ListingUpdateRequest) -> ApiResponse[ListingResponse]:
    container = get_container()
    update_listing_use_case = container.get(UpdateListingUseCase)

    listing = await update_listing_use_case.execute(listing_id, request)
    return ApiResponse(message="Listing updated successfully", data=listing)


@router.delete("/{listing_id}", response_model=ApiResponse)
async def delete_listing(listing_id: str) -> ApiResponse:
    container = get_container()
    delete_listing_use_case = container.get(DeleteListingUseCase)

    await delete_listing_use_case.execute(listing_id)
    return ApiResponse(message="Listing deleted successfully")


@router.post("/{listing_id}/sold", response_model=ApiResponse[AvailabilityResponse])
async def mark_listing_sold(listing_id: str) -> ApiResponse[AvailabilityResponse]:
    container = get_container()
    mark_sold_use_case = container.get(MarkListingSoldUseCase)

    availability = await mark_sold_use_case.execute(listing_id)
    return ApiResponse(message="Listing marked as sold", data=availability)


@router.post("/{listing_id}/available", response_model=ApiResponse[AvailabilityResponse])
async def mark_listing_available(listing_id: str) -> ApiResponse[AvailabilityResponse]:
    container = get_container()
    mark_available_use_case = container.get(MarkListingAvailableUseCase)

    availability = await mark_available_use_case.execute(listing_id)
    return ApiResponse(message="Listing marked as available", data=availability)


@router.post("/{listing_id}/images", response_model=ApiResponse[ListingResponse])
async def add_listing_image(listing_id: str, request: ListingImageRequest) -> ApiResponse[ListingResponse]:
    """
    Append an image URL to a listing

    Returns:
        The updated listing; 400 if the URL is not an image or ten images
        are already attached
    """
    container = get_container()
    add_image_use_case = container.get(AddListingImageUseCase)

    listing = await add_image_use_case.execute(listing_id, request)
    return ApiResponse(message="Image added successfully", data=listing)
