from datetime import datetime
from typing import List, Optional
from pydantic import Field
from .common_dto import CamelModel, PaginationResponse, UserSummary


class ListingCreateRequest(CamelModel):
    """DTO for marketplace listing creation request"""
    title: str
    price: float
    seller: str
    category: str
    description: Optional[str] = None
    image_urls: List[str] = Field(default_factory=list)


class ListingUpdateRequest(CamelModel):
    """DTO for listing update; only the fields sent are changed"""
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None
    image_urls: Optional[List[str]] = None
    is_available: Optional[bool] = None


class ListingImageRequest(CamelModel):
    image_url: str


class ListingResponse(CamelModel):
    """DTO for listing response with the seller expanded"""
    id: str
    title: str
    description: Optional[str] = None
    price: float
    formatted_price: str
    seller: Optional[UserSummary] = None
    image_urls: List[str] = Field(default_factory=list)
    has_images: bool
    category: str
    is_available: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ListingListResponse(CamelModel):
    listings: List[ListingResponse]
    pagination: PaginationResponse


class AvailabilityResponse(CamelModel):
    is_available: bool


class CategoryCount(CamelModel):
    category: str
    count: int


class CategoryCountsResponse(CamelModel):
    categories: List[CategoryCount]
    total_available: int
    available_categories: List[str]
