# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

# Local application imports
from ..constants import ListingFields
from ..validation import FieldValidator, is_image_url


TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000
MAX_LISTING_IMAGES = 10


class ListingCategory(str, Enum):
    """Marketplace listing categories"""
    BOOKS = "books"
    ELECTRONICS = "electronics"
    FURNITURE = "furniture"
    OTHER = "other"

    @classmethod
    def values(cls) -> List[str]:
        return [category.value for category in cls]


@dataclass
class MarketplaceListing:
    """
    Pure domain model for MarketplaceListing entity.

    A listing carries at most ten images; exceeding the cap is rejected,
    never truncated.
    """
    id: Optional[str]
    title: str
    price: float
    seller_id: str
    category: str
    description: Optional[str] = None
    image_urls: List[str] = field(default_factory=list)
    is_available: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if isinstance(self.title, str):
            self.title = self.title.strip()
        if isinstance(self.category, ListingCategory):
            self.category = self.category.value

        validator = FieldValidator()
        validator.text(ListingFields.TITLE, self.title, min_length=TITLE_MIN_LENGTH,
                       max_length=TITLE_MAX_LENGTH, required=True, label="Title")
        validator.text(ListingFields.DESCRIPTION, self.description,
                       max_length=DESCRIPTION_MAX_LENGTH, label="Description")
        validator.number(ListingFields.PRICE, self.price, minimum=0)
        validator.reference(ListingFields.SELLER, self.seller_id)
        validator.one_of(ListingFields.CATEGORY, self.category, ListingCategory.values())
        if not isinstance(self.is_available, bool):
            validator.add(ListingFields.IS_AVAILABLE, "isAvailable must be a boolean",
                          self.is_available)

        if len(self.image_urls) > MAX_LISTING_IMAGES:
            validator.add(ListingFields.IMAGE_URLS,
                          f"Maximum of {MAX_LISTING_IMAGES} images allowed per listing",
                          len(self.image_urls))
        for index, url in enumerate(self.image_urls):
            if not is_image_url(url):
                validator.add(f"{ListingFields.IMAGE_URLS}[{index}]",
                              "Each image URL must be a valid image link", url)
        validator.raise_if_invalid()

    @property
    def formatted_price(self) -> str:
        return f"${self.price:.2f}"

    @property
    def has_images(self) -> bool:
        return len(self.image_urls) > 0
