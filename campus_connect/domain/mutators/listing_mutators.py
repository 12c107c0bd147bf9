# Standard library imports
from dataclasses import replace

# Local application imports
from ..constants import ListingFields
from ..exceptions import ConflictError, ValidationError
from ..models.listing import MAX_LISTING_IMAGES, MarketplaceListing
from ..models.mutation import Equals, MaxItems, Mutation, Push, SetField
from ..validation import is_image_url


def mark_as_sold(listing: MarketplaceListing) -> Mutation[MarketplaceListing]:
    """
    Flip the listing to unavailable.

    The caller reports a conflict when the listing is already sold; the write
    itself is guarded so a concurrent sale surfaces as the same conflict.
    """
    return Mutation(
        entity=replace(listing, is_available=False),
        effects=[SetField(ListingFields.IS_AVAILABLE, False)],
        guards=[Equals(ListingFields.IS_AVAILABLE, True)],
        guard_error=ConflictError("Listing is already marked as sold"),
    )


def mark_as_available(listing: MarketplaceListing) -> Mutation[MarketplaceListing]:
    """Flip the listing back to available; see ``mark_as_sold``"""
    return Mutation(
        entity=replace(listing, is_available=True),
        effects=[SetField(ListingFields.IS_AVAILABLE, True)],
        guards=[Equals(ListingFields.IS_AVAILABLE, False)],
        guard_error=ConflictError("Listing is already available"),
    )


def add_image(listing: MarketplaceListing, image_url: str) -> Mutation[MarketplaceListing]:
    """
    Append one image URL.

    Raises:
        ValidationError: If the URL is not an image link or the listing already has ten images
    """
    if not is_image_url(image_url):
        raise ValidationError.for_field(
            ListingFields.IMAGE_URLS, "Each image URL must be a valid image link", image_url
        )

    cap_reached = ValidationError.for_field(
        ListingFields.IMAGE_URLS,
        f"Maximum of {MAX_LISTING_IMAGES} images allowed per listing",
        len(listing.image_urls),
    )
    if len(listing.image_urls) >= MAX_LISTING_IMAGES:
        raise cap_reached

    return Mutation(
        entity=replace(listing, image_urls=[*listing.image_urls, image_url]),
        effects=[Push(ListingFields.IMAGE_URLS, image_url)],
        guards=[MaxItems(ListingFields.IMAGE_URLS, MAX_LISTING_IMAGES)],
        guard_error=cap_reached,
    )
