from .create_listing import CreateListingUseCase
from .get_listing import GetListingUseCase
from .list_listings import ListListingsUseCase, ListCategoryCountsUseCase
from .update_listing import UpdateListingUseCase
from .delete_listing import DeleteListingUseCase
from .availability import MarkListingSoldUseCase, MarkListingAvailableUseCase
from .add_listing_image import AddListingImageUseCase

__all__ = [
    "CreateListingUseCase",
    "GetListingUseCase",
    "ListListingsUseCase",
    "ListCategoryCountsUseCase",
    "UpdateListingUseCase",
    "DeleteListingUseCase",
    "MarkListingSoldUseCase",
    "MarkListingAvailableUseCase",
    "AddListingImageUseCase",
]
