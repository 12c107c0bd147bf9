from typing import TYPE_CHECKING
from ...domain.repositories.listing_repository import ListingRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.listing import (
    CreateListingUseCase,
    GetListingUseCase,
    ListListingsUseCase,
    ListCategoryCountsUseCase,
    UpdateListingUseCase,
    DeleteListingUseCase,
    MarkListingSoldUseCase,
    MarkListingAvailableUseCase,
    AddListingImageUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ListingProvider:
    """Marketplace use case provider - registers all listing-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all listing use cases.
        Use cases are created on-demand via factories.
        """
        # Use cases that expand the seller
        for use_case in (
            CreateListingUseCase,
            GetListingUseCase,
            ListListingsUseCase,
            UpdateListingUseCase,
            AddListingImageUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    listing_repository=container.get(ListingRepository),
                    user_repository=container.get(UserRepository),
                )
            )

        for use_case in (
            ListCategoryCountsUseCase,
            DeleteListingUseCase,
            MarkListingSoldUseCase,
            MarkListingAvailableUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    listing_repository=container.get(ListingRepository)
                )
            )
