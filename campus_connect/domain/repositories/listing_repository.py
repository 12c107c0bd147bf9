from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple
from ..models.listing import MarketplaceListing
from ..models.filters import ListingFilter
from ..models.mutation import Mutation
from ..models.pagination import PageRequest


class ListingRepository(ABC):
    """Repository interface - defines contract for marketplace listing data access"""

    @abstractmethod
    async def find_by_id(self, listing_id: str) -> Optional[MarketplaceListing]:
        """Find listing by ID; a malformed ID finds nothing"""
        pass

    @abstractmethod
    async def list(
        self,
        listing_filter: ListingFilter,
        page: PageRequest,
    ) -> Tuple[List[MarketplaceListing], int]:
        """Return one page of listings, newest first, plus the total match count"""
        pass

    @abstractmethod
    async def create(self, listing: MarketplaceListing) -> MarketplaceListing:
        """Insert a new listing"""
        pass

    @abstractmethod
    async def apply(
        self,
        listing_id: str,
        mutation: Mutation[MarketplaceListing],
    ) -> MarketplaceListing:
        """Persist a mutation atomically and return the stored listing"""
        pass

    @abstractmethod
    async def delete(self, listing_id: str) -> bool:
        """Hard delete; returns False when nothing was deleted"""
        pass

    @abstractmethod
    async def count_active_by_seller(self, user_id: str) -> int:
        """Number of available listings offered by a seller"""
        pass

    @abstractmethod
    async def count_available_by_category(self) -> Dict[str, int]:
        """Available listing count per category (categories without listings omitted)"""
        pass
