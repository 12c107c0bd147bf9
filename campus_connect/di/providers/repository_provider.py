from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.event_repository import EventRepository
from ...domain.repositories.club_repository import ClubRepository
from ...domain.repositories.listing_repository import ListingRepository
from ...domain.repositories.post_repository import PostRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_event_repository import MongoEventRepository
from ...infrastructure.db.mongo_club_repository import MongoClubRepository
from ...infrastructure.db.mongo_listing_repository import MongoListingRepository
from ...infrastructure.db.mongo_post_repository import MongoPostRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=container.get("user_collection"))
        )

        container.register_singleton(
            EventRepository,
            MongoEventRepository(event_collection=container.get("event_collection"))
        )

        container.register_singleton(
            ClubRepository,
            MongoClubRepository(club_collection=container.get("club_collection"))
        )

        container.register_singleton(
            ListingRepository,
            MongoListingRepository(listing_collection=container.get("listing_collection"))
        )

        container.register_singleton(
            PostRepository,
            MongoPostRepository(post_collection=container.get("post_collection"))
        )
