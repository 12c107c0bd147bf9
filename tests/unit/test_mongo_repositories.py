"""
Unit tests for the MongoDB repositories with mocked motor collections (no real DB).
"""
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from campus_connect.domain.exceptions import ConflictError, NotFoundError, StorageError, ValidationError
from campus_connect.domain.models import (
    ClubFilter,
    EventFilter,
    ListingFilter,
    MarketplaceListing,
    PageRequest,
    User,
    UserFilter,
)
from campus_connect.domain.mutators import (
    add_comment,
    add_image,
    attend_event,
    join_club,
    mark_as_sold,
    remove_comment,
    toggle_like,
)
from campus_connect.infrastructure.db.mongo_base_repository import search_clause, to_object_id
from campus_connect.infrastructure.db.mongo_club_repository import MongoClubRepository
from campus_connect.infrastructure.db.mongo_connection import ensure_indexes, index_models
from campus_connect.infrastructure.db.mongo_event_repository import MongoEventRepository
from campus_connect.infrastructure.db.mongo_listing_repository import MongoListingRepository
from campus_connect.infrastructure.db.mongo_post_repository import MongoPostRepository
from campus_connect.infrastructure.db.mongo_user_repository import MongoUserRepository

NOW = datetime(2030, 5, 1, 12, 0, tzinfo=timezone.utc)
HOST_OID = ObjectId("64b7f0c2a1b2c3d4e5f60001")
ALICE_OID = ObjectId("64b7f0c2a1b2c3d4e5f60002")
EVENT_OID = ObjectId("64b7f0c2a1b2c3d4e5f600e1")
CLUB_OID = ObjectId("64b7f0c2a1b2c3d4e5f600c0")
LISTING_OID = ObjectId("64b7f0c2a1b2c3d4e5f600a1")
POST_OID = ObjectId("64b7f0c2a1b2c3d4e5f600b1")


class FakeCursor:
    """Chainable async cursor over fixed documents"""

    def __init__(self, documents):
        self.documents = list(documents)
        self.sort_spec = None
        self.skipped = None
        self.limited = None

    def sort(self, spec):
        self.sort_spec = spec
        return self

    def skip(self, count):
        self.skipped = count
        return self

    def limit(self, count):
        self.limited = count
        return self

    def __aiter__(self):
        self._iter = iter(self.documents)
        return self

    async def __anext__(self):
        try:
            return next(self._iter)
        except StopIteration:
            raise StopAsyncIteration


@pytest.fixture
def collection():
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.find_one_and_update = AsyncMock(return_value=None)
    collection.count_documents = AsyncMock(return_value=0)
    collection.insert_one = AsyncMock()
    collection.delete_one = AsyncMock()
    return collection


def event_document(**overrides):
    document = {
        "_id": EVENT_OID,
        "title": "Hack Night",
        "description": "Bring a laptop",
        "startTime": NOW + timedelta(days=1),
        "endTime": NOW + timedelta(days=1, hours=2),
        "host": HOST_OID,
        "attendees": [],
        "locationCoords": {"type": "Point", "coordinates": [-122.4, 37.8]},
        "createdAt": NOW,
        "updatedAt": NOW,
    }
    document.update(overrides)
    return document


def listing_document(**overrides):
    document = {
        "_id": LISTING_OID,
        "title": "Desk lamp",
        "price": 8.0,
        "seller": HOST_OID,
        "category": "furniture",
        "imageUrls": [],
        "isAvailable": True,
    }
    document.update(overrides)
    return document


class TestHelpers:
    """Tests for shared repository helpers"""

    def test_malformed_id_is_none(self):
        assert to_object_id("not-an-id") is None
        assert to_object_id(None) is None
        assert to_object_id(str(HOST_OID)) == HOST_OID

    def test_search_clause_escapes_regex(self):
        clause = search_clause("c++", ["name", "email"])
        assert clause == {
            "$or": [
                {"name": {"$regex": r"c\+\+", "$options": "i"}},
                {"email": {"$regex": r"c\+\+", "$options": "i"}},
            ]
        }
        assert search_clause(None, ["name"]) == {}


class TestMongoUserRepository:
    """Tests for MongoUserRepository"""

    @pytest.mark.asyncio
    async def test_find_by_id_malformed_skips_query(self, collection):
        repo = MongoUserRepository(user_collection=collection)
        assert await repo.find_by_id("bad") is None
        collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_find_by_email_lowercases(self, collection):
        collection.find_one.return_value = {"_id": ALICE_OID, "name": "Alice", "email": "alice@example.com"}
        repo = MongoUserRepository(user_collection=collection)

        user = await repo.find_by_email(" Alice@Example.com ")

        collection.find_one.assert_awaited_once_with({"email": "alice@example.com"})
        assert user.id == str(ALICE_OID)

    @pytest.mark.asyncio
    async def test_create_sets_timestamps_and_id(self, collection):
        collection.insert_one.return_value = MagicMock(inserted_id=ALICE_OID)
        repo = MongoUserRepository(user_collection=collection)

        saved = await repo.create(User(id=None, name="Alice", email="alice@example.com"))

        document = collection.insert_one.call_args[0][0]
        assert "bio" not in document
        assert document["createdAt"] == document["updatedAt"]
        assert saved.id == str(ALICE_OID)
        assert saved.created_at is not None

    @pytest.mark.asyncio
    async def test_duplicate_email_is_conflict(self, collection):
        collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")
        repo = MongoUserRepository(user_collection=collection)

        with pytest.raises(ConflictError, match="User with this email already exists"):
            await repo.create(User(id=None, name="Alice", email="alice@example.com"))

    @pytest.mark.asyncio
    async def test_driver_failure_is_storage_error(self, collection):
        collection.find_one.side_effect = ServerSelectionTimeoutError("no servers")
        repo = MongoUserRepository(user_collection=collection)

        with pytest.raises(StorageError):
            await repo.find_by_id(str(ALICE_OID))

    @pytest.mark.asyncio
    async def test_list_sorts_by_name_and_paginates(self, collection):
        cursor = FakeCursor([{"_id": ALICE_OID, "name": "Alice", "email": "alice@example.com"}])
        collection.find = MagicMock(return_value=cursor)
        collection.count_documents.return_value = 11
        repo = MongoUserRepository(user_collection=collection)

        users, total = await repo.list(UserFilter(search="ali"), PageRequest(page=2, limit=5))

        assert total == 11
        assert [user.name for user in users] == ["Alice"]
        assert cursor.sort_spec == [("name", 1), ("_id", 1)]
        assert (cursor.skipped, cursor.limited) == (5, 5)
        query = collection.find.call_args[0][0]
        assert [list(clause) for clause in query["$or"]] == [["name"], ["email"], ["major"]]

    @pytest.mark.asyncio
    async def test_find_by_ids_skips_malformed(self, collection):
        collection.find = MagicMock(return_value=FakeCursor([]))
        repo = MongoUserRepository(user_collection=collection)

        assert await repo.find_by_ids(["bad"]) == []
        collection.find.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete(self, collection):
        collection.delete_one.return_value = MagicMock(deleted_count=1)
        repo = MongoUserRepository(user_collection=collection)

        assert await repo.delete(str(ALICE_OID)) is True
        assert await repo.delete("bad") is False


class TestMongoEventRepository:
    """Tests for MongoEventRepository"""

    @pytest.mark.asyncio
    async def test_document_round_trip_fields(self, collection):
        collection.find_one.return_value = event_document(attendees=[ALICE_OID])
        repo = MongoEventRepository(event_collection=collection)

        event = await repo.find_by_id(str(EVENT_OID))

        assert event.host_id == str(HOST_OID)
        assert event.attendee_ids == [str(ALICE_OID)]
        assert (event.location.longitude, event.location.latitude) == (-122.4, 37.8)

    @pytest.mark.asyncio
    async def test_attend_writes_guarded_add_to_set(self, collection):
        repo = MongoEventRepository(event_collection=collection)
        event = repo._document_to_entity(event_document())
        collection.find_one_and_update.return_value = event_document(attendees=[ALICE_OID])

        saved = await repo.apply(str(EVENT_OID), attend_event(event, str(ALICE_OID), NOW))

        query, update = collection.find_one_and_update.call_args[0][:2]
        assert query == {"_id": EVENT_OID, "attendees": {"$ne": ALICE_OID}}
        assert update["$addToSet"] == {"attendees": ALICE_OID}
        assert "updatedAt" in update["$set"]
        assert saved.attendee_ids == [str(ALICE_OID)]

    @pytest.mark.asyncio
    async def test_lost_race_raises_guard_error(self, collection):
        repo = MongoEventRepository(event_collection=collection)
        event = repo._document_to_entity(event_document())
        collection.find_one_and_update.return_value = None
        collection.count_documents.return_value = 1

        with pytest.raises(ConflictError, match="already attending"):
            await repo.apply(str(EVENT_OID), attend_event(event, str(ALICE_OID), NOW))

    @pytest.mark.asyncio
    async def test_deleted_document_is_not_found(self, collection):
        repo = MongoEventRepository(event_collection=collection)
        event = repo._document_to_entity(event_document())
        collection.find_one_and_update.return_value = None
        collection.count_documents.return_value = 0

        with pytest.raises(NotFoundError, match="Event not found"):
            await repo.apply(str(EVENT_OID), attend_event(event, str(ALICE_OID), NOW))

    @pytest.mark.asyncio
    async def test_list_builds_time_window_query(self, collection):
        cursor = FakeCursor([])
        collection.find = MagicMock(return_value=cursor)
        repo = MongoEventRepository(event_collection=collection)
        event_filter = EventFilter(
            start_after=NOW,
            start_before=NOW + timedelta(days=7),
            host_id=str(HOST_OID),
        )

        await repo.list(event_filter, PageRequest())

        query = collection.find.call_args[0][0]
        assert query["startTime"] == {"$gt": NOW, "$lt": NOW + timedelta(days=7)}
        assert query["host"] == HOST_OID
        assert cursor.sort_spec == [("startTime", 1), ("_id", 1)]

    @pytest.mark.asyncio
    async def test_count_attended_by_malformed_id(self, collection):
        repo = MongoEventRepository(event_collection=collection)
        assert await repo.count_attended_by("bad") == 0
        collection.count_documents.assert_not_called()


class TestMongoClubRepository:
    """Tests for MongoClubRepository"""

    @pytest.mark.asyncio
    async def test_join_encodes_member_ids(self, collection):
        repo = MongoClubRepository(club_collection=collection)
        club = repo._document_to_entity({"_id": CLUB_OID, "name": "Chess Club", "members": [], "officers": []})
        collection.find_one_and_update.return_value = {
            "_id": CLUB_OID, "name": "Chess Club", "members": [ALICE_OID], "officers": [],
        }

        saved = await repo.apply(str(CLUB_OID), join_club(club, str(ALICE_OID)))

        query, update = collection.find_one_and_update.call_args[0][:2]
        assert query == {"_id": CLUB_OID, "members": {"$ne": ALICE_OID}}
        assert update["$addToSet"] == {"members": ALICE_OID}
        assert saved.member_count == 1

    @pytest.mark.asyncio
    async def test_member_filter(self, collection):
        collection.find = MagicMock(return_value=FakeCursor([]))
        repo = MongoClubRepository(club_collection=collection)

        await repo.list(ClubFilter(member_id=str(ALICE_OID)), PageRequest())

        assert collection.find.call_args[0][0] == {"members": ALICE_OID}

    @pytest.mark.asyncio
    async def test_duplicate_name_is_conflict(self, collection):
        collection.find_one_and_update.side_effect = DuplicateKeyError("E11000 duplicate key")
        repo = MongoClubRepository(club_collection=collection)
        club = repo._document_to_entity({"_id": CLUB_OID, "name": "Chess Club"})

        with pytest.raises(ConflictError, match="Club with this name already exists"):
            await repo.apply(str(CLUB_OID), join_club(club, str(ALICE_OID)))


class TestMongoListingRepository:
    """Tests for MongoListingRepository"""

    @pytest.mark.asyncio
    async def test_concurrent_sale_is_conflict(self, collection):
        repo = MongoListingRepository(listing_collection=collection)
        listing = repo._document_to_entity(listing_document())
        collection.count_documents.return_value = 1

        with pytest.raises(ConflictError, match="already marked as sold"):
            await repo.apply(str(LISTING_OID), mark_as_sold(listing))

        query = collection.find_one_and_update.call_args[0][0]
        assert query == {"_id": LISTING_OID, "isAvailable": True}

    @pytest.mark.asyncio
    async def test_image_cap_guard(self, collection):
        repo = MongoListingRepository(listing_collection=collection)
        listing = repo._document_to_entity(listing_document())
        collection.count_documents.return_value = 1

        with pytest.raises(ValidationError, match="Maximum of 10 images"):
            await repo.apply(str(LISTING_OID), add_image(listing, "https://cdn.example.com/a.jpg"))

        query, update = collection.find_one_and_update.call_args[0][:2]
        assert query["imageUrls.9"] == {"$exists": False}
        assert update["$push"] == {"imageUrls": "https://cdn.example.com/a.jpg"}

    @pytest.mark.asyncio
    async def test_list_defaults_to_available_newest_first(self, collection):
        cursor = FakeCursor([listing_document()])
        collection.find = MagicMock(return_value=cursor)
        collection.count_documents.return_value = 1
        repo = MongoListingRepository(listing_collection=collection)

        listings, total = await repo.list(
            ListingFilter(category="furniture", min_price=5, max_price=10), PageRequest()
        )

        query = collection.find.call_args[0][0]
        assert query["isAvailable"] is True
        assert query["category"] == "furniture"
        assert query["price"] == {"$gte": 5, "$lte": 10}
        assert cursor.sort_spec[0] == ("createdAt", -1)
        assert isinstance(listings[0], MarketplaceListing)
        assert total == 1

    @pytest.mark.asyncio
    async def test_count_available_by_category(self, collection):
        collection.aggregate = MagicMock(return_value=FakeCursor([
            {"_id": "books", "count": 3},
            {"_id": "furniture", "count": 1},
        ]))
        repo = MongoListingRepository(listing_collection=collection)

        assert await repo.count_available_by_category() == {"books": 3, "furniture": 1}


class TestMongoPostRepository:
    """Tests for MongoPostRepository"""

    @pytest.mark.asyncio
    async def test_comment_pushed_as_sub_document(self, collection):
        repo = MongoPostRepository(post_collection=collection)
        post = repo._document_to_entity({"_id": POST_OID, "content": "Hello", "author": HOST_OID})
        comment_id = "64b7f0c2a1b2c3d4e5f600d1"
        mutation = add_comment(post, str(ALICE_OID), "Nice", comment_id, NOW)
        collection.find_one_and_update.return_value = {
            "_id": POST_OID,
            "content": "Hello",
            "author": HOST_OID,
            "comments": [
                {"_id": ObjectId(comment_id), "author": ALICE_OID, "content": "Nice", "createdAt": NOW}
            ],
        }

        saved = await repo.apply(str(POST_OID), mutation)

        update = collection.find_one_and_update.call_args[0][1]
        assert update["$push"]["comments"] == {
            "_id": ObjectId(comment_id),
            "author": ALICE_OID,
            "content": "Nice",
            "createdAt": NOW,
        }
        assert saved.comments[0].id == comment_id
        assert saved.comments[0].author_id == str(ALICE_OID)

    @pytest.mark.asyncio
    async def test_noop_mutation_skips_write(self, collection):
        repo = MongoPostRepository(post_collection=collection)
        post = repo._document_to_entity({"_id": POST_OID, "content": "Hello", "author": HOST_OID})

        result = await repo.apply(str(POST_OID), remove_comment(post, "64b7f0c2a1b2c3d4e5f600d1"))

        assert result is post
        collection.find_one_and_update.assert_not_called()

    @pytest.mark.asyncio
    async def test_apply_malformed_id_is_not_found(self, collection):
        repo = MongoPostRepository(post_collection=collection)
        post = repo._document_to_entity({"_id": POST_OID, "content": "Hello", "author": HOST_OID})

        with pytest.raises(NotFoundError, match="Post not found"):
            await repo.apply("bad", toggle_like(post, str(ALICE_OID)))


class TestEnsureIndexes:
    """Tests for startup index creation"""

    def test_unique_indexes(self):
        models = index_models()
        unique = {
            name: [index.document["name"] for index in indexes if index.document.get("unique")]
            for name, indexes in models.items()
        }
        assert unique["users"] == ["email_unique"]
        assert unique["clubs"] == ["name_unique"]

    @pytest.mark.asyncio
    async def test_failure_on_one_collection_does_not_stop_others(self):
        collections = {name: MagicMock() for name in index_models()}
        for collection in collections.values():
            collection.create_indexes = AsyncMock()
        collections["users"].create_indexes.side_effect = ServerSelectionTimeoutError("down")
        database = MagicMock()
        database.__getitem__.side_effect = lambda name: collections[name]

        await ensure_indexes(database)

        for collection in collections.values():
            collection.create_indexes.assert_awaited_once()
