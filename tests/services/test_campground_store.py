"""Campground Store — create/get/update/delete against a real (in-memory) database.

Invariants:
    - create then get_by_id (fresh session) returns equal fields
    - update_by_id replaces only supplied fields; unknown id returns None
    - delete_by_id on unknown id returns False and leaves the store unchanged
    - delete_orphan_reviews decides whether referenced reviews survive
"""

from uuid import uuid4

import pytest
from sqlalchemy import func, select

from yelpcamp.models.campground import Campground
from yelpcamp.models.review import Review
from yelpcamp.services.campground_store import CampgroundStore
from yelpcamp.services.review_store import ReviewStore

HILLTOP = {"title": "Hilltop", "description": "Nice view", "price": 20.0}


async def _count(session, model) -> int:
    return (await session.execute(select(func.count()).select_from(model))).scalar_one()


async def test_create_assigns_id_and_persists(test_db, test_session_factory):
    campground = await CampgroundStore(test_db).create(HILLTOP)
    assert campground.id is not None

    async with test_session_factory() as fresh:
        loaded = await CampgroundStore(fresh).get_by_id(campground.id)
    assert loaded is not None
    assert loaded.title == "Hilltop"
    assert loaded.description == "Nice view"
    assert loaded.price == 20.0
    assert loaded.review_ids == []


async def test_create_rejects_unknown_fields(test_db):
    with pytest.raises(ValueError):
        await CampgroundStore(test_db).create({**HILLTOP, "owner": "me"})
    assert await _count(test_db, Campground) == 0


async def test_list_returns_all_in_creation_order(test_db):
    store = CampgroundStore(test_db)
    await store.create({"title": "First", "price": 1})
    await store.create({"title": "Second", "price": 2})
    titles = [c.title for c in await store.list()]
    assert titles == ["First", "Second"]


async def test_get_by_id_unknown_returns_none(test_db):
    assert await CampgroundStore(test_db).get_by_id(uuid4()) is None


async def test_update_replaces_only_supplied_fields(test_db, test_session_factory):
    store = CampgroundStore(test_db)
    campground = await store.create(HILLTOP)

    updated = await store.update_by_id(campground.id, {"price": 35.0})
    assert updated is not None

    async with test_session_factory() as fresh:
        loaded = await CampgroundStore(fresh).get_by_id(campground.id)
    assert loaded.price == 35.0
    assert loaded.title == "Hilltop"
    assert loaded.description == "Nice view"


async def test_update_unknown_id_returns_none(test_db):
    assert await CampgroundStore(test_db).update_by_id(uuid4(), {"title": "X"}) is None


async def test_delete_removes_campground(test_db):
    store = CampgroundStore(test_db)
    campground = await store.create(HILLTOP)
    assert await store.delete_by_id(campground.id) is True
    assert await store.get_by_id(campground.id) is None


async def test_delete_unknown_id_leaves_store_unchanged(test_db):
    store = CampgroundStore(test_db)
    await store.create(HILLTOP)
    assert await store.delete_by_id(uuid4()) is False
    assert await _count(test_db, Campground) == 1


async def test_delete_keeps_reviews_orphaned_by_default(test_db):
    store = CampgroundStore(test_db)
    campground = await store.create(HILLTOP)
    review = await ReviewStore(test_db).create(campground.id, {"body": "Nice", "rating": 4})

    await store.delete_by_id(campground.id)

    assert await ReviewStore(test_db).get_by_id(review.id) is not None


async def test_delete_with_orphan_cleanup_removes_reviews(test_db):
    store = CampgroundStore(test_db, delete_orphan_reviews=True)
    campground = await store.create(HILLTOP)
    reviews = ReviewStore(test_db)
    await reviews.create(campground.id, {"body": "Nice", "rating": 4})
    await reviews.create(campground.id, {"body": "Windy", "rating": 2})

    assert await store.delete_by_id(campground.id) is True

    assert await _count(test_db, Review) == 0
