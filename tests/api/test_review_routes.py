"""Review Routes — add and remove reviews through the nested campground routes."""

from uuid import UUID, uuid4

from yelpcamp.services.campground_store import CampgroundStore
from yelpcamp.services.review_store import ReviewStore


async def _create_campground(client) -> UUID:
    res = await client.post(
        "/campgrounds",
        data={"campground[title]": "Hilltop", "campground[price]": "20"},
    )
    return UUID(res.headers["location"].rsplit("/", 1)[-1])


async def _review_ids(test_session_factory, campground_id):
    async with test_session_factory() as session:
        campground = await CampgroundStore(session).get_by_id(campground_id)
        return campground.review_ids


async def test_add_review_redirects_and_displays(client, test_session_factory):
    campground_id = await _create_campground(client)

    res = await client.post(
        f"/campgrounds/{campground_id}/reviews",
        data={"review[body]": "Quiet and clean", "review[rating]": "5"},
    )
    assert res.status_code == 302
    assert res.headers["location"] == f"/campgrounds/{campground_id}"

    assert len(await _review_ids(test_session_factory, campground_id)) == 1
    page = await client.get(f"/campgrounds/{campground_id}")
    assert "Quiet and clean" in page.text
    assert "No reviews yet." not in page.text


async def test_invalid_review_is_400_and_not_attached(client, test_session_factory):
    campground_id = await _create_campground(client)
    res = await client.post(
        f"/campgrounds/{campground_id}/reviews",
        data={"review[body]": "Too good", "review[rating]": "9"},
    )
    assert res.status_code == 400
    assert "review.rating" in res.text
    assert await _review_ids(test_session_factory, campground_id) == []


async def test_review_for_unknown_campground_is_404(client):
    res = await client.post(
        f"/campgrounds/{uuid4()}/reviews",
        data={"review[body]": "Ghost camp", "review[rating]": "3"},
    )
    assert res.status_code == 404


async def test_delete_review_removes_reference_and_entity(client, test_session_factory):
    campground_id = await _create_campground(client)
    await client.post(
        f"/campgrounds/{campground_id}/reviews",
        data={"review[body]": "Muddy", "review[rating]": "2"},
    )
    [review_id] = await _review_ids(test_session_factory, campground_id)

    res = await client.delete(f"/campgrounds/{campground_id}/reviews/{review_id}")
    assert res.status_code == 302
    assert res.headers["location"] == f"/campgrounds/{campground_id}"

    assert await _review_ids(test_session_factory, campground_id) == []
    async with test_session_factory() as session:
        assert await ReviewStore(session).get_by_id(review_id) is None


async def test_delete_unknown_review_is_404(client):
    campground_id = await _create_campground(client)
    res = await client.delete(f"/campgrounds/{campground_id}/reviews/{uuid4()}")
    assert res.status_code == 404


async def test_review_for_malformed_campground_id_with_invalid_body_is_404(client):
    res = await client.post(
        "/campgrounds/not-a-uuid/reviews", data={"review[rating]": "9"},
    )
    assert res.status_code == 404
