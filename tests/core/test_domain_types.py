"""Domain Types — verifies identity wrappers, bounds and enum values."""

from uuid import uuid4

from yelpcamp.core.domain_types import (
    CampgroundId, ReviewId, RATING_MIN, RATING_MAX, RequestPhase, ShapeName,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert CampgroundId(uid) == uid
    assert ReviewId(uid) == uid


def test_rating_bounds():
    assert (RATING_MIN, RATING_MAX) == (1, 5)


def test_shape_names():
    assert {s.value for s in ShapeName} == {"campground", "campground_update", "review"}


def test_request_phases_cover_lifecycle():
    assert [p.value for p in RequestPhase] == [
        "received", "validating", "executing", "responding", "failed",
    ]
