"""ORM Models — SQLAlchemy declarative models for campgrounds and reviews.

Invariants:
    - All models inherit from Base (db/base.py)
    - Campground is the aggregate root; reviews are attached through CampgroundReview

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (ADR: standard SQLAlchemy pattern)
"""

from yelpcamp.models.campground_review import CampgroundReview  # noqa: F401
from yelpcamp.models.campground import Campground  # noqa: F401
from yelpcamp.models.review import Review  # noqa: F401
