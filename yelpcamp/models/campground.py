"""Campground ORM — the listing aggregate; owns an ordered list of review references.

Invariants:
    - id is UUID primary key (client-side default)
    - title and price are non-nullable; other attributes default to ""
    - review_links is ordered by position (insertion order) and always loaded
    - Deleting a campground deletes its reference rows, never the reviews themselves

Design Decisions:
    - Association object (CampgroundReview) instead of a bare secondary table:
      keeps the list ordered via ordering_list
    - review_links lazy="selectin": reference ids are always available without
      implicit IO in async context; resolving the Review rows is opt-in (populate)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Float, DateTime, Uuid
from sqlalchemy.ext.associationproxy import AssociationProxy, association_proxy
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import Mapped, mapped_column, relationship

from yelpcamp.db.base import Base
from yelpcamp.models.campground_review import CampgroundReview

EDITABLE_FIELDS = ("title", "description", "price", "location", "image")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Campground(Base):
    """Campground listing."""
    __tablename__ = "campgrounds"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    location: Mapped[str] = mapped_column(
        String(255), nullable=False, default="",
    )
    image: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
        onupdate=_utcnow,
    )

    review_links: Mapped[list[CampgroundReview]] = relationship(
        CampgroundReview, back_populates="campground",
        order_by=CampgroundReview.position,
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan", lazy="selectin",
    )
    reviews: AssociationProxy[list["Review"]] = association_proxy(
        "review_links", "review",
    )

    @property
    def review_ids(self) -> list[uuid.UUID]:
        return [link.review_id for link in self.review_links]
