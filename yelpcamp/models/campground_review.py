"""CampgroundReview ORM — one entry of a campground's ordered review reference list.

Invariants:
    - (campground_id, review_id) is the primary key: a review appears once per list
    - position is maintained by ordering_list on Campground.review_links
    - review is lazy="raise": resolving the Review must be requested explicitly
"""

import uuid

from sqlalchemy import Integer, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from yelpcamp.db.base import Base


class CampgroundReview(Base):
    __tablename__ = "campground_reviews"

    campground_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("campgrounds.id", ondelete="CASCADE"),
        primary_key=True,
    )
    review_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("reviews.id", ondelete="CASCADE"), primary_key=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    campground: Mapped["Campground"] = relationship(
        "Campground", back_populates="review_links",
    )
    review: Mapped["Review"] = relationship("Review", lazy="raise")
