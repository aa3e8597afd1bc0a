"""Review Store — create and delete reviews together with their campground reference.

Invariants:
    - create() persists the Review and the appended reference in one commit
    - delete_by_id() removes the reference and the Review in one commit
    - A review is only deletable through the campground that references it
    - Nothing is written when the campground or review does not resolve

Design Decisions:
    - Single transaction instead of two independent writes: the session rolls both
      sides back on failure (infrastructure/database.py), so a campground never
      lists a review id that does not exist
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from yelpcamp.core.domain_types import CampgroundId, ReviewId
from yelpcamp.models.campground_review import CampgroundReview
from yelpcamp.models.review import Review
from yelpcamp.services.campground_store import CampgroundStore

logger = logging.getLogger(__name__)


class ReviewStore:
    """Persistence operations for reviews attached to a campground."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self._campgrounds = CampgroundStore(db)

    async def get_by_id(self, review_id: ReviewId) -> Review | None:
        return await self.db.get(Review, review_id)

    async def create(
        self, campground_id: CampgroundId, fields: dict,
    ) -> Review | None:
        """Create a review and append it to the campground. None if no such campground."""
        campground = await self._campgrounds.get_by_id(campground_id)
        if campground is None:
            return None
        review = Review(**fields)
        self.db.add(review)
        campground.review_links.append(CampgroundReview(review=review))
        await self.db.commit()
        logger.info(
            "Review created",
            extra={
                "campground_id": str(campground_id),
                "review_id": str(review.id),
            },
        )
        return review

    async def delete_by_id(
        self, campground_id: CampgroundId, review_id: ReviewId,
    ) -> bool:
        campground = await self._campgrounds.get_by_id(campground_id)
        if campground is None:
            return False
        link = next(
            (l for l in campground.review_links if l.review_id == review_id),
            None,
        )
        if link is None:
            return False
        review = await self.get_by_id(review_id)
        campground.review_links.remove(link)
        if review is not None:
            await self.db.delete(review)
        await self.db.commit()
        logger.info(
            "Review deleted",
            extra={
                "campground_id": str(campground_id),
                "review_id": str(review_id),
            },
        )
        return True
