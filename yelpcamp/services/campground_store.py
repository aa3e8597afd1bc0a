"""Campground Store — list/create/get/update/delete for Campground.

Invariants:
    - get_by_id/update_by_id return None for an unknown id (never a half-built object)
    - update_by_id replaces only the supplied fields
    - delete_by_id on an unknown id returns False and writes nothing
    - populate=True resolves every review reference into its Review row

Design Decisions:
    - New campgrounds start with an explicit empty review list so the collection
      is loaded and never triggers implicit IO later
    - delete_orphan_reviews is a constructor flag, read from settings by the caller
      (ADR: cascade on campground delete is a deployment decision, default off)
"""

import logging
from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from yelpcamp.core.domain_types import CampgroundId
from yelpcamp.models.campground import Campground, EDITABLE_FIELDS
from yelpcamp.models.campground_review import CampgroundReview
from yelpcamp.models.review import Review

logger = logging.getLogger(__name__)


class CampgroundStore:
    """Persistence operations for campgrounds."""

    def __init__(self, db: AsyncSession, delete_orphan_reviews: bool = False):
        self.db = db
        self.delete_orphan_reviews = delete_orphan_reviews

    async def list(self) -> Sequence[Campground]:
        result = await self.db.execute(
            select(Campground).order_by(Campground.created_at.asc()),
        )
        return result.scalars().all()

    async def create(self, fields: dict) -> Campground:
        """Persist a new campground and return it with its assigned id."""
        _check_fields(fields)
        campground = Campground(**fields, review_links=[])
        self.db.add(campground)
        await self.db.commit()
        logger.info(
            "Campground created", extra={"campground_id": str(campground.id)},
        )
        return campground

    async def get_by_id(
        self, campground_id: CampgroundId, populate: bool = False,
    ) -> Campground | None:
        query = select(Campground).where(Campground.id == campground_id)
        if populate:
            query = query.options(
                selectinload(Campground.review_links)
                .selectinload(CampgroundReview.review),
            ).execution_options(populate_existing=True)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def update_by_id(
        self, campground_id: CampgroundId, changes: dict,
    ) -> Campground | None:
        """Replace the supplied fields in place. None when the id does not resolve."""
        _check_fields(changes)
        campground = await self.get_by_id(campground_id)
        if campground is None:
            return None
        for name, value in changes.items():
            setattr(campground, name, value)
        await self.db.commit()
        logger.info(
            "Campground updated",
            extra={"campground_id": str(campground_id)},
        )
        return campground

    async def delete_by_id(self, campground_id: CampgroundId) -> bool:
        campground = await self.get_by_id(campground_id)
        if campground is None:
            return False
        review_ids = campground.review_ids
        await self.db.delete(campground)
        if self.delete_orphan_reviews and review_ids:
            # reference rows must be gone before the reviews they point at
            await self.db.flush()
            await self.db.execute(delete(Review).where(Review.id.in_(review_ids)))
        await self.db.commit()
        logger.info(
            "Campground deleted",
            extra={
                "campground_id": str(campground_id),
                "orphaned_reviews": 0 if self.delete_orphan_reviews else len(review_ids),
            },
        )
        return True


def _check_fields(fields: dict) -> None:
    unknown = set(fields) - set(EDITABLE_FIELDS)
    if unknown:
        raise ValueError(f"Unknown campground fields: {', '.join(sorted(unknown))}")
