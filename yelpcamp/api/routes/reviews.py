"""Review Routes — nested under a campground: add and remove.

Invariants:
    - Review payloads are validated before the store is touched
    - Both routes redirect back to the campground detail page
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse

from yelpcamp.api.dependencies import get_review_store, path_id, validated
from yelpcamp.api.error_handlers import ErrorWrappingRoute
from yelpcamp.api.routes.campgrounds import campground_url
from yelpcamp.core.domain_types import CampgroundId, ReviewId, ShapeName
from yelpcamp.core.errors import ResourceNotFoundError
from yelpcamp.core.repository_protocols import ReviewRepository
from yelpcamp.schemas.review import ReviewCreate

router = APIRouter(
    prefix="/campgrounds/{campground_id}/reviews", tags=["reviews"],
    route_class=ErrorWrappingRoute,
)


@router.post("")
async def create_review(
    campground_id: UUID = Depends(path_id("campground_id", "Campground")),
    fields: ReviewCreate = Depends(validated(ShapeName.REVIEW)),
    store: ReviewRepository = Depends(get_review_store),
):
    review = await store.create(CampgroundId(campground_id), fields.model_dump())
    if review is None:
        raise ResourceNotFoundError("Campground", campground_id)
    return RedirectResponse(
        campground_url(campground_id), status_code=status.HTTP_302_FOUND,
    )


@router.delete("/{review_id}")
async def delete_review(
    campground_id: UUID,
    review_id: UUID,
    store: ReviewRepository = Depends(get_review_store),
):
    deleted = await store.delete_by_id(
        CampgroundId(campground_id), ReviewId(review_id),
    )
    if not deleted:
        raise ResourceNotFoundError("Review", review_id)
    return RedirectResponse(
        campground_url(campground_id), status_code=status.HTTP_302_FOUND,
    )
