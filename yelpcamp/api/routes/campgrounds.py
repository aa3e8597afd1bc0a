"""Campground Routes — list, show, create, edit, update, delete.

Invariants:
    - Create and update payloads are validated before the store is touched
    - A missing campground is a ResourceNotFoundError raised here, never a None
      passed further down
    - Successful writes answer with 302 redirects

Design Decisions:
    - /new registered before /{campground_id}: static path wins even though
      "new" would also fail UUID parsing
    - get_campground_or_404 exported for reuse by the review routes
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse

from yelpcamp.api.dependencies import (
    get_campground_store, path_id, validated,
)
from yelpcamp.api.error_handlers import ErrorWrappingRoute
from yelpcamp.api.rendering import render
from yelpcamp.core.domain_types import CampgroundId, ShapeName
from yelpcamp.core.errors import ResourceNotFoundError
from yelpcamp.core.repository_protocols import CampgroundRepository
from yelpcamp.models.campground import Campground
from yelpcamp.schemas.campground import CampgroundCreate, CampgroundUpdate

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/campgrounds", tags=["campgrounds"], route_class=ErrorWrappingRoute,
)


def campground_url(campground_id: UUID) -> str:
    return f"/campgrounds/{campground_id}"


async def get_campground_or_404(
    store: CampgroundRepository, campground_id: UUID, populate: bool = False,
) -> Campground:
    """Get campground or raise 404. Exported for the review routes."""
    campground = await store.get_by_id(CampgroundId(campground_id), populate)
    if campground is None:
        raise ResourceNotFoundError("Campground", campground_id)
    return campground


@router.get("")
async def list_campgrounds(
    request: Request,
    store: CampgroundRepository = Depends(get_campground_store),
):
    campgrounds = await store.list()
    return render(request, "campgrounds/index.html", {"campgrounds": campgrounds})


@router.get("/new")
async def new_campground_form(request: Request):
    return render(request, "campgrounds/new.html")


@router.post("")
async def create_campground(
    fields: CampgroundCreate = Depends(validated(ShapeName.CAMPGROUND)),
    store: CampgroundRepository = Depends(get_campground_store),
):
    campground = await store.create(fields.model_dump())
    return RedirectResponse(
        campground_url(campground.id), status_code=status.HTTP_302_FOUND,
    )


@router.get("/{campground_id}")
async def show_campground(
    request: Request,
    campground_id: UUID,
    store: CampgroundRepository = Depends(get_campground_store),
):
    """Detail page with every review reference resolved."""
    campground = await get_campground_or_404(store, campground_id, populate=True)
    return render(request, "campgrounds/show.html", {"campground": campground})


@router.get("/{campground_id}/edit")
async def edit_campground_form(
    request: Request,
    campground_id: UUID,
    store: CampgroundRepository = Depends(get_campground_store),
):
    campground = await get_campground_or_404(store, campground_id)
    return render(request, "campgrounds/edit.html", {"campground": campground})


@router.put("/{campground_id}")
async def update_campground(
    campground_id: UUID = Depends(path_id("campground_id", "Campground")),
    fields: CampgroundUpdate = Depends(validated(ShapeName.CAMPGROUND_UPDATE)),
    store: CampgroundRepository = Depends(get_campground_store),
):
    campground = await store.update_by_id(
        CampgroundId(campground_id), fields.changes(),
    )
    if campground is None:
        raise ResourceNotFoundError("Campground", campground_id)
    return RedirectResponse(
        campground_url(campground.id), status_code=status.HTTP_302_FOUND,
    )


@router.delete("/{campground_id}")
async def delete_campground(
    campground_id: UUID,
    store: CampgroundRepository = Depends(get_campground_store),
):
    if not await store.delete_by_id(CampgroundId(campground_id)):
        raise ResourceNotFoundError("Campground", campground_id)
    return RedirectResponse("/campgrounds", status_code=status.HTTP_302_FOUND)
