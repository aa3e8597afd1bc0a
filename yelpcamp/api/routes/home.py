"""Home page."""

from fastapi import APIRouter, Request

from yelpcamp.api.error_handlers import ErrorWrappingRoute
from yelpcamp.api.rendering import render

router = APIRouter(tags=["home"], route_class=ErrorWrappingRoute)


@router.get("/")
async def home(request: Request):
    return render(request, "home.html")
