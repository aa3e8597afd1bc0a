"""Boundary Protocols — contracts between routes and the resource store.

Invariants:
    - Routes depend on these Protocols, never on a concrete store class
    - Lookups that can miss return None (or False for deletes); callers decide the 404

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Optional returns over raising inside the store: a missing entity is an expected
      outcome, and the type checker forces callers to handle it before use
"""

from typing import Any, Protocol, Sequence

from yelpcamp.core.domain_types import CampgroundId, ReviewId


class CampgroundRepository(Protocol):
    """Contract for campground persistence — implemented by services/."""
    async def list(self) -> Sequence[Any]: ...
    async def create(self, fields: dict) -> Any: ...
    async def get_by_id(
        self, campground_id: CampgroundId, populate: bool = False,
    ) -> Any | None: ...
    async def update_by_id(
        self, campground_id: CampgroundId, changes: dict,
    ) -> Any | None: ...
    async def delete_by_id(self, campground_id: CampgroundId) -> bool: ...


class ReviewRepository(Protocol):
    """Contract for review persistence — implemented by services/."""
    async def create(self, campground_id: CampgroundId, fields: dict) -> Any | None: ...
    async def get_by_id(self, review_id: ReviewId) -> Any | None: ...
    async def delete_by_id(
        self, campground_id: CampgroundId, review_id: ReviewId,
    ) -> bool: ...
