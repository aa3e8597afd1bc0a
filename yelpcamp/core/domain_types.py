"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CampgroundId, ReviewId wrap UUIDs — never use bare UUID in store signatures
    - Review ratings are bounded RATING_MIN..RATING_MAX
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log records without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

CampgroundId = NewType("CampgroundId", UUID)
ReviewId = NewType("ReviewId", UUID)


# ─── Value Bounds ────────────────────────────────────────────────

RATING_MIN = 1
RATING_MAX = 5
TITLE_MAX_LENGTH = 200


# ─── Enums ───────────────────────────────────────────────────────

class ShapeName(str, Enum):
    """Named payload shapes known to the validator."""
    CAMPGROUND = "campground"
    CAMPGROUND_UPDATE = "campground_update"
    REVIEW = "review"


class RequestPhase(str, Enum):
    """Per-request lifecycle: received -> validating -> executing -> responding | failed."""
    RECEIVED = "received"
    VALIDATING = "validating"
    EXECUTING = "executing"
    RESPONDING = "responding"
    FAILED = "failed"
