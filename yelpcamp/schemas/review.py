"""Review Schemas — body text and bounded rating.

Invariants:
    - body is stripped and non-empty
    - rating is an integer within RATING_MIN..RATING_MAX
"""

from pydantic import BaseModel, Field, field_validator

from yelpcamp.core.domain_types import RATING_MIN, RATING_MAX


class ReviewCreate(BaseModel):
    body: str = Field(min_length=1, max_length=5_000)
    rating: int = Field(ge=RATING_MIN, le=RATING_MAX)

    @field_validator("body")
    @classmethod
    def strip_body(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("body cannot be empty or whitespace")
        return v


class ReviewPayload(BaseModel):
    review: ReviewCreate
