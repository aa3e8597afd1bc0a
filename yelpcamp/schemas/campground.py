"""Campground Schemas — field-level constraints for create and update payloads.

Invariants:
    - CampgroundCreate.title: 1-200 chars, stripped, non-empty
    - price is a finite number >= 0
    - CampgroundUpdate requires at least one field; present fields obey create rules

Design Decisions:
    - Envelope models (CampgroundPayload) mirror the form layout campground[title]=...
      so field messages read "campground.title: ..."
    - field_validator for side-effect-free transforms (strip) — keeps models pure
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from yelpcamp.core.domain_types import TITLE_MAX_LENGTH


def _strip_title(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("title cannot be empty or whitespace")
    return v


class CampgroundCreate(BaseModel):
    """New campground — title and price required."""
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    price: float = Field(ge=0, allow_inf_nan=False)
    description: str = ""
    location: str = ""
    image: str = ""

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_title(v)


class CampgroundUpdate(BaseModel):
    """Partial campground update — only supplied fields are replaced."""
    title: str | None = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    price: float | None = Field(None, ge=0, allow_inf_nan=False)
    description: str | None = None
    location: str | None = None
    image: str | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return _strip_title(v)

    @model_validator(mode="after")
    def require_any_field(self):
        if not self.changes():
            raise ValueError("update requires at least one campground field")
        return self

    def changes(self) -> dict:
        """Fields the client actually supplied."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class CampgroundPayload(BaseModel):
    campground: CampgroundCreate


class CampgroundUpdatePayload(BaseModel):
    campground: CampgroundUpdate
