"""Schema Validator — checks untyped payloads against named shapes.

Invariants:
    - validate() is pure: no IO, no mutation of the payload
    - Every violation becomes one "field: message" string
    - require_valid() raises PayloadValidationError with all messages joined by ","

Design Decisions:
    - Shapes are pydantic models looked up by ShapeName, not interpreted schema objects
      (ADR: constraints live in code, type checker sees them)
    - ValidationResult carries the typed value so routes never re-parse the payload
"""

from dataclasses import dataclass, field
from typing import Any, Iterable

from pydantic import BaseModel, ValidationError

from yelpcamp.core.domain_types import ShapeName
from yelpcamp.core.errors import ErrorContext, PayloadValidationError
from yelpcamp.schemas.campground import CampgroundPayload, CampgroundUpdatePayload
from yelpcamp.schemas.review import ReviewPayload

MESSAGE_DELIMITER = ","

# shape -> (envelope model, key holding the entity fields)
_SHAPES: dict[ShapeName, tuple[type[BaseModel], str]] = {
    ShapeName.CAMPGROUND: (CampgroundPayload, "campground"),
    ShapeName.CAMPGROUND_UPDATE: (CampgroundUpdatePayload, "campground"),
    ShapeName.REVIEW: (ReviewPayload, "review"),
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a shape check: a typed value, or field-level messages."""
    value: BaseModel | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def format_errors(errors: Iterable[dict[str, Any]]) -> list[str]:
    """Render pydantic/FastAPI error dicts as "field.path: message"."""
    messages = []
    for e in errors:
        location = ".".join(str(part) for part in e.get("loc", ()))
        messages.append(f"{location or 'payload'}: {e['msg']}")
    return messages


def validate(payload: Any, shape_name: ShapeName | str) -> ValidationResult:
    """Check payload against the named shape. Unknown shape names raise ValueError."""
    model, key = _SHAPES[ShapeName(shape_name)]
    try:
        parsed = model.model_validate(payload)
    except ValidationError as exc:
        return ValidationResult(errors=format_errors(exc.errors()))
    return ValidationResult(value=getattr(parsed, key))


def require_valid(
    payload: Any, shape_name: ShapeName | str, context: ErrorContext | None = None,
) -> BaseModel:
    """Return the typed value or raise PayloadValidationError (400)."""
    result = validate(payload, shape_name)
    if not result.ok:
        raise PayloadValidationError(
            result.errors, delimiter=MESSAGE_DELIMITER, context=context,
        )
    return result.value
