"""Review ORM — a rating plus free text, owned independently of any campground."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Integer, Text, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from yelpcamp.db.base import Base


class Review(Base):
    __tablename__ = "reviews"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
