"""User ORM — one document per tracked individual, exercises embedded.

Invariants:
    - id is UUID primary key, assigned on insert, never updated
    - username is non-nullable text, not unique
    - exercises is a JSON array of {description, duration, date(ISO)} in log order

Design Decisions:
    - JSON column for exercises: the user owns its entries outright (composition),
      so they live inside the user row rather than in a child table
    - exercises reassigned, never mutated in place: plain JSON columns do not
      track in-place list changes
    - version_id_col: every save checks the version it read, so an append
      racing another append fails with StaleDataError instead of overwriting it
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tracker.db.base import Base


class User(Base):
    """User document — owns its exercise entries."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(Text, nullable=False)
    exercises: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}
