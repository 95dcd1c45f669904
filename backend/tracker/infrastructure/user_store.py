"""User Store — UserRepository over SQLAlchemy; one row per user document.

Invariants:
    - Each method runs in its own session and commits before returning
    - append_exercise returns None when the user does not exist (caller decides 404)
    - Exercise order in the JSON array is insertion order

Design Decisions:
    - Read-modify-write of the whole exercises array, guarded by the row version:
      a save that lost the race is re-read and re-applied, up to
      MAX_APPEND_ATTEMPTS times
"""

import logging
from uuid import UUID

from sqlalchemy import select

from tracker.core.errors import ConcurrentUpdateError
from tracker.infrastructure.database import DatabaseSessionManager
from tracker.models.user import User

logger = logging.getLogger(__name__)

MAX_APPEND_ATTEMPTS = 20


class SqlUserStore:
    """UserRepository implementation backed by DatabaseSessionManager."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def create(self, username: str) -> User:
        async with self._db.session("create") as db:
            user = User(username=username, exercises=[])
            db.add(user)
            await db.commit()
            await db.refresh(user)
        logger.info(
            f"Created user {username!r}", extra={"user_id": str(user.id)},
        )
        return user

    async def list_all(self) -> list[User]:
        async with self._db.session("find_all") as db:
            result = await db.execute(
                select(User).order_by(User.created_at),
            )
            return list(result.scalars().all())

    async def get(self, user_id: UUID) -> User | None:
        async with self._db.session("find_by_id") as db:
            result = await db.execute(select(User).where(User.id == user_id))
            return result.scalar_one_or_none()

    async def append_exercise(
        self, user_id: UUID, exercise: dict,
    ) -> User | None:
        for attempt in range(1, MAX_APPEND_ATTEMPTS + 1):
            try:
                user = await self._append_once(user_id, exercise)
            except ConcurrentUpdateError:
                if attempt == MAX_APPEND_ATTEMPTS:
                    raise
                logger.info(
                    f"Append lost a version race, retrying ({attempt})",
                    extra={"user_id": str(user_id), "operation": "save"},
                )
                continue
            if user is not None:
                logger.info(
                    f"Logged exercise for user {user.username!r}",
                    extra={"user_id": str(user_id)},
                )
            return user

    async def _append_once(self, user_id: UUID, exercise: dict) -> User | None:
        async with self._db.session("save") as db:
            result = await db.execute(select(User).where(User.id == user_id))
            user = result.scalar_one_or_none()
            if user is None:
                return None
            user.exercises = [*user.exercises, exercise]
            await db.commit()
        return user

    async def ping(self) -> bool:
        return await self._db.health_check()
