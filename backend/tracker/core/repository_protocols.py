"""Boundary Protocols — contracts between the route handlers and the document store.

Invariants:
    - Handlers depend on UserRepository, never on the SQLAlchemy implementation
    - Every repository method raises StorageError on infrastructure failure
    - get() returns None for an unknown user; absence is not a storage failure

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol
from uuid import UUID


class UserLike(Protocol):
    """Structural contract for persisted user documents."""
    id: UUID
    username: str
    exercises: list[dict]


class UserRepository(Protocol):
    """Contract for user document persistence — implemented by infrastructure."""
    async def create(self, username: str) -> UserLike: ...
    async def list_all(self) -> list[UserLike]: ...
    async def get(self, user_id: UUID) -> UserLike | None: ...
    async def append_exercise(
        self, user_id: UUID, exercise: dict,
    ) -> UserLike | None: ...
    async def ping(self) -> bool: ...
