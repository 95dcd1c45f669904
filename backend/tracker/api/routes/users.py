"""Users & Exercises — create/list users, log exercises, read the filtered exercise log.

Invariants:
    - Form bodies validated by Pydantic before reaching the handler (400 on failure)
    - Unknown or malformed user id → NotFoundError (404), never StorageError
    - Any store fault → StorageError (500) with a per-route message, root cause hidden
    - Exercise dates persisted ISO, returned in calendar form

Design Decisions:
    - The store arrives through Depends(get_user_store); handlers hold no state
    - Malformed from/to/limit rejected with 400 instead of guessed at;
      empty values mean "not given"
"""

from contextlib import asynccontextmanager
from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Form, Query

from tracker.api.dependencies import get_user_store
from tracker.core.calendar_dates import format_calendar_date, parse_calendar_date
from tracker.core.errors import NotFoundError, StorageError, ValidationError
from tracker.core.exercise_log import build_exercise_log, present_exercise
from tracker.core.repository_protocols import UserLike, UserRepository
from tracker.schemas.user import (
    ExerciseAdded,
    ExerciseCreate,
    ExerciseLog,
    UserCreate,
    UserCreated,
    UserResponse,
)

router = APIRouter(prefix="/api/users", tags=["users"])


@asynccontextmanager
async def storage_failure(message: str):
    """Re-raise any store fault under this route's user-facing message."""
    try:
        yield
    except StorageError as e:
        raise StorageError(message, e.operation) from e


def _parse_user_id(raw: str) -> UUID:
    try:
        return UUID(raw)
    except ValueError:
        raise NotFoundError("User", raw) from None


def _parse_query_date(raw: str | None, name: str) -> date | None:
    if raw is None or not raw.strip():
        return None
    try:
        return parse_calendar_date(raw)
    except ValueError:
        raise ValidationError(f"Invalid '{name}' date: {raw!r}", field=name) from None


def _parse_limit(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValidationError(f"Invalid 'limit': {raw!r}", field="limit") from None
    if limit < 0:
        raise ValidationError("'limit' cannot be negative", field="limit")
    return limit


def _to_user_response(user: UserLike) -> UserResponse:
    return UserResponse(
        id=str(user.id),
        username=user.username,
        exercises=[present_exercise(entry) for entry in user.exercises],
    )


@router.post("", response_model=UserCreated)
async def create_user(
    body: Annotated[UserCreate, Form()],
    store: UserRepository = Depends(get_user_store),
):
    """Create a user with an empty exercise list."""
    async with storage_failure("Failed to create user"):
        user = await store.create(body.username)
    return UserCreated(id=str(user.id), username=user.username)


@router.get("", response_model=list[UserResponse])
async def list_users(store: UserRepository = Depends(get_user_store)):
    """List every user with embedded exercises."""
    async with storage_failure("Failed to retrieve users"):
        users = await store.list_all()
    return [_to_user_response(user) for user in users]


@router.post("/{user_id}/exercises", response_model=ExerciseAdded)
async def add_exercise(
    user_id: str,
    body: Annotated[ExerciseCreate, Form()],
    store: UserRepository = Depends(get_user_store),
):
    """Append an exercise to a user's log."""
    uid = _parse_user_id(user_id)
    exercise_date = body.date or date.today()
    entry = {
        "description": body.description,
        "duration": body.duration,
        "date": exercise_date.isoformat(),
    }
    async with storage_failure("Failed to add exercise"):
        user = await store.append_exercise(uid, entry)
    if user is None:
        raise NotFoundError("User", user_id)
    return ExerciseAdded(
        id=str(user.id),
        username=user.username,
        description=entry["description"],
        duration=entry["duration"],
        date=format_calendar_date(exercise_date),
    )


@router.get("/{user_id}/logs", response_model=ExerciseLog)
async def get_exercise_log(
    user_id: str,
    date_from: str | None = Query(None, alias="from"),
    date_to: str | None = Query(None, alias="to"),
    limit: str | None = Query(None),
    store: UserRepository = Depends(get_user_store),
):
    """Return the user's exercises filtered by from/to, truncated to limit."""
    uid = _parse_user_id(user_id)
    start = _parse_query_date(date_from, "from")
    end = _parse_query_date(date_to, "to")
    max_entries = _parse_limit(limit)
    async with storage_failure("Failed to retrieve logs"):
        user = await store.get(uid)
    if user is None:
        raise NotFoundError("User", user_id)
    log = build_exercise_log(user.exercises, start, end, max_entries)
    return ExerciseLog(
        id=str(user.id), username=user.username, count=len(log), log=log,
    )
