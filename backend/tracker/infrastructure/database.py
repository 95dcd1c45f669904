"""Database Session Manager — async engine, per-operation sessions, automatic rollback.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to StorageError (core/errors.py)
    - Version conflicts (StaleDataError) mapped to ConcurrentUpdateError so callers can retry
    - One manager per application, created in lifespan and disposed on shutdown

Design Decisions:
    - No module-level singleton: the manager is passed to the store explicitly
    - Pool sizing only applied to server databases; SQLite uses the dialect's own pool
    - expire_on_commit=False: returned ORM objects stay readable after the session closes
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.orm.exc import StaleDataError

from tracker.core.errors import ConcurrentUpdateError, StorageError
from tracker.db.base import Base

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(
        self, operation: str = "query",
    ) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback; store faults surface as StorageError."""
        session = self._session_factory()
        try:
            yield session
        except StaleDataError as e:
            await session.rollback()
            logger.warning(
                f"DB version conflict: {e}", extra={"operation": operation},
            )
            raise ConcurrentUpdateError(operation) from e
        except IntegrityError as e:
            await session.rollback()
            logger.error(
                f"DB integrity error: {e}", extra={"operation": operation},
            )
            raise StorageError("Integrity constraint violated", operation) from e
        except OperationalError as e:
            await session.rollback()
            logger.error(
                f"DB operational error: {e}", extra={"operation": operation},
            )
            raise StorageError("Connection or operational error", operation) from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(
                f"DB driver error: {e}", extra={"operation": operation},
            )
            raise StorageError("Database driver error", operation) from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(
                f"SQLAlchemy error: {e}", extra={"operation": operation},
            )
            raise StorageError("Database operation failed", operation) from e
        finally:
            await session.close()

    async def create_all(self) -> None:
        """Create missing tables. No migrations: the schema is created, never altered."""
        import tracker.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for the readiness check)."""
        try:
            async with self.session("ping") as db:
                await db.execute(text("SELECT 1"))
            return True
        except StorageError:
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()
