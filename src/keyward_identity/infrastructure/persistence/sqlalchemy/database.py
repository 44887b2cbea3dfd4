"""Engine, session and schema helpers for the identity database."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Import models to register them with IdentityBase.metadata
import keyward_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from keyward_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase

if TYPE_CHECKING:
    from keyward_config import Settings

logger = logging.getLogger(__name__)


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured PostgreSQL database."""
    return create_async_engine(
        settings.database_url,
        echo=False,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Provide one transaction per request.

    Commits when the block finishes, rolls back if it raises.
    """
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except BaseException:
            await session.rollback()
            raise


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all identity tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    """
    logger.info("Ensuring identity tables exist...")
    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.create_all)


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop all identity tables (USE WITH CAUTION!)."""
    logger.warning("Dropping identity tables...")
    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.drop_all)
