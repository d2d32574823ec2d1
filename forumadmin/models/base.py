"""Database base and store handle."""
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from config import StoreConfig

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class StoreConnectionError(RuntimeError):
    """The record store could not be reached or initialized."""


class Store:
    """Handle to an open record store. Hands out short-lived sessions."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    def session(self) -> AsyncSession:
        """New session. Use: async with store.session() as session: ..."""
        return self._session_factory()

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()


async def connect(store_config: StoreConfig) -> Store:
    """Open the store and create any missing tables.

    Raises StoreConnectionError if the URL is unusable (bad syntax, driver
    not installed) or the database is unreachable.
    """
    engine = None
    try:
        engine = create_async_engine(store_config.database_url, echo=store_config.echo)
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except Exception as e:
        if engine is not None:
            await engine.dispose()
        raise StoreConnectionError(str(e)) from e
    logger.info("Connected to %s", engine.url.render_as_string(hide_password=True))
    return Store(engine)
