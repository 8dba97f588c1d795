"""SQLite database adapter implementing IDatabaseAdapter.

Uses SQLAlchemy with the async SQLite driver (aiosqlite).
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from trolly.core.interfaces import IDatabaseAdapter, IShoppingListRepository
from trolly.persistence.database import DATABASE_VERSION, create_engine, open_schema

from .repositories import SQLiteShoppingListRepository

logger = logging.getLogger(__name__)


class SQLiteDatabaseAdapter(IDatabaseAdapter):
    """SQLite implementation of the database adapter.

    Owns the one engine used by the process. SQLite serializes writers, so
    no further locking happens here.

    Usage:
        adapter = SQLiteDatabaseAdapter("sqlite+aiosqlite:///./trolly.db")
        await adapter.initialize()

        async with adapter.session() as session:
            result = await adapter.items(session).list()

        await adapter.close()
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        schema_version: int = DATABASE_VERSION,
    ):
        """Initialize the SQLite adapter.

        Args:
            database_url: SQLAlchemy database URL (sqlite+aiosqlite://...)
            echo: Enable SQL query logging
            schema_version: Version the schema is created or rebuilt at
        """
        self._database_url = database_url
        self._echo = echo
        self._schema_version = schema_version
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        """The underlying engine. Only available after initialize()."""
        if self._engine is None:
            raise RuntimeError("Database not initialized. Call initialize() first.")
        return self._engine

    async def initialize(self) -> None:
        """Open the database and create or rebuild the schema."""
        self._engine = create_engine(self._database_url, echo=self._echo)
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

        try:
            await open_schema(self._engine, self._schema_version)
        except Exception:
            await self.close()
            raise
        logger.info("Opened shopping list database at %s", self._database_url)

    async def close(self) -> None:
        """Close database connections."""
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None

    async def health_check(self) -> bool:
        """Check if database is accessible."""
        if not self._engine:
            return False
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception:
            logger.warning("Database health check failed", exc_info=True)
            return False

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Context manager for database sessions.

        Commits when the block exits cleanly, rolls back and re-raises
        otherwise.

        Usage:
            async with adapter.session() as session:
                count = await adapter.items(session).delete(item_id=3)
        """
        if not self._session_factory:
            raise RuntimeError("Database not initialized. Call initialize() first.")

        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    def items(self, session: AsyncSession) -> IShoppingListRepository:
        """Get the shopping list repository bound to ``session``."""
        return SQLiteShoppingListRepository(session)


async def get_database_adapter(database_url: str, echo: bool = False) -> SQLiteDatabaseAdapter:
    """Factory function to create and initialize a SQLite adapter.

    Args:
        database_url: SQLAlchemy database URL
        echo: Enable SQL query logging

    Returns:
        Initialized SQLiteDatabaseAdapter
    """
    adapter = SQLiteDatabaseAdapter(database_url, echo=echo)
    await adapter.initialize()
    return adapter
