"""Database engine creation and schema versioning."""

import logging

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from trolly.core.exceptions import SchemaDowngradeError

from .models import Base, ShoppingListItem

logger = logging.getLogger(__name__)

# Stored in PRAGMA user_version. Bumping it rebuilds the table from scratch.
DATABASE_VERSION = 2


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create the async engine with SQLite connection pragmas installed."""
    engine = create_async_engine(
        database_url,
        echo=echo,
        future=True,
        connect_args={"timeout": 30},  # Wait up to 30s for database locks
    )

    # WAL lets readers run while a single writer holds the lock
    @event.listens_for(engine.sync_engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA synchronous=NORMAL")
        cursor.execute("PRAGMA busy_timeout=30000")
        cursor.close()

    return engine


async def get_schema_version(engine: AsyncEngine) -> int:
    """Read the schema version stamped in the database file."""
    async with engine.connect() as conn:
        result = await conn.execute(text("PRAGMA user_version"))
        return int(result.scalar_one())


async def open_schema(engine: AsyncEngine, version: int = DATABASE_VERSION) -> None:
    """Create the schema, or rebuild it when the stored version is older.

    An older version drops the table and all of its rows. A newer version
    raises ``SchemaDowngradeError`` and leaves the file untouched.
    """
    if version < 1:
        raise ValueError(f"Version must be >= 1, was {version}")

    async with engine.begin() as conn:
        result = await conn.execute(text("PRAGMA user_version"))
        current = int(result.scalar_one())
        if current == version:
            return
        if current > version:
            raise SchemaDowngradeError(current, version)

        if current == 0:
            logger.info("Creating %s table at version %s", ShoppingListItem.__tablename__, version)
            await conn.run_sync(Base.metadata.create_all)
        else:
            logger.warning(
                "Upgrading database from version %s to %s, which will destroy all old data",
                current,
                version,
            )
            await conn.run_sync(ShoppingListItem.__table__.drop, checkfirst=True)
            await conn.run_sync(Base.metadata.create_all)

        # PRAGMA does not accept bound parameters
        await conn.execute(text(f"PRAGMA user_version = {int(version)}"))
