"""
Lambda Hubs API — Database Engine & Sessions
==============================================

What:  Async SQLAlchemy engine and session factory builders.
Why:   Centralizes all database connection logic in one place.
How:   The app factory builds one engine per application and hands the
       session factory to the services; nothing here is module-global.
When:  Engine is created when an app is assembled; sessions per service call.

Connection Pooling Strategy:
    PostgreSQL (asyncpg): QueuePool sized from settings, pre-ping enabled,
    connections recycled hourly.
    SQLite (aiosqlite):   a single StaticPool connection so that an in-memory
    database is shared by every session; foreign keys switched on per
    connection because SQLite leaves them off by default.
"""

from typing import Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from hubs_api.config import Settings, settings as default_settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models inherit from this class so that they share one metadata
    object (used by Alembic autogenerate and by `create_tables`).
    """
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(settings: Optional[Settings] = None) -> AsyncEngine:
    """
    Create the async engine for the configured database URL.

    Pool arguments only apply to server databases; SQLite gets a StaticPool
    and foreign key enforcement instead.
    """
    settings = settings or default_settings
    echo = settings.log_level == "DEBUG"

    if settings.is_sqlite:
        engine = create_async_engine(
            settings.database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=echo,
        )
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_async_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
        echo=echo,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: rows stay readable after the service commits
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """Create any missing tables from the ORM metadata (no-op when present)."""
    # Registers every model with Base.metadata
    from hubs_api import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine(engine: AsyncEngine) -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
