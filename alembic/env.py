"""
Alembic Migration Environment
===============================

What:  Configures Alembic to work with the async SQLAlchemy setup.
How:   Online migrations run on the same engine the application builds
       (hubs_api.database.build_engine), so SQLite gets its foreign key
       pragma and PostgreSQL its asyncpg driver without a second config.
       Offline mode renders SQL from Settings.database_url.
Who:   `alembic upgrade head`, `alembic revision --autogenerate`, ...
"""

import asyncio
from logging.config import fileConfig

from alembic import context

from hubs_api.config import settings
from hubs_api.database import Base, build_engine, dispose_engine

# Registers hubs, messages, adopters, and dogs with Base.metadata
from hubs_api import models  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# alembic.ini carries no URL; settings decide
config.set_main_option("sqlalchemy.url", settings.database_url)


def _configure_options() -> dict:
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        # SQLite cannot ALTER most constraints in place
        "render_as_batch": settings.is_sqlite,
    }


def run_migrations_offline() -> None:
    """Emit SQL to stdout without connecting to the database."""
    context.configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_options(),
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection) -> None:
    context.configure(connection=connection, **_configure_options())
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_online() -> None:
    engine = build_engine(settings)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await dispose_engine(engine)


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(_migrate_online())
