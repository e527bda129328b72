"""Alembic environment — migrates the usage_counter database.

The URL comes from the application Settings (DATABASE_URL / .env), so
migrations and the running service always target the same database and share
the postgresql:// → postgresql+asyncpg:// rewrite. alembic.ini's
sqlalchemy.url is only the fallback when no setting overrides it.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

from weightrange.config import Settings
from weightrange.db.base import Base
from weightrange.models.usage_counter import UsageCounterRow  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def _database_url() -> str:
    """DATABASE_URL from the environment wins; alembic.ini is the fallback."""
    settings = Settings()
    if "database_url" in settings.model_fields_set:
        return settings.database_url
    return Settings(database_url=config.get_main_option("sqlalchemy.url")).database_url


def _configure_and_run(**kwargs) -> None:
    context.configure(
        target_metadata=target_metadata,
        render_as_batch=True,  # SQLite needs batch mode for ALTER TABLE
        **kwargs,
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_sync(connection: Connection) -> None:
    _configure_and_run(connection=connection)


async def _run_online() -> None:
    engine = create_async_engine(_database_url(), poolclass=pool.NullPool)
    async with engine.connect() as connection:
        await connection.run_sync(_run_sync)
    await engine.dispose()


if context.is_offline_mode():
    _configure_and_run(
        url=_database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
else:
    asyncio.run(_run_online())
