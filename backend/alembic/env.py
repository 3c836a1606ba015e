"""
Alembic environment for the campus data schema.

The connection string comes from campusdata settings (DATABASE_URL), so the
API and its migrations always target the same database. Pass `-x url=...`
to migrate a different one, e.g. a staging copy:

    alembic -x url=postgresql+asyncpg://... upgrade head
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool
from alembic import context

from campusdata.config import settings
from campusdata.database import Base

# Populates Base.metadata with every campus table
import campusdata.models  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)


def database_url() -> str:
    return context.get_x_argument(as_dictionary=True).get("url", settings.database_url)


def configure(**options) -> None:
    # compare_type lets --autogenerate notice column type changes (e.g. BIGINT ids)
    context.configure(target_metadata=Base.metadata, compare_type=True, **options)


def run_offline() -> None:
    """Write the migration SQL to stdout instead of executing it."""
    configure(
        url=database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def migrate(connection: Connection) -> None:
    configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def run_online() -> None:
    engine = create_async_engine(database_url(), poolclass=NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_offline()
else:
    asyncio.run(run_online())
