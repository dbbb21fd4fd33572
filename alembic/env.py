"""
Alembic environment for the container store.

Migrations run against the same aiosqlite database the API uses (DB_URL,
falling back to ./containers.db). SQLite cannot ALTER most columns in
place, so every migration is rendered in batch mode, which rebuilds the
table instead.
"""

import asyncio
import os
from logging.config import fileConfig

from alembic import context
from dotenv import load_dotenv
from sqlalchemy.engine import Connection

from app.core.db.base import Base
from app.core.db.engine import build_engine
from app.modules.containers.models import Container  # noqa: F401

DEFAULT_DB_URL = "sqlite+aiosqlite:///./containers.db"

load_dotenv()

config = context.config
config.set_main_option("sqlalchemy.url", os.getenv("DB_URL") or DEFAULT_DB_URL)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

MIGRATION_OPTIONS = {
    "target_metadata": target_metadata,
    "compare_type": True,
    "compare_server_default": True,
    "render_as_batch": True,
}


def run_migrations_offline() -> None:
    """Emit the migration SQL to stdout without opening the database."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **MIGRATION_OPTIONS,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, **MIGRATION_OPTIONS)

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """
    Apply migrations over an aiosqlite connection.
    The engine comes from build_engine so WAL and busy_timeout match the API.
    """
    url = config.get_main_option("sqlalchemy.url")
    if not url.startswith("sqlite"):
        raise RuntimeError(f"Only SQLite databases are supported, got {url!r}")

    connectable = build_engine(url)

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
