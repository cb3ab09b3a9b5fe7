"""Database Bootstrap — create the target database, then run alembic migrations.

Invariants:
    - create_database is idempotent: an existing database is left untouched
    - migrate_database always runs to alembic head; known revisions are logged first
    - SQLite needs no database creation (the file is created on first connect)

Design Decisions:
    - Alembic scripts ship inside the package (recipes_data_provider/migrations) so
      startup migration works from an installed wheel, not only from a checkout
    - Alembic runs in a worker thread: env.py drives its own event loop with asyncio.run,
      which cannot nest inside the lifespan's loop
    - CREATE DATABASE under AUTOCOMMIT: PostgreSQL refuses it inside a transaction
"""

import asyncio
import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory
from sqlalchemy import text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import create_async_engine

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent.parent / "migrations"


def build_alembic_config(database_url: str) -> Config:
    """Alembic Config pointing at the packaged migrations for database_url."""
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    cfg.attributes["database_url"] = database_url
    return cfg


def list_migrations(cfg: Config) -> list[str]:
    """Revision ids known to the script directory, oldest first."""
    script = ScriptDirectory.from_config(cfg)
    return [rev.revision for rev in reversed(list(script.walk_revisions()))]


def _server_url(url: URL) -> URL:
    if url.get_backend_name() == "postgresql":
        return url.set(database="postgres")
    return url.set(database=None)


async def create_database(database_url: str, database_name: str) -> bool:
    """Create database_name on the server behind database_url. Returns True if created."""
    url = make_url(database_url)
    backend = url.get_backend_name()
    if backend == "sqlite":
        return False

    engine = create_async_engine(
        _server_url(url), isolation_level="AUTOCOMMIT",
    )
    try:
        async with engine.connect() as conn:
            quoted = conn.dialect.identifier_preparer.quote(database_name)
            if backend == "postgresql":
                exists = await conn.scalar(
                    text("SELECT 1 FROM pg_database WHERE datname = :name"),
                    {"name": database_name},
                )
                if exists:
                    return False
                await conn.execute(text(f"CREATE DATABASE {quoted}"))
            else:
                result = await conn.execute(
                    text(f"CREATE DATABASE IF NOT EXISTS {quoted}"),
                )
                if result.rowcount == 0:
                    return False
    finally:
        await engine.dispose()

    logger.info(f"Created database {database_name}")
    return True


async def migrate_database(database_url: str) -> list[str]:
    """Upgrade the schema to alembic head. Returns the known revision ids."""
    cfg = build_alembic_config(database_url)
    revisions = list_migrations(cfg)
    for revision in revisions:
        logger.info(f"Known migration {revision}")
    await asyncio.to_thread(command.upgrade, cfg, "head")
    logger.info("Database schema at head")
    return revisions


async def bootstrap_database(database_url: str, database_name: str) -> None:
    """Startup bootstrap: ensure the database exists and is migrated."""
    await create_database(database_url, database_name)
    await migrate_database(database_url)
