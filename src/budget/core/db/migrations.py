"""Reusable migration runner for both production and tests."""

import asyncio
from pathlib import Path

from alembic import command
from alembic.config import Config

# Repository root: src/budget/core/db/migrations.py -> parents[4]
PROJECT_ROOT = Path(__file__).resolve().parents[4]


def get_alembic_config(database_url: str | None = None) -> Config:
    """Build the Alembic config, optionally pinning the database URL."""
    alembic_cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(PROJECT_ROOT / "src" / "alembic"))
    alembic_cfg.attributes["configure_logger"] = False
    if database_url is not None:
        alembic_cfg.attributes["database_url"] = database_url
    return alembic_cfg


def run_migrations_sync(database_url: str | None = None, revision: str = "head") -> None:
    """Run Alembic migrations synchronously."""
    command.upgrade(get_alembic_config(database_url), revision)


def downgrade_sync(database_url: str | None = None, revision: str = "base") -> None:
    command.downgrade(get_alembic_config(database_url), revision)


async def run_migrations_async(database_url: str | None = None) -> None:
    """Run Alembic migrations from async context.

    Alembic is synchronous, so it runs in a worker thread.
    """
    await asyncio.to_thread(run_migrations_sync, database_url)
