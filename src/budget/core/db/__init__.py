"""Database utilities - engine, session, migrations."""

from src.budget.core.db.engine import (
    dispose_engine,
    get_engine,
    set_engine,
    sync_database_url,
)
from src.budget.core.db.migrations import run_migrations_async, run_migrations_sync
from src.budget.core.db.session import get_session

__all__ = [
    # Engine (async)
    "dispose_engine",
    "get_engine",
    "set_engine",
    # Engine (sync - for Alembic)
    "sync_database_url",
    # Session
    "get_session",
    # Migrations
    "run_migrations_async",
    "run_migrations_sync",
]
