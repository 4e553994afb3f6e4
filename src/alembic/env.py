import os
from logging.config import fileConfig

from sqlalchemy import create_engine, pool
from sqlmodel import SQLModel

from alembic import context
from src.budget.core.config import get_settings
from src.budget.core.db import sync_database_url

# Import all models for metadata
from src.budget.models import Expense, Project, User  # noqa: F401

config = context.config

# Programmatic runs (tests, startup hooks) keep their own logging setup
if (
    config.config_file_name is not None
    and os.path.exists(config.config_file_name)
    and config.attributes.get("configure_logger", True)
):
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = SQLModel.metadata


def get_database_url() -> str:
    """Get database URL for migrations.

    An explicit URL passed through `config.attributes` wins, then the
    dedicated migrations URL, then the application URL.
    """
    explicit = config.attributes.get("database_url")
    if explicit:
        return explicit
    settings = get_settings()
    return settings.database_migrations_url or settings.database_url


def get_url() -> str:
    """Get sync database URL (async drivers are swapped for sync ones)."""
    return sync_database_url(get_database_url())


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    url = get_url()
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        # SQLite cannot ALTER most constraints in place
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode with sync engine."""
    connectable = create_engine(get_url(), poolclass=pool.NullPool)

    with connectable.connect() as connection:
        do_run_migrations(connection)

    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
