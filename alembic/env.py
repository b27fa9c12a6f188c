"""
Alembic environment for the inventory schema.
Migrations run on the sync driver that matches the configured async database URL.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from inventory_tracker.config import get_settings
from inventory_tracker.db import models  # noqa: F401 - registers users and inventory_items on the metadata
from inventory_tracker.db.base import Base
from inventory_tracker.db.session import sync_database_url

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata
database_url = sync_database_url(get_settings().database_url)


def run_migrations_offline() -> None:
    """Emit SQL to stdout instead of connecting."""
    context.configure(
        url=database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_engine(database_url, poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            # SQLite cannot ALTER constraints in place
            render_as_batch=connection.dialect.name == "sqlite",
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
