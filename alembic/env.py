"""
Alembic migration environment for the analyses store.

The URL comes from alembic.ini when one is set there (tests point it at a
scratch file), otherwise from RESUMEROVER_DATABASE_URL via the app settings.
Online runs connect through the app's own engine so SQLite gets the same
pragmas it has at runtime.
"""
from logging.config import fileConfig

from alembic import context

from resumerover import models  # noqa: F401
from resumerover.config import settings
from resumerover.database import Base, create_app_engine

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata
database_url = config.get_main_option("sqlalchemy.url") or settings.database_url


def run_migrations_offline() -> None:
    """Emit the migration SQL without connecting."""
    context.configure(
        url=database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_app_engine(database_url)

    with connectable.connect() as connection:
        # SQLite can't ALTER most constraints, so column changes go through batch mode
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=True,
        )

        with context.begin_transaction():
            context.run_migrations()

    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
