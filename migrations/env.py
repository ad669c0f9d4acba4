"""Alembic environment configuration for the webhooks API.

Alembic takes the database URL from ``app.config.settings`` unless
``alembic.ini`` sets one, and diffs against ``Base.metadata`` for
autogenerate. An existing connection can be handed in through
``config.attributes["connection"]``, which is how in-memory SQLite
databases get migrated.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from app.database import Base

# Ensure all models are imported so Base.metadata is populated.
from app.models import Team, User, Webhook  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _get_url() -> str:
    """Return the database URL, preferring alembic.ini over application settings."""
    url = config.get_main_option("sqlalchemy.url")
    if url:
        return url
    from app.config import settings

    return settings.database_url


def run_migrations_offline() -> None:
    """Emit the migration SQL for a URL without connecting."""
    context.configure(
        url=_get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations against a live connection (passed in or newly created)."""
    connectable = config.attributes.get("connection", None)

    if connectable is not None:
        context.configure(connection=connectable, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()
        return

    configuration = config.get_section(config.config_ini_section, {})
    configuration["sqlalchemy.url"] = _get_url()
    connectable = engine_from_config(configuration, prefix="sqlalchemy.", poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
