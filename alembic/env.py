"""
Alembic environment for the ledger database.

The database URL comes from the application settings (DATABASE_URL).
"""
from logging.config import fileConfig

from alembic import context

from medchain.config import settings
from medchain.database import Base, build_engine
from medchain.identity import models as identity_models  # noqa: F401
from medchain.records import models as records_models  # noqa: F401
from medchain.access import models as access_models  # noqa: F401
from medchain.audit import models as audit_models  # noqa: F401
from medchain.core import state  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=settings.database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = build_engine(settings.database_url)
    with engine.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
