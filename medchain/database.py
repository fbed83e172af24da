"""
Database connection and session management.
Provides SQLAlchemy engine factory, session factory, and base class for models.
"""
from typing import Optional
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

# Create base class for declarative models
Base = declarative_base()

IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")

def build_engine(database_url: str) -> Engine:
    """
    Create a SQLAlchemy engine for the given URL.

    SQLite connections are used from the FastAPI threadpool, so the
    same-thread check is disabled for them.

    Args:
        database_url: SQLAlchemy connection string

    Returns:
        Engine: Configured engine
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url)

    # An in-memory database exists per connection, so all sessions share one
    if database_url in IN_MEMORY_URLS:
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, connect_args={"check_same_thread": False})

def build_session_factory(engine: Engine) -> sessionmaker:
    """Create the session factory used by the ledger."""
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)

def init_db(engine: Engine) -> None:
    """
    Create all ledger tables if they don't exist.

    Importing the model modules registers their tables with Base.
    """
    from .identity import models as identity_models  # noqa: F401
    from .records import models as records_models  # noqa: F401
    from .access import models as access_models  # noqa: F401
    from .audit import models as audit_models  # noqa: F401
    from .core import state  # noqa: F401

    Base.metadata.create_all(bind=engine)

def is_single_connection(engine: Optional[Engine]) -> bool:
    """Whether every session on the engine shares one DBAPI connection."""
    return engine is not None and isinstance(engine.pool, StaticPool)
