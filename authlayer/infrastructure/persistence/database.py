"""Database configuration and session management."""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from authlayer.infrastructure.config.settings import Settings


# Base class for all ORM models
class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


def create_database_engine(settings: Settings) -> Engine:
    """Create SQLAlchemy engine from settings.

    Args:
        settings: Settings containing the database URL

    Returns:
        Configured Engine instance
    """
    return create_engine(settings.db_url, echo=settings.db_echo)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create session factory from engine.

    Args:
        engine: SQLAlchemy engine

    Returns:
        Session factory that creates Session instances
    """
    return sessionmaker(
        engine,
        class_=Session,
        expire_on_commit=False,
        autoflush=False,
    )


def create_tables(engine: Engine) -> None:
    """Create missing tables for all registered models."""
    # Registers CredentialModel with Base.metadata
    from authlayer.infrastructure.persistence.models import credential_model  # noqa: F401

    Base.metadata.create_all(engine)
