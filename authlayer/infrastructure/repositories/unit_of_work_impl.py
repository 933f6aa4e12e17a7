"""Unit of Work implementation using SQLAlchemy."""

from typing import Any, Optional

from sqlalchemy.orm import Session, sessionmaker

from authlayer.domain.repositories.unit_of_work import IUnitOfWork
from authlayer.infrastructure.repositories.credential_repository_impl import CredentialRepository


class UnitOfWork(IUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work.

    Opens one session per ``with`` block, exposes the credential
    repository on it and closes it on exit. Uncommitted changes are
    rolled back when an exception escapes the block.
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        """
        Initialize UoW with a session factory.

        Args:
            session_factory: SQLAlchemy session factory
        """
        self._session_factory = session_factory
        self._session: Optional[Session] = None

    def __enter__(self) -> "UnitOfWork":
        """Start a new database session and initialize repositories."""
        self._session = self._session_factory()
        self.credentials = CredentialRepository(self._session)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Exit context manager, rolling back on error and closing the session."""
        if exc_type is not None:
            self.rollback()

        if self._session is not None:
            self._session.close()
            self._session = None

    def commit(self) -> None:
        """Commit the current transaction."""
        if self._session is None:
            raise RuntimeError("Cannot commit: no active session")

        self._session.commit()

    def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session is None:
            raise RuntimeError("Cannot rollback: no active session")

        self._session.rollback()
