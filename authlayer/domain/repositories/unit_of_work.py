"""Unit of Work interface - domain layer."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from authlayer.domain.repositories.credential_repository import ICredentialRepository


class IUnitOfWork(ABC):
    """
    Unit of Work interface for managing transactions.

    Credential operations are synchronous, so the unit of work is a plain
    context manager. Each credential store operation opens its own unit of
    work; nothing is shared between operations or between callers.
    """

    credentials: "ICredentialRepository"

    @abstractmethod
    def __enter__(self) -> "IUnitOfWork":
        """Start a session and expose the repositories."""
        pass

    @abstractmethod
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Leave the context manager.

        If an exception occurred, roll back. Changes are only kept when
        ``commit`` was called explicitly.
        """
        pass

    @abstractmethod
    def commit(self) -> None:
        """Commit the current transaction."""
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Roll back the current transaction."""
        pass
