"""Credential repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from authlayer.domain.entities.credential import Credential


class ICredentialRepository(ABC):
    """
    Data access contract for stored credentials.

    Credentials are identified by their login. The repository only moves
    entities in and out of storage; read-only checks, encryption and
    error recording belong to the credential store using it.
    """

    @abstractmethod
    def get_by_login(self, login: str) -> Optional[Credential]:
        """
        Find a credential by login.

        Args:
            login: The login to look up

        Returns:
            Credential if found, None otherwise
        """
        pass

    @abstractmethod
    def add(self, credential: Credential) -> Credential:
        """
        Add a new credential.

        Args:
            credential: The credential to persist

        Returns:
            The persisted credential
        """
        pass

    @abstractmethod
    def update(self, credential: Credential) -> Credential:
        """
        Store a changed password for an existing credential.

        Raises:
            ValueError: If no credential with that login exists
        """
        pass

    @abstractmethod
    def delete(self, login: str) -> bool:
        """
        Delete a credential by login.

        Returns:
            True if deleted, False if not found
        """
        pass

    @abstractmethod
    def exists(self, login: str) -> bool:
        """Check if a credential with this login exists."""
        pass
