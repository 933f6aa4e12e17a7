"""Credential repository implementation using SQLAlchemy."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from authlayer.domain.entities.credential import Credential
from authlayer.domain.repositories.credential_repository import ICredentialRepository
from authlayer.infrastructure.persistence.models.credential_model import CredentialModel


class CredentialRepository(ICredentialRepository):
    """
    SQLAlchemy implementation of ICredentialRepository.

    Returns domain entities, never ORM models.
    """

    def __init__(self, session: Session):
        """
        Initialize repository with a database session.

        Args:
            session: SQLAlchemy session (managed by UoW)
        """
        self._session = session

    def _get_model(self, login: str) -> Optional[CredentialModel]:
        return self._session.execute(
            select(CredentialModel).where(CredentialModel.login == login)
        ).scalar_one_or_none()

    def get_by_login(self, login: str) -> Optional[Credential]:
        """Get credential by login."""
        model = self._get_model(login)

        if model is None:
            return None

        return model.to_entity()

    def add(self, credential: Credential) -> Credential:
        """Add a new credential."""
        model = CredentialModel.from_entity(credential)

        self._session.add(model)
        self._session.flush()

        return model.to_entity()

    def update(self, credential: Credential) -> Credential:
        """Store the credential's current password."""
        model = self._get_model(credential.login)

        if model is None:
            raise ValueError(f"Credential for login {credential.login!r} not found")

        model.password_hash = credential.password_hash
        self._session.flush()

        return model.to_entity()

    def delete(self, login: str) -> bool:
        """Delete credential by login."""
        model = self._get_model(login)

        if model is None:
            return False

        self._session.delete(model)
        self._session.flush()

        return True

    def exists(self, login: str) -> bool:
        """Check if a credential exists."""
        return (
            self._session.execute(
                select(CredentialModel.login).where(CredentialModel.login == login)
            ).scalar_one_or_none()
            is not None
        )
