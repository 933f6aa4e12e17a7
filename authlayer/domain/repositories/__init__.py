"""Repository interfaces - define contracts for data access."""

from authlayer.domain.repositories.credential_repository import ICredentialRepository
from authlayer.domain.repositories.unit_of_work import IUnitOfWork

__all__ = ["ICredentialRepository", "IUnitOfWork"]
