"""Repository implementations."""

from authlayer.infrastructure.repositories.credential_repository_impl import CredentialRepository
from authlayer.infrastructure.repositories.unit_of_work_impl import UnitOfWork

__all__ = ["CredentialRepository", "UnitOfWork"]
