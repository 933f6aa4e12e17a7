"""Domain exceptions."""

from authlayer.domain.exceptions.domain_exceptions import DomainException, InvalidCredentialError

__all__ = ["DomainException", "InvalidCredentialError"]
