"""Domain layer exceptions.

Credential stores catch these and turn them into error messages, so they
only escape when an entity is used directly.
"""

from typing import Optional


class DomainException(Exception):
    """Base exception for domain layer; carries a message and a machine-readable code."""

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidCredentialError(DomainException):
    """
    Raised when a login or stored password cannot form a valid credential.

    Attributes:
        login: The offending login as given (may be blank or not a string)
    """

    def __init__(self, message: str, login: Optional[object] = None):
        super().__init__(message, error_code="INVALID_CREDENTIAL")
        self.login = login
