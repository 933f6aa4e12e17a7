"""Application layer exceptions."""

from authlayer.application.exceptions.exceptions import (
    ApplicationError,
    EncryptionNotSelectedError,
)

__all__ = ["ApplicationError", "EncryptionNotSelectedError"]
