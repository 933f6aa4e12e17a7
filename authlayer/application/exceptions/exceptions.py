"""Application layer exceptions.

Credential and resolution failures are recorded on the authentication
object rather than raised. The exceptions here cover misuse of the API
itself.
"""


class ApplicationError(Exception):
    """Base application layer exception."""

    def __init__(self, message: str, error_code: str = "APPLICATION_ERROR"):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class EncryptionNotSelectedError(ApplicationError):
    """Raised when encryption or error reporting is used before ``select_encryption``."""

    def __init__(
        self,
        message: str = "No encryption strategy selected; call select_encryption() first",
    ):
        super().__init__(message, error_code="ENCRYPTION_NOT_SELECTED")
