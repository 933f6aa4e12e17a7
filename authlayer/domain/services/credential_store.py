"""Credential store interface.

A credential store creates, changes, deletes and verifies
login-and-password combinations against one storage technology. It does
not decide how passwords are protected: every implementation is also an
authentication object and calls back into its own ``encrypt``/``verify``.

Failures are not raised. Each operation returns False and records a
message that the caller reads through ``error()``.
"""

from abc import ABC, abstractmethod


class ICredentialStore(ABC):
    """Credential operations every authentication backend must offer."""

    @abstractmethod
    def add(self, login: str, password: str) -> bool:
        """
        Create a new login with the given cleartext password.

        Returns:
            True if the login was created
        """
        pass

    @abstractmethod
    def change_password(self, login: str, password: str) -> bool:
        """
        Replace the password of an existing login.

        Returns:
            True if the password was changed
        """
        pass

    @abstractmethod
    def delete(self, login: str) -> bool:
        """
        Remove a login.

        Returns:
            True if the login was removed
        """
        pass

    @abstractmethod
    def check_password(self, login: str, password: str) -> bool:
        """
        Verify a cleartext password for a login.

        Returns:
            True if the login exists and the password matches
        """
        pass

    @abstractmethod
    def check_login(self, login: str) -> bool:
        """
        Check whether a login is known to the store.

        Returns:
            True if exactly one matching login exists
        """
        pass
