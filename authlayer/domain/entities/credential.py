"""Credential domain entity - a login and its stored password."""

from dataclasses import dataclass

from authlayer.domain.exceptions import InvalidCredentialError

MAX_LOGIN_LENGTH = 128


def _check_password_hash(login: str, password_hash: object) -> None:
    if not isinstance(password_hash, str):
        raise InvalidCredentialError(
            "Stored password must be a string produced by an encryption strategy.",
            login=login,
        )


@dataclass
class Credential:
    """
    A login-and-password combination as kept by a credential store.

    ``password_hash`` holds whatever the selected encryption strategy
    produced, so for the ``none`` strategy it is the cleartext itself.
    The entity knows nothing about how it was encrypted.
    """

    login: str
    password_hash: str

    def __post_init__(self):
        """
        Validate entity invariants at construction time.

        Raises:
            InvalidCredentialError: If the login is blank or too long,
                or the stored password is not a string
        """
        if not isinstance(self.login, str) or not self.login.strip():
            raise InvalidCredentialError(
                "Login cannot be empty. A credential must have a valid login.",
                login=self.login,
            )

        if len(self.login) > MAX_LOGIN_LENGTH:
            raise InvalidCredentialError(
                f"Login '{self.login[:16]}...' exceeds {MAX_LOGIN_LENGTH} characters.",
                login=self.login,
            )

        _check_password_hash(self.login, self.password_hash)

    def change_password(self, new_password_hash: str) -> None:
        """
        Replace the stored password.

        Raises:
            InvalidCredentialError: If the new value is not a string
        """
        _check_password_hash(self.login, new_password_hash)
        self.password_hash = new_password_hash
