"""Encryption strategy interface - domain service abstraction.

Credential stores never protect passwords themselves. They hand the
cleartext to whichever strategy the authentication object selected, and
store what comes back. Strategies are looked up by name (``none``, ``md5``,
``argon2``...) so the algorithm can be changed through configuration.

Like the authentication objects, a strategy reports problems as data: it
keeps its own ``errors`` list and renders it through ``error()``. The
authentication object appends that report to its own.
"""

import hmac
from abc import ABC, abstractmethod


class IEncryptionStrategy(ABC):
    """
    Interface for password encryption strategies.

    Implementations must provide ``encrypt``. Deterministic strategies can
    rely on the default ``verify``; salted ones must override it because
    encrypting the same cleartext twice yields different output.
    """

    #: Identifier the selector registers this strategy under
    name: str = ""

    def __init__(self):
        self.errors: list[str] = []

    @abstractmethod
    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt a cleartext password.

        Args:
            plaintext: The cleartext password

        Returns:
            The representation to store
        """
        pass

    def verify(self, plaintext: str, encrypted: str) -> bool:
        """
        Check a cleartext password against a stored representation.

        Args:
            plaintext: The cleartext password supplied by the user
            encrypted: The previously stored output of ``encrypt``

        Returns:
            True if they match, False otherwise
        """
        return hmac.compare_digest(
            self.encrypt(plaintext).encode("utf-8"), encrypted.encode("utf-8")
        )

    def error(self) -> str:
        """
        Return this strategy's error messages, one per line.

        An empty string means nothing went wrong.
        """
        if not isinstance(self.errors, (list, tuple)):
            self.errors = [str(self.errors)]

        return "".join(f"{message}\n" for message in self.errors)
