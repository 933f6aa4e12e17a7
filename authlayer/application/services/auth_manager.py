"""Authentication manager - backend selection and encryption delegation.

``AuthManager`` is the common base of every authentication backend. It
owns what all backends share:

1. The selected encryption strategy, and delegation to it
2. The list of error messages collected while the object was used
3. The read-only flag backends consult before changing credentials

Backends (``DatabaseCredentialStore``, ``LdapCredentialStore``) subclass it
and add the credential operations. Instead of constructing them directly,
call ``resolve_backend("db")``; it always returns a usable object, even
when the backend cannot be found. In that case the object is a plain
``AuthManager`` whose ``error()`` explains what went wrong and whose
credential operations do nothing.

An authentication object belongs to one authentication attempt. Errors
are never cleared, so create a new object for each logical operation that
needs a clean error report.
"""

import logging
from collections.abc import Callable
from types import MappingProxyType
from typing import Any, Optional

from authlayer.application.exceptions import EncryptionNotSelectedError
from authlayer.domain import messages
from authlayer.domain.services.credential_store import ICredentialStore
from authlayer.domain.services.encryption_strategy import IEncryptionStrategy
from authlayer.infrastructure.config.settings import Settings, get_settings
from authlayer.infrastructure.encryption import select_encryption

logger = logging.getLogger(__name__)

EncryptionSelector = Callable[[str], IEncryptionStrategy]


class AuthManager(ICredentialStore):
    """
    Base authentication object.

    Without a backend the credential operations are inert: they return
    False and record nothing. Subclasses override them.

    Usage:
        auth = resolve_backend("db", encryption_type="md5")
        if not auth.check_password("alice", "secret"):
            print(auth.error())
    """

    def __init__(
        self,
        encryption_type: Optional[str] = None,
        read_only: bool = False,
        *,
        encryption_selector: Optional[EncryptionSelector] = None,
    ):
        """
        Initialize an authentication object.

        Args:
            encryption_type: Strategy to select right away. When omitted no
                strategy is selected and ``encrypt``/``error`` must not be
                called until ``select_encryption`` is.
            read_only: Initial value of the read-only flag
            encryption_selector: Resolves strategy names; defaults to the
                built-in strategy registry
        """
        self.errors: list[str] = []
        self._read_only = bool(read_only)
        self._encryption_selector = encryption_selector or select_encryption
        self._encryption_strategy: Optional[IEncryptionStrategy] = None

        if encryption_type is not None:
            self.select_encryption(encryption_type)

    @property
    def encryption_strategy(self) -> Optional[IEncryptionStrategy]:
        """The currently selected strategy, or None."""
        return self._encryption_strategy

    @staticmethod
    def select_auth(backend: str, **options: Any) -> "AuthManager":
        """Alias of ``resolve_backend`` kept on the class."""
        return resolve_backend(backend, **options)

    def select_encryption(self, enctype: str) -> IEncryptionStrategy:
        """
        Select the encryption strategy used by this object.

        The name is passed unchanged to the selector. The returned
        strategy replaces the previous one.

        Args:
            enctype: Strategy name

        Returns:
            The new strategy
        """
        self._encryption_strategy = self._encryption_selector(enctype)
        logger.debug(
            f"{type(self).__name__} selected encryption "
            f"{type(self._encryption_strategy).__name__} for {enctype!r}"
        )
        return self._encryption_strategy

    def _strategy(self) -> IEncryptionStrategy:
        if self._encryption_strategy is None:
            raise EncryptionNotSelectedError()
        return self._encryption_strategy

    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt a password with the selected strategy.

        Raises:
            EncryptionNotSelectedError: If no strategy was selected
        """
        return self._strategy().encrypt(plaintext)

    def verify(self, plaintext: str, encrypted: str) -> bool:
        """
        Check a password against a stored value with the selected strategy.

        Raises:
            EncryptionNotSelectedError: If no strategy was selected
        """
        return self._strategy().verify(plaintext, encrypted)

    def error(self) -> str:
        """
        Return all error messages as one string.

        Each message of this object is followed by a newline, in the order
        they were recorded, and the strategy's own report comes last.
        Calling it does not clear anything.

        Raises:
            EncryptionNotSelectedError: If no strategy was selected
        """
        strategy = self._strategy()

        # Older call sites assign a single message instead of appending
        if not isinstance(self.errors, (list, tuple)):
            self.errors = [str(self.errors)]

        report = "".join(f"{message}\n" for message in self.errors)
        return report + strategy.error()

    def read_only(self, read_only: Optional[bool] = None) -> bool:
        """
        Get or set the read-only flag.

        Args:
            read_only: New value; omit to only read the flag

        Returns:
            The current value when called without an argument, otherwise
            the value held before this call

        Example:
            previous = auth.read_only(True)
            ...  # credential changes are refused here
            auth.read_only(previous)
        """
        if read_only is None:
            return self._read_only

        old_read_only = self._read_only
        self._read_only = bool(read_only)
        return old_read_only

    def _refuse_if_read_only(self) -> bool:
        """Record an error and return True when changes are not allowed."""
        if self._read_only:
            self.errors.append(messages.READ_ONLY)
            return True
        return False

    # Credential operations without a backend

    def add(self, login: str, password: str) -> bool:
        return False

    def change_password(self, login: str, password: str) -> bool:
        return False

    def delete(self, login: str) -> bool:
        return False

    def check_password(self, login: str, password: str) -> bool:
        return False

    def check_login(self, login: str) -> bool:
        return False


def _load_database_backend() -> type[AuthManager]:
    from authlayer.infrastructure.backends.database_store import DatabaseCredentialStore

    return DatabaseCredentialStore


def _load_ldap_backend() -> type[AuthManager]:
    from authlayer.infrastructure.backends.ldap_store import LdapCredentialStore

    return LdapCredentialStore


BACKEND_TYPE_MAP = MappingProxyType(
    {
        "db": "DatabaseCredentialStore",
        "ldap": "LdapCredentialStore",
    }
)

_BACKEND_LOADERS: MappingProxyType[str, Callable[[], type[AuthManager]]] = MappingProxyType(
    {
        "DatabaseCredentialStore": _load_database_backend,
        "LdapCredentialStore": _load_ldap_backend,
    }
)


def resolve_backend(backend: str, **options: Any) -> AuthManager:
    """
    Return a new authentication object for the named backend.

    The name is case-insensitive. Backends are loaded on demand, so a
    backend whose dependencies are not installed only fails when it is
    requested. Neither an unknown name nor a failed import raises: the
    result is then a plain ``AuthManager`` whose ``error()`` contains
    ``NO_AUTHTYPE`` and whose credential operations do nothing.

    Nothing is connected here; backends open their database or directory
    connections on first use.

    Args:
        backend: Backend identifier (``"db"`` or ``"ldap"``)
        **options: Passed to the backend constructor, e.g.
            ``encryption_type``, ``read_only``, ``settings``

    Returns:
        The backend object, or an error-bearing ``AuthManager``
    """
    key = backend.lower() if isinstance(backend, str) else ""
    type_name = BACKEND_TYPE_MAP.get(key)

    backend_class = None
    if type_name is not None:
        try:
            backend_class = _BACKEND_LOADERS[type_name]()
        except ImportError as exc:
            logger.warning(f"Authentication backend {type_name} could not be loaded: {exc}")
    else:
        logger.warning(f"Unknown authentication backend: {backend!r}")

    if backend_class is None:
        return _unresolved(options)

    logger.debug(f"Resolved authentication backend {backend!r} to {type_name}")
    return backend_class(**options)


def _unresolved(options: dict[str, Any]) -> AuthManager:
    auth = AuthManager(
        encryption_type=options.get("encryption_type") or "none",
        read_only=options.get("read_only", False),
        encryption_selector=options.get("encryption_selector"),
    )
    auth.errors.append(messages.NO_AUTHTYPE)
    return auth


def resolve_configured_backend(settings: Optional[Settings] = None) -> AuthManager:
    """
    Resolve the backend named in the settings.

    Uses ``auth_backend``, ``encryption_type`` and ``read_only``; the
    settings object is handed to the backend as well.
    """
    settings = settings or get_settings()
    return resolve_backend(
        settings.auth_backend,
        encryption_type=settings.encryption_type,
        read_only=settings.read_only,
        settings=settings,
    )
