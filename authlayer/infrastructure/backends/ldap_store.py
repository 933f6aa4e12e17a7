"""Directory service authentication backend (identifier ``ldap``).

Logins are entries below ``ldap_base_dn`` whose ``ldap_login_attribute``
(``uid`` by default) holds the login. Each operation builds a server,
opens a connection, binds with the service account and unbinds again.

``userPassword`` is written as the output of the selected encryption
strategy and checked with the same strategy's ``verify``. Only when the
directory withholds ``userPassword`` from the service account does the
check fall back to binding as the user.
"""

import logging
from collections.abc import Callable
from typing import Any, Optional

from ldap3 import AUTO_BIND_NONE, MODIFY_REPLACE, NONE, Connection, Server
from ldap3.core.exceptions import LDAPException
from ldap3.utils.conv import escape_filter_chars
from ldap3.utils.dn import escape_rdn

from authlayer.application.services.auth_manager import AuthManager, EncryptionSelector
from authlayer.domain import messages
from authlayer.domain.entities.credential import Credential
from authlayer.domain.exceptions import DomainException
from authlayer.infrastructure.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# (user_dn, password) -> unbound ldap3 Connection
ConnectionFactory = Callable[[Optional[str], Optional[str]], Connection]


class LdapCredentialStore(AuthManager):
    """
    Credential store backed by an LDAP directory.

    Usage:
        store = LdapCredentialStore(settings=Settings(ldap_host="ldap.example.com"))
        if not store.check_password("alice", "secret"):
            print(store.error())
    """

    def __init__(
        self,
        encryption_type: Optional[str] = "none",
        read_only: bool = False,
        *,
        connection_factory: Optional[ConnectionFactory] = None,
        settings: Optional[Settings] = None,
        encryption_selector: Optional[EncryptionSelector] = None,
    ):
        """
        Initialize the store. No connection is opened here.

        Args:
            encryption_type: Strategy used for ``userPassword`` values
            read_only: Refuse add, change_password and delete when True
            connection_factory: Builds unbound connections; defaults to
                ldap3 connections to ``settings.ldap_host``
            settings: Directory settings; defaults to ``get_settings()``
            encryption_selector: Resolves strategy names
        """
        super().__init__(
            encryption_type=encryption_type,
            read_only=read_only,
            encryption_selector=encryption_selector,
        )
        self._connection_factory = connection_factory
        self._settings = settings

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    def _connect(self, user: Optional[str], password: Optional[str]) -> Connection:
        if self._connection_factory is not None:
            return self._connection_factory(user, password)

        # One Server per operation: ldap3 keeps failed-candidate state on it.
        server = Server(
            self.settings.ldap_host,
            port=self.settings.ldap_port,
            use_ssl=self.settings.ldap_use_ssl,
            get_info=NONE,
            connect_timeout=self.settings.ldap_timeout,
        )
        return Connection(
            server,
            user=user,
            password=password,
            auto_bind=AUTO_BIND_NONE,
            receive_timeout=self.settings.ldap_timeout,
        )

    def _record_result(self, conn: Connection) -> None:
        result = conn.result or {}
        description = result.get("message") or result.get("description") or "unknown error"
        self.errors.append(f"{messages.DIRECTORY_ERROR}{description}")

    def _run(self, operation: Callable[[Connection], bool]) -> bool:
        """Run ``operation`` on a connection bound as the service account."""
        conn: Optional[Connection] = None
        try:
            conn = self._connect(
                self.settings.ldap_bind_dn or None,
                self.settings.ldap_bind_password or None,
            )
            if not conn.bind():
                self._record_result(conn)
                return False
            return operation(conn)
        except LDAPException as exc:
            logger.error(f"Directory error: {exc}", exc_info=True)
            self.errors.append(f"{messages.DIRECTORY_ERROR}{exc}")
            return False
        finally:
            if conn is not None:
                conn.unbind()

    def _search(self, conn: Connection, login: str) -> list[Any]:
        """Return all entries matching the login, with their ``userPassword``."""
        attribute = self.settings.ldap_login_attribute
        found = conn.search(
            self.settings.ldap_base_dn,
            f"({attribute}={escape_filter_chars(login)})",
            attributes=[attribute, "userPassword"],
        )
        return list(conn.entries) if found else []

    @staticmethod
    def _stored_password(entry: Any) -> Optional[str]:
        values = entry.entry_attributes_as_dict.get("userPassword") or []
        if not values:
            return None
        value = values[0]
        return value.decode("utf-8") if isinstance(value, bytes) else str(value)

    def _find_entry(self, conn: Connection, login: str, record_missing: bool = True) -> Optional[Any]:
        entries = self._search(conn, login)

        if not entries:
            if record_missing:
                self.errors.append(messages.LOGIN_NOT_FOUND)
            return None

        if len(entries) > 1:
            self.errors.append(messages.LOGIN_NOT_UNIQUE)
            return None

        return entries[0]

    def _entry_dn(self, login: str) -> str:
        attribute = self.settings.ldap_login_attribute
        return f"{attribute}={escape_rdn(login)},{self.settings.ldap_base_dn}"

    def add(self, login: str, password: str) -> bool:
        """Create a directory entry for the login."""
        if self._refuse_if_read_only():
            return False

        try:
            credential = Credential(login=login, password_hash=self.encrypt(password))
        except DomainException as exc:
            self.errors.append(exc.message)
            return False

        def operation(conn: Connection) -> bool:
            if self._search(conn, credential.login):
                self.errors.append(messages.ACCOUNT_EXISTS)
                return False

            attributes: dict[str, Any] = {
                self.settings.ldap_login_attribute: credential.login,
                "cn": credential.login,
                "sn": credential.login,
                "userPassword": credential.password_hash,
            }
            if not conn.add(
                self._entry_dn(credential.login),
                self.settings.ldap_object_classes_list,
                attributes,
            ):
                self._record_result(conn)
                return False
            return True

        return self._run(operation)

    def change_password(self, login: str, password: str) -> bool:
        """Replace ``userPassword`` of the login's entry."""
        if self._refuse_if_read_only():
            return False

        new_password_hash = self.encrypt(password)

        def operation(conn: Connection) -> bool:
            entry = self._find_entry(conn, login)
            if entry is None:
                return False

            changes = {"userPassword": [(MODIFY_REPLACE, [new_password_hash])]}
            if not conn.modify(entry.entry_dn, changes):
                self._record_result(conn)
                return False
            return True

        return self._run(operation)

    def delete(self, login: str) -> bool:
        """Delete the login's entry."""
        if self._refuse_if_read_only():
            return False

        def operation(conn: Connection) -> bool:
            entry = self._find_entry(conn, login)
            if entry is None:
                return False

            if not conn.delete(entry.entry_dn):
                self._record_result(conn)
                return False
            return True

        return self._run(operation)

    def _bind_as(self, dn: str, password: str) -> bool:
        user_conn = self._connect(dn, password)
        try:
            return user_conn.bind()
        finally:
            user_conn.unbind()

    def check_password(self, login: str, password: str) -> bool:
        """
        Verify the password against the entry's ``userPassword``.

        Uses the selected strategy's ``verify``, as the database backend
        does. If the directory does not return ``userPassword`` to the
        service account, binds as the user instead. Empty passwords are
        rejected without contacting the directory, since many servers
        accept them as an unauthenticated bind.
        """
        if not password:
            self.errors.append(messages.INCORRECT_PASSWORD)
            return False

        def operation(conn: Connection) -> bool:
            entry = self._find_entry(conn, login)
            if entry is None:
                return False

            stored = self._stored_password(entry)
            if stored is None:
                valid = self._bind_as(entry.entry_dn, password)
            else:
                valid = self.verify(password, stored)

            if not valid:
                self.errors.append(messages.INCORRECT_PASSWORD)
            return valid

        return self._run(operation)

    def check_login(self, login: str) -> bool:
        """Check that exactly one entry matches the login."""
        return self._run(lambda conn: self._find_entry(conn, login, record_missing=False) is not None)
