"""Relational database authentication backend (identifier ``db``).

Credentials live in one table (``user_logins``) holding the login and the
output of the selected encryption strategy. Database access goes through a
unit of work per operation. Without an injected ``uow_factory`` the engine
is built from the settings on first use, never at construction.
"""

import logging
from collections.abc import Callable
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from authlayer.application.services.auth_manager import AuthManager, EncryptionSelector
from authlayer.domain import messages
from authlayer.domain.entities.credential import Credential
from authlayer.domain.exceptions import DomainException
from authlayer.domain.repositories.unit_of_work import IUnitOfWork
from authlayer.infrastructure.config.settings import Settings, get_settings
from authlayer.infrastructure.persistence.database import (
    create_database_engine,
    create_session_factory,
    create_tables,
)
from authlayer.infrastructure.repositories.unit_of_work_impl import UnitOfWork

logger = logging.getLogger(__name__)


class DatabaseCredentialStore(AuthManager):
    """
    Credential store backed by a SQL database.

    Every operation returns a bool. Failures are appended to ``errors``:
    read-only refusals, unknown or duplicate logins, invalid credentials
    and database errors alike.

    Usage:
        # Production
        store = DatabaseCredentialStore(encryption_type="argon2")

        # Testing
        store = DatabaseCredentialStore(uow_factory=lambda: FakeUnitOfWork())
    """

    def __init__(
        self,
        encryption_type: Optional[str] = "none",
        read_only: bool = False,
        *,
        uow_factory: Optional[Callable[[], IUnitOfWork]] = None,
        settings: Optional[Settings] = None,
        encryption_selector: Optional[EncryptionSelector] = None,
    ):
        """
        Initialize the store.

        Args:
            encryption_type: Strategy used to protect passwords
            read_only: Refuse add, change_password and delete when True
            uow_factory: Returns a fresh IUnitOfWork per operation; built
                from ``settings.db_url`` when omitted
            settings: Settings to build the engine from; defaults to
                ``get_settings()``
            encryption_selector: Resolves strategy names
        """
        super().__init__(
            encryption_type=encryption_type,
            read_only=read_only,
            encryption_selector=encryption_selector,
        )
        self._uow_factory = uow_factory
        self._settings = settings

    def _unit_of_work(self) -> IUnitOfWork:
        if self._uow_factory is None:
            settings = self._settings or get_settings()
            engine = create_database_engine(settings)
            if settings.db_create_tables:
                create_tables(engine)
            session_factory = create_session_factory(engine)
            self._uow_factory = lambda: UnitOfWork(session_factory)
        return self._uow_factory()

    def _run(self, operation: Callable[[IUnitOfWork], bool]) -> bool:
        """Run ``operation`` in a unit of work, turning database errors into messages."""
        try:
            with self._unit_of_work() as uow:
                return operation(uow)
        except SQLAlchemyError as exc:
            logger.error(f"Database error: {exc}", exc_info=True)
            self.errors.append(f"{messages.DATABASE_ERROR}{exc}")
            return False

    def add(self, login: str, password: str) -> bool:
        """Create a login; fails if it already exists."""
        if self._refuse_if_read_only():
            return False

        try:
            credential = Credential(login=login, password_hash=self.encrypt(password))
        except DomainException as exc:
            self.errors.append(exc.message)
            return False

        def operation(uow: IUnitOfWork) -> bool:
            if uow.credentials.exists(credential.login):
                self.errors.append(messages.ACCOUNT_EXISTS)
                return False

            uow.credentials.add(credential)
            uow.commit()
            return True

        return self._run(operation)

    def change_password(self, login: str, password: str) -> bool:
        """Store a new password for an existing login."""
        if self._refuse_if_read_only():
            return False

        new_password_hash = self.encrypt(password)

        def operation(uow: IUnitOfWork) -> bool:
            credential = uow.credentials.get_by_login(login)
            if credential is None:
                self.errors.append(messages.LOGIN_NOT_FOUND)
                return False

            try:
                credential.change_password(new_password_hash)
            except DomainException as exc:
                self.errors.append(exc.message)
                return False

            uow.credentials.update(credential)
            uow.commit()
            return True

        return self._run(operation)

    def delete(self, login: str) -> bool:
        """Remove a login."""
        if self._refuse_if_read_only():
            return False

        def operation(uow: IUnitOfWork) -> bool:
            if not uow.credentials.delete(login):
                self.errors.append(messages.LOGIN_NOT_FOUND)
                return False

            uow.commit()
            return True

        return self._run(operation)

    def check_password(self, login: str, password: str) -> bool:
        """Verify a password with the selected strategy."""

        def operation(uow: IUnitOfWork) -> bool:
            credential = uow.credentials.get_by_login(login)
            if credential is None:
                self.errors.append(messages.LOGIN_NOT_FOUND)
                return False

            if not self.verify(password, credential.password_hash):
                self.errors.append(messages.INCORRECT_PASSWORD)
                return False

            return True

        return self._run(operation)

    def check_login(self, login: str) -> bool:
        """Check whether the login exists. Records no error when it does not."""
        return self._run(lambda uow: uow.credentials.exists(login))
