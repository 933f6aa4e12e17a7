"""Pytest configuration and fixtures.

Credential stores get their collaborators injected, so unit tests run
against fakes:
- FakeEncryptionSelector instead of the real strategy registry
- FakeUnitOfWork instead of a database
- FakeDirectory instead of an LDAP server
"""

import pytest

from authlayer.application.services.auth_manager import AuthManager
from authlayer.domain.entities.credential import Credential
from authlayer.infrastructure.backends.database_store import DatabaseCredentialStore
from authlayer.infrastructure.backends.ldap_store import LdapCredentialStore
from authlayer.infrastructure.config.settings import Settings, get_settings
from tests.fakes.encryption_strategy_fake import FakeEncryptionSelector
from tests.fakes.ldap_connection_fake import FakeDirectory
from tests.fakes.unit_of_work_fake import FakeUnitOfWork


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read the environment afresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_selector() -> FakeEncryptionSelector:
    """Selector producing string-reversing strategies."""
    return FakeEncryptionSelector()


@pytest.fixture
def manager(fake_selector) -> AuthManager:
    """A bare AuthManager with the fake strategy selected."""
    auth = AuthManager(encryption_selector=fake_selector)
    auth.select_encryption("fake")
    return auth


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Provide a fresh FakeUnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def fake_uow_with_alice() -> FakeUnitOfWork:
    """FakeUnitOfWork holding alice, stored with the reversing strategy."""
    return FakeUnitOfWork(
        initial_credentials=[Credential(login="alice", password_hash="terces")]
    )


@pytest.fixture
def db_store(fake_uow, fake_selector) -> DatabaseCredentialStore:
    """Database store over an empty fake unit of work."""
    return DatabaseCredentialStore(
        encryption_type="fake",
        uow_factory=lambda: fake_uow,
        encryption_selector=fake_selector,
    )


@pytest.fixture
def db_store_with_alice(fake_uow_with_alice, fake_selector) -> DatabaseCredentialStore:
    """Database store over a fake unit of work holding alice."""
    return DatabaseCredentialStore(
        encryption_type="fake",
        uow_factory=lambda: fake_uow_with_alice,
        encryption_selector=fake_selector,
    )


@pytest.fixture
def directory() -> FakeDirectory:
    """Fake directory holding alice with password 'secret'."""
    fake_directory = FakeDirectory()
    fake_directory.add_user("alice", "secret")
    return fake_directory


@pytest.fixture
def ldap_settings(directory) -> Settings:
    return Settings(
        ldap_base_dn="dc=example,dc=com",
        ldap_bind_dn=directory.bind_dn,
        ldap_bind_password=directory.bind_password,
    )


@pytest.fixture
def ldap_store(directory, ldap_settings) -> LdapCredentialStore:
    """LDAP store talking to the fake directory, passwords stored unchanged."""
    return LdapCredentialStore(
        encryption_type="none",
        connection_factory=directory.connect,
        settings=ldap_settings,
    )
