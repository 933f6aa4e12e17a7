"""Fake implementations for testing."""

from tests.fakes.encryption_strategy_fake import FakeEncryptionSelector, FakeEncryptionStrategy
from tests.fakes.ldap_connection_fake import FakeDirectory
from tests.fakes.unit_of_work_fake import FakeUnitOfWork

__all__ = ["FakeDirectory", "FakeEncryptionSelector", "FakeEncryptionStrategy", "FakeUnitOfWork"]
