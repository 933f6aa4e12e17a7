"""Concrete encryption strategies.

``none``, ``md5`` and ``sha`` are deterministic formats kept for stores
that already hold passwords written that way. ``argon2`` and ``bcrypt``
go through pwdlib and are the ones to pick for new installations.
"""

import hashlib
import logging

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError
from pwdlib.hashers.argon2 import Argon2Hasher
from pwdlib.hashers.bcrypt import BcryptHasher

from authlayer.domain.services.encryption_strategy import IEncryptionStrategy

logger = logging.getLogger(__name__)


class PlainEncryption(IEncryptionStrategy):
    """Stores the cleartext unchanged. Also the fallback for unknown names."""

    name = "none"

    def encrypt(self, plaintext: str) -> str:
        return plaintext


class Md5Encryption(IEncryptionStrategy):
    """Hex-encoded MD5 digest, unsalted."""

    name = "md5"

    def encrypt(self, plaintext: str) -> str:
        return hashlib.md5(plaintext.encode("utf-8")).hexdigest()


class ShaEncryption(IEncryptionStrategy):
    """Hex-encoded SHA-1 digest, unsalted."""

    name = "sha"

    def encrypt(self, plaintext: str) -> str:
        return hashlib.sha1(plaintext.encode("utf-8")).hexdigest()


class PwdlibEncryption(IEncryptionStrategy):
    """
    Base for salted strategies backed by a pwdlib hasher.

    Each ``encrypt`` call generates a fresh salt, so ``verify`` asks pwdlib
    to check the stored hash instead of comparing encrypted strings.
    """

    def __init__(self):
        super().__init__()
        self._password_hash = PasswordHash((self._create_hasher(),))

    def _create_hasher(self):
        raise NotImplementedError

    def encrypt(self, plaintext: str) -> str:
        return self._password_hash.hash(plaintext)

    def verify(self, plaintext: str, encrypted: str) -> bool:
        """
        Verify a cleartext password against a pwdlib hash.

        Malformed or foreign hashes never match; they are logged, not
        reported as strategy errors.
        """
        try:
            is_valid, _ = self._password_hash.verify_and_update(plaintext, encrypted)
        except (UnknownHashError, ValueError):
            logger.debug(f"Stored value is not a valid {self.name} hash")
            return False
        return is_valid


class Argon2Encryption(PwdlibEncryption):
    """Argon2id with pwdlib's default cost parameters."""

    name = "argon2"

    def _create_hasher(self):
        return Argon2Hasher()


class BcryptEncryption(PwdlibEncryption):
    """bcrypt with pwdlib's default work factor."""

    name = "bcrypt"

    def _create_hasher(self):
        return BcryptHasher()
