"""Unit tests for the encryption strategies and their selector."""

import hashlib

import pytest

from authlayer.domain import messages
from authlayer.infrastructure.encryption import ENCRYPTION_STRATEGIES, select_encryption
from authlayer.infrastructure.encryption.strategies import (
    Argon2Encryption,
    BcryptEncryption,
    Md5Encryption,
    PlainEncryption,
    ShaEncryption,
)

pytestmark = pytest.mark.unit


class TestSelectEncryption:
    """Test cases for the strategy selector."""

    @pytest.mark.parametrize(
        "name,expected_type",
        [
            ("none", PlainEncryption),
            ("md5", Md5Encryption),
            ("MD5", Md5Encryption),
            ("sha", ShaEncryption),
            ("argon2", Argon2Encryption),
            ("Bcrypt", BcryptEncryption),
        ],
    )
    def test_known_names(self, name, expected_type):
        """Test that registered names resolve case-insensitively."""
        strategy = select_encryption(name)

        assert type(strategy) is expected_type
        assert strategy.error() == ""

    def test_unknown_name_falls_back_to_plain(self):
        """Test that an unknown name gives an identity strategy carrying an error."""
        # Act
        strategy = select_encryption("rot13")

        # Assert
        assert type(strategy) is PlainEncryption
        assert strategy.encrypt("secret") == "secret"
        assert strategy.error() == messages.NO_ENCTYPE + "\n"

    def test_returns_fresh_instance_each_call(self):
        """Test that strategies (and their error lists) are not shared."""
        first = select_encryption("rot13")

        second = select_encryption("rot13")

        assert first is not second
        assert first.errors is not second.errors

    def test_registry_is_immutable(self):
        with pytest.raises(TypeError):
            ENCRYPTION_STRATEGIES["rot13"] = PlainEncryption


class TestDeterministicStrategies:
    """Test cases for none, md5 and sha."""

    def test_plain_is_identity(self):
        assert PlainEncryption().encrypt("secret") == "secret"

    def test_md5_hex_digest(self):
        assert Md5Encryption().encrypt("secret") == hashlib.md5(b"secret").hexdigest()

    def test_sha_hex_digest(self):
        assert ShaEncryption().encrypt("secret") == hashlib.sha1(b"secret").hexdigest()

    def test_unicode_is_utf8_encoded(self):
        password = "パスワード🔒"

        assert Md5Encryption().encrypt(password) == hashlib.md5(password.encode("utf-8")).hexdigest()

    @pytest.mark.parametrize("strategy_class", [PlainEncryption, Md5Encryption, ShaEncryption])
    def test_verify(self, strategy_class):
        """Test that verify compares against the encrypted form."""
        # Arrange
        strategy = strategy_class()
        stored = strategy.encrypt("correct_password")

        # Act & Assert
        assert strategy.verify("correct_password", stored) is True
        assert strategy.verify("wrong_password", stored) is False

    def test_error_normalizes_scalar(self):
        """Test that a single assigned message is reported as one line."""
        strategy = PlainEncryption()
        strategy.errors = "key file missing"

        assert strategy.error() == "key file missing\n"


class TestSaltedStrategies:
    """Test cases for the pwdlib-backed strategies."""

    def test_argon2_hash_format(self):
        assert Argon2Encryption().encrypt("mypassword").startswith("$argon2id$")

    def test_bcrypt_hash_format(self):
        assert BcryptEncryption().encrypt("mypassword").startswith("$2b$")

    @pytest.mark.parametrize("strategy_class", [Argon2Encryption, BcryptEncryption])
    def test_unique_salts_still_verify(self, strategy_class):
        """Test that two hashes of one password differ but both verify."""
        # Arrange
        strategy = strategy_class()

        # Act
        hash1 = strategy.encrypt("same_password")
        hash2 = strategy.encrypt("same_password")

        # Assert
        assert hash1 != hash2
        assert strategy.verify("same_password", hash1)
        assert strategy.verify("same_password", hash2)
        assert not strategy.verify("other_password", hash1)

    @pytest.mark.parametrize("strategy_class", [Argon2Encryption, BcryptEncryption])
    def test_verify_invalid_hash_returns_false(self, strategy_class):
        """Test that malformed stored values never match and do not raise."""
        strategy = strategy_class()

        assert strategy.verify("password", "completely_invalid_hash") is False
        assert strategy.error() == ""
