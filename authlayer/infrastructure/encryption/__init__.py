"""Encryption strategies and their selector."""

from authlayer.infrastructure.encryption.selector import ENCRYPTION_STRATEGIES, select_encryption

__all__ = ["ENCRYPTION_STRATEGIES", "select_encryption"]
