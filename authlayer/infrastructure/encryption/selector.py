"""Resolve an encryption strategy by name."""

import logging
from types import MappingProxyType

from authlayer.domain import messages
from authlayer.domain.services.encryption_strategy import IEncryptionStrategy
from authlayer.infrastructure.encryption.strategies import (
    Argon2Encryption,
    BcryptEncryption,
    Md5Encryption,
    PlainEncryption,
    ShaEncryption,
)

logger = logging.getLogger(__name__)

ENCRYPTION_STRATEGIES = MappingProxyType(
    {
        strategy.name: strategy
        for strategy in (
            PlainEncryption,
            Md5Encryption,
            ShaEncryption,
            Argon2Encryption,
            BcryptEncryption,
        )
    }
)


def select_encryption(enctype: str) -> IEncryptionStrategy:
    """
    Return a new strategy instance for ``enctype``.

    Names are case-insensitive. An unknown name does not raise: it yields a
    ``PlainEncryption`` whose error report contains ``NO_ENCTYPE``, so the
    problem surfaces in the owning authentication object's ``error()``.

    Args:
        enctype: Strategy name, e.g. ``"md5"`` or ``"argon2"``

    Returns:
        A freshly constructed strategy
    """
    key = enctype.lower() if isinstance(enctype, str) else ""
    strategy_class = ENCRYPTION_STRATEGIES.get(key)

    if strategy_class is None:
        logger.warning(f"Unknown encryption type: {enctype!r}")
        fallback = PlainEncryption()
        fallback.errors.append(messages.NO_ENCTYPE)
        return fallback

    return strategy_class()
