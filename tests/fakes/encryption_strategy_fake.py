"""Fake encryption strategy for testing.

Reversing the string is enough to tell that a value went through the
strategy, and it is trivial to assert on. Errors can be preloaded to test
how an authentication object merges the strategy's report into its own.
"""

from authlayer.domain.services.encryption_strategy import IEncryptionStrategy


class FakeEncryptionStrategy(IEncryptionStrategy):
    """
    Deterministic strategy that reverses the cleartext.

    Usage:
        strategy = FakeEncryptionStrategy()
        strategy.encrypt("secret")  # 'terces'
    """

    name = "fake"

    def __init__(self, errors: list[str] | None = None):
        super().__init__()
        self.errors.extend(errors or [])
        self.encrypted: list[str] = []

    def encrypt(self, plaintext: str) -> str:
        self.encrypted.append(plaintext)
        return plaintext[::-1]


class FakeEncryptionSelector:
    """
    Selector returning FakeEncryptionStrategy instances.

    Records every name it was asked for, so tests can check that names are
    passed through unchanged.
    """

    def __init__(self, errors: list[str] | None = None):
        self.requested: list[str] = []
        self.created: list[FakeEncryptionStrategy] = []
        self._errors = errors

    def __call__(self, enctype: str) -> FakeEncryptionStrategy:
        self.requested.append(enctype)
        strategy = FakeEncryptionStrategy(errors=self._errors)
        self.created.append(strategy)
        return strategy
