"""
Error kinds raised by the cipher tiers.

Every failure is a ``CipherError`` (a ``ValueError``), raised synchronously
before or during the single pass over the text. Messages are written to be
shown to a user as-is.
"""


class CipherError(ValueError):
    """Base class for every key or input rejection."""


class UnknownCipher(CipherError):
    """No cipher is registered under the requested name."""


class InvalidNumericKey(CipherError):
    """A shift or rail-count key does not parse as an integer."""


class InvalidRailCount(CipherError):
    """Rail fence needs at least two rails."""


class InvalidKeyLength(CipherError):
    """Monoalphabetic key is not exactly 26 characters."""


class InvalidKeyAlphabet(CipherError):
    """Monoalphabetic key is not a permutation of A-Z."""


class EmptyKey(CipherError):
    """Keyword has no usable letters."""


class KeyTooShort(CipherError):
    """One-time pad key is shorter than the text."""


class MalformedKey(CipherError):
    """Hill key is not exactly four comma-separated values."""


class NonNumericKey(CipherError):
    """Hill key contains a value that is not an integer."""


class NonInvertibleKey(CipherError):
    """Hill key determinant shares a factor with 26."""
