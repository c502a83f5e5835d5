"""
Tier 1 — SHIFT: Caesar Cipher
=============================
Every letter moves a fixed number of places down the alphabet.

Historical note: Suetonius records Julius Caesar shifting by three.
With only 25 useful keys it falls to a brute-force pass by hand.

Key:     any integer, reduced into [0, 26)
Output:  case and punctuation of the input are preserved
"""

import logging

from ..alphabet import MODULUS, map_letters
from ..keys import IntKey, parse_int_key

logger = logging.getLogger(__name__)


class CaesarCipher:
    """Additive single-key substitution."""

    def __init__(self, shift: IntKey):
        self._raw_shift = parse_int_key(shift, "Shift")
        self._shift = self._raw_shift % MODULUS
        logger.debug(f"Caesar shift={self._raw_shift} -> {self._shift}")

    @property
    def shift(self) -> int:
        return self._shift

    def encode(self, plaintext: str) -> str:
        """Shift every letter forward. Non-letters pass through."""
        return map_letters(plaintext, lambda idx, _: idx + self._shift)

    def decode(self, ciphertext: str) -> str:
        """Encode with the negated shift."""
        return CaesarCipher(-self._shift).encode(ciphertext)


def encode(text: str, shift: IntKey) -> str:
    return CaesarCipher(shift).encode(text)


def decode(text: str, shift: IntKey) -> str:
    return CaesarCipher(shift).decode(text)
