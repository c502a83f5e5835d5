"""
Tier 3 — POLYALPHABETIC: Vigenère Cipher
========================================
A Caesar shift that changes with every letter, driven by a repeating
keyword.

Historical note: Blaise de Vigenère, 1586 (first described by Bellaso,
1553). Called "le chiffre indéchiffrable" for 300 years until Kasiski
published a general attack in 1863.

Key:     any string; only its letters are used
Output:  case and punctuation of the input are preserved; non-letters
         do not consume a key letter
"""

import logging

from ..alphabet import map_letters, to_values
from ..errors import EmptyKey

logger = logging.getLogger(__name__)


class VigenereCipher:
    """Repeating-keyword additive substitution."""

    def __init__(self, key: str):
        self._shifts = to_values(key or "")
        if not self._shifts:
            raise EmptyKey("Key must contain at least one letter.")
        logger.debug(f"Vigenère key period={len(self._shifts)}")

    @property
    def period(self) -> int:
        return len(self._shifts)

    def _shift_at(self, n: int) -> int:
        """Shift for the n-th letter of the text."""
        return self._shifts[n % len(self._shifts)]

    def encode(self, plaintext: str) -> str:
        """Shift each letter forward by its key letter. Non-letters pass through."""
        return map_letters(plaintext, lambda idx, n: idx + self._shift_at(n))

    def decode(self, ciphertext: str) -> str:
        """Shift each letter back by its key letter."""
        return map_letters(ciphertext, lambda idx, n: idx - self._shift_at(n))


def encode(text: str, key: str) -> str:
    return VigenereCipher(key).encode(text)


def decode(text: str, key: str) -> str:
    return VigenereCipher(key).decode(text)
