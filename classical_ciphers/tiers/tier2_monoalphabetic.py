"""
Tier 2 — SUBSTITUTION: Monoalphabetic Cipher
============================================
The key is a full rearrangement of the alphabet: plaintext A becomes
key[0], B becomes key[1], and so on.

26! keys is far too many to try one by one, but every letter still has a
single fixed image, so ordinary frequency analysis breaks it.

Key:     26 characters, a case-insensitive permutation of A-Z
Output:  case and punctuation of the input are preserved
"""

from ..alphabet import ALPHABET, map_letters
from ..errors import InvalidKeyAlphabet, InvalidKeyLength


class MonoalphabeticCipher:
    """
    Keyed substitution over an arbitrary permutation of A-Z.

    Only the key length is checked on construction. ``encode`` further
    requires a true permutation; ``decode`` works from whatever letters
    the key holds and leaves ciphertext letters it cannot find alone.
    """

    KEY_LENGTH = len(ALPHABET)

    def __init__(self, key: str):
        key = key or ""
        if len(key) != self.KEY_LENGTH:
            raise InvalidKeyLength(
                f"Key must be exactly {self.KEY_LENGTH} characters, got {len(key)}."
            )
        # per character, so "ß" stays one slot instead of becoming "SS"
        self._key = "".join(ch.upper()[0] for ch in key)
        self._is_permutation = sorted(self._key) == list(ALPHABET)
        # ciphertext position -> plaintext position, first occurrence wins
        self._inverse = {}
        for idx, ch in enumerate(self._key):
            if ch in ALPHABET:
                self._inverse.setdefault(ALPHABET.index(ch), idx)

    @property
    def key(self) -> str:
        return self._key

    def encode(self, plaintext: str) -> str:
        if not self._is_permutation:
            raise InvalidKeyAlphabet("Key must contain all 26 unique letters.")
        return map_letters(plaintext, lambda idx, _: ALPHABET.index(self._key[idx]))

    def decode(self, ciphertext: str) -> str:
        """Inverse lookup. A letter missing from the key is left as-is."""
        return map_letters(ciphertext, lambda idx, _: self._inverse.get(idx))


def encode(text: str, key: str) -> str:
    return MonoalphabeticCipher(key).encode(text)


def decode(text: str, key: str) -> str:
    return MonoalphabeticCipher(key).decode(text)
