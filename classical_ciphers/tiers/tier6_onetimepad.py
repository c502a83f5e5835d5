"""
Tier 6 — PERFECT SECRECY: One-Time Pad
======================================
Vigenère with a key as long as the message, used exactly once.

Shannon (1949) proved that a truly random pad, at least as long as the
message and never reused, leaks nothing about the plaintext. Here the
pad is combined by addition mod 26 over A-Z rather than bitwise XOR.

The security lives entirely in key discipline: the pad is supplied by the
caller, used for a single call and never stored. Reusing a pad reduces
this tier to a running-key cipher.

Key:     letters only are used; must cover every letter of the text
Output:  uppercase letters only (case and punctuation are not kept)
"""

import logging

from ..alphabet import MODULUS, from_values, to_values
from ..errors import EmptyKey, KeyTooShort

logger = logging.getLogger(__name__)


class OneTimePad:
    """Additive stream cipher over the 26-letter alphabet."""

    def __init__(self, key: str):
        self._pad = to_values(key or "")
        if not self._pad:
            raise EmptyKey("Key must contain at least one letter.")

    def _checked_pad(self, values: list, role: str) -> list:
        if len(self._pad) < len(values):
            raise KeyTooShort(
                f"Key must be at least as long as the {role} "
                f"({len(self._pad)} < {len(values)} letters)."
            )
        logger.debug(f"OTP using {len(values)} of {len(self._pad)} pad letters")
        return self._pad[:len(values)]

    def encode(self, plaintext: str) -> str:
        text = to_values(plaintext)
        pad = self._checked_pad(text, "plaintext")
        return from_values((t + k) % MODULUS for t, k in zip(text, pad))

    def decode(self, ciphertext: str) -> str:
        text = to_values(ciphertext)
        pad = self._checked_pad(text, "ciphertext")
        return from_values((t - k + MODULUS) % MODULUS for t, k in zip(text, pad))


def encode(text: str, key: str) -> str:
    return OneTimePad(key).encode(text)


def decode(text: str, key: str) -> str:
    return OneTimePad(key).decode(text)
