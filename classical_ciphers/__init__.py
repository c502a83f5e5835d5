"""
classical_ciphers
=================
Seven classical text ciphers, from Caesar's shift to Shannon's pad.

Tiers:
    1  SHIFT            — Caesar (additive single key)
    2  SUBSTITUTION     — Monoalphabetic (keyed permutation of A-Z)
    3  POLYALPHABETIC   — Vigenère (repeating keyword)
    4  DIGRAPH          — Playfair (5×5 keyed square)
    5  LINEAR ALGEBRA   — Hill (2×2 matrix mod 26)
    6  PERFECT SECRECY  — One-Time Pad (additive, key ≥ text)
    7  TRANSPOSITION    — Rail Fence (zigzag)

None of these provide real security. Every tier is a pure function of
(text, key): no state, no I/O, safe to call from any thread.
"""

__version__  = "1.0.0"

from .errors import (
    CipherError,
    UnknownCipher,
    InvalidNumericKey,
    InvalidRailCount,
    InvalidKeyLength,
    InvalidKeyAlphabet,
    EmptyKey,
    KeyTooShort,
    MalformedKey,
    NonNumericKey,
    NonInvertibleKey,
)
from .tiers.tier1_caesar         import CaesarCipher
from .tiers.tier2_monoalphabetic import MonoalphabeticCipher
from .tiers.tier3_vigenere       import VigenereCipher
from .tiers.tier4_playfair       import PlayfairCipher
from .tiers.tier5_hill           import HillCipher
from .tiers.tier6_onetimepad     import OneTimePad
from .tiers.tier7_railfence      import RailFenceCipher
from .registry                   import available_ciphers, get_cipher, encode, decode
from .analysis                   import letter_frequencies, compare_frequencies

__all__ = [
    "CaesarCipher",
    "MonoalphabeticCipher",
    "VigenereCipher",
    "PlayfairCipher",
    "HillCipher",
    "OneTimePad",
    "RailFenceCipher",
    "available_ciphers",
    "get_cipher",
    "encode",
    "decode",
    "letter_frequencies",
    "compare_frequencies",
    "CipherError",
    "UnknownCipher",
    "InvalidNumericKey",
    "InvalidRailCount",
    "InvalidKeyLength",
    "InvalidKeyAlphabet",
    "EmptyKey",
    "KeyTooShort",
    "MalformedKey",
    "NonNumericKey",
    "NonInvertibleKey",
]
