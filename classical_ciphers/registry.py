"""
Name-based dispatch.

Front ends pick a cipher by name and pass the key exactly as the user
typed it; numeric keys arrive as text and are parsed by the tier itself.
"""

import logging
from typing import Dict, List

from .errors import UnknownCipher
from .tiers.tier1_caesar         import CaesarCipher
from .tiers.tier2_monoalphabetic import MonoalphabeticCipher
from .tiers.tier3_vigenere       import VigenereCipher
from .tiers.tier4_playfair       import PlayfairCipher
from .tiers.tier5_hill           import HillCipher
from .tiers.tier6_onetimepad     import OneTimePad
from .tiers.tier7_railfence      import RailFenceCipher

logger = logging.getLogger(__name__)

CIPHERS: Dict[str, type] = {
    "caesar":   CaesarCipher,
    "mono":     MonoalphabeticCipher,
    "vigenere": VigenereCipher,
    "playfair": PlayfairCipher,
    "hill":     HillCipher,
    "otp":      OneTimePad,
    "rail":     RailFenceCipher,
}

ALIASES: Dict[str, str] = {
    "shift":          "caesar",
    "monoalphabetic": "mono",
    "substitution":   "mono",
    "polyalphabetic": "vigenere",
    "onetimepad":     "otp",
    "one-time-pad":   "otp",
    "railfence":      "rail",
    "rail-fence":     "rail",
    "zigzag":         "rail",
}


def available_ciphers() -> List[str]:
    return sorted(CIPHERS)


def resolve(name: str) -> str:
    """Canonical cipher name for ``name`` or one of its aliases."""
    key = name.strip().lower()
    key = ALIASES.get(key, key)
    if key not in CIPHERS:
        raise UnknownCipher(
            f"Unknown cipher {name!r}. Available: {', '.join(available_ciphers())}"
        )
    return key


def get_cipher(name: str, key):
    """Build the named cipher with ``key`` (validated on construction)."""
    canonical = resolve(name)
    logger.debug(f"Building {canonical} cipher")
    return CIPHERS[canonical](key)


def encode(name: str, text: str, key) -> str:
    return get_cipher(name, key).encode(text)


def decode(name: str, text: str, key) -> str:
    return get_cipher(name, key).decode(text)
