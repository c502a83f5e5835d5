"""
Shared alphabet helpers.

The case-preserving tiers (Caesar, monoalphabetic, Vigenère) all walk
the raw text through ``map_letters`` so that casing and punctuation are
handled one way everywhere. The letters-only tiers use ``normalize``.
"""

import string
from typing import Callable, Optional

ALPHABET = string.ascii_uppercase
MODULUS  = 26
FILLER   = "X"

_LETTERS = frozenset(string.ascii_letters)


def letter_index(ch: str) -> Optional[int]:
    """Zero-based alphabet position of an ASCII letter, else None."""
    if ch not in _LETTERS:
        return None
    return ord(ch.upper()) - ord("A")

def to_letter(index: int, upper: bool = True) -> str:
    """Letter for ``index`` (reduced mod 26) in the requested case."""
    ch = ALPHABET[index % MODULUS]
    return ch if upper else ch.lower()

def normalize(text: str) -> str:
    """Uppercase letters-only projection of ``text``."""
    return "".join(ch.upper() for ch in text if ch in _LETTERS)

def to_values(text: str) -> list:
    """Normalized text as a list of 0-25 integers."""
    return [ord(ch) - ord("A") for ch in normalize(text)]

def from_values(values) -> str:
    return "".join(ALPHABET[v % MODULUS] for v in values)

def map_letters(text: str,
                transform: Callable[[int, int], Optional[int]]) -> str:
    """
    Rebuild ``text`` letter by letter.

    ``transform(index, n)`` receives the letter's alphabet position and
    ``n``, the number of letters seen before it (non-letters do not
    count). It returns the new position, or None to keep the original
    character. Case is taken from the input character; non-letters pass
    through untouched.
    """
    out = []
    n = 0
    for ch in text:
        idx = letter_index(ch)
        if idx is None:
            out.append(ch)
            continue
        new = transform(idx, n)
        n += 1
        out.append(ch if new is None else to_letter(new, ch.isupper()))
    return "".join(out)
