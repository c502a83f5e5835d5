"""
Tier 4 — DIGRAPH: Playfair Cipher
=================================
Letters are enciphered two at a time using a 5×5 keyed square.

Historical note: Charles Wheatstone, 1854, promoted by Lord Playfair.
Used by the British in the Boer War and WWI. Working on pairs hides
single-letter frequencies, but digraph frequencies still leak.

Grid:     keyword letters (J folded into I) in first-seen order, then the
          rest of A-Z without J, row-major
Encoding: doubled letters in a pair are split with X, an odd tail is
          padded with X
Rules:    same row    -> one step right (decode: left)
          same column -> one step down  (decode: up)
          rectangle   -> own row, partner's column (self-inverse)
Output:   uppercase letters only
"""

import logging
from typing import List, Tuple

from ..alphabet import ALPHABET, FILLER, normalize
from ..errors import EmptyKey

logger = logging.getLogger(__name__)

GRID_SIZE = 5
GRID_ALPHABET = ALPHABET.replace("J", "")


def _fold(text: str) -> str:
    return normalize(text).replace("J", "I")


def build_grid(keyword: str) -> str:
    """
    Return the 25 grid letters as a row-major string.
    Row r, column c is ``grid[r * 5 + c]``.
    """
    cells = []
    for ch in _fold(keyword) + GRID_ALPHABET:
        if ch not in cells:
            cells.append(ch)
    return "".join(cells)


def prepare_plaintext(text: str) -> List[str]:
    """Split into digraphs, inserting X between doubled letters greedily."""
    clean = _fold(text)
    pairs = []
    i = 0
    while i < len(clean):
        a = clean[i]
        b = clean[i + 1] if i + 1 < len(clean) else FILLER
        if a == b:
            pairs.append(a + FILLER)
            i += 1
        else:
            pairs.append(a + b)
            i += 2
    return pairs


def prepare_ciphertext(text: str) -> List[str]:
    """Consecutive pairs; a trailing odd letter is dropped."""
    clean = _fold(text)
    return [clean[i:i + 2] for i in range(0, len(clean) - 1, 2)]


class PlayfairCipher:
    """5×5 keyed-square digraph substitution."""

    def __init__(self, key: str):
        if not key or not key.strip():
            raise EmptyKey("Key cannot be empty.")
        if not _fold(key):
            raise EmptyKey("Key must contain at least one letter.")
        self._grid = build_grid(key)
        logger.debug(f"Playfair grid={self._grid}")

    @property
    def grid(self) -> Tuple[str, ...]:
        """The square as five row strings."""
        return tuple(self._grid[r * GRID_SIZE:(r + 1) * GRID_SIZE]
                     for r in range(GRID_SIZE))

    def _locate(self, ch: str) -> Tuple[int, int]:
        return divmod(self._grid.index(ch), GRID_SIZE)

    def _cell(self, row: int, col: int) -> str:
        return self._grid[(row % GRID_SIZE) * GRID_SIZE + col % GRID_SIZE]

    def _transform(self, pair: str, step: int) -> str:
        r1, c1 = self._locate(pair[0])
        r2, c2 = self._locate(pair[1])
        if r1 == r2:
            return self._cell(r1, c1 + step) + self._cell(r2, c2 + step)
        if c1 == c2:
            return self._cell(r1 + step, c1) + self._cell(r2 + step, c2)
        return self._cell(r1, c2) + self._cell(r2, c1)

    def encode(self, plaintext: str) -> str:
        return "".join(self._transform(p, 1) for p in prepare_plaintext(plaintext))

    def decode(self, ciphertext: str) -> str:
        return "".join(self._transform(p, -1) for p in prepare_ciphertext(ciphertext))


def encode(text: str, key: str) -> str:
    return PlayfairCipher(key).encode(text)


def decode(text: str, key: str) -> str:
    return PlayfairCipher(key).decode(text)
