"""
Tier 7 — TRANSPOSITION: Rail Fence Cipher
=========================================
Nothing is substituted; the characters are only reordered.

The text is written in a zigzag down and up across N rails, then read
off rail by rail. Since the zigzag depends only on (length, rails), the
decoder can rebuild it: mark the path, fill the marked cells rail by rail
with the ciphertext, then walk the path again.

Example (3 rails):
    W . . . E . . . C . . . R . . . L . . . T . . . E
    . E . R . D . S . O . E . E . F . E . A . O . C .
    . . A . . . I . . . V . . . D . . . E . . . N . .

Key:     number of rails, at least 2
Output:  whitespace removed; case and punctuation kept
"""

from typing import List

from ..errors import InvalidRailCount
from ..keys import IntKey, parse_int_key

MIN_RAILS = 2


def zigzag(length: int, rails: int) -> List[int]:
    """Rail index for each position 0..length-1 of the text."""
    pattern = []
    rail, direction = 0, 1
    for _ in range(length):
        pattern.append(rail)
        if rail == 0:
            direction = 1
        elif rail == rails - 1:
            direction = -1
        rail += direction
    return pattern

def _strip_whitespace(text: str) -> str:
    return "".join(text.split())

class RailFenceCipher:
    """Zigzag transposition over N rails."""

    _MARK = object()

    def __init__(self, rails: IntKey):
        self._rails = parse_int_key(rails, "Number of rails")
        if self._rails < MIN_RAILS:
            raise InvalidRailCount(
                f"Number of rails must be at least {MIN_RAILS}, got {self._rails}."
            )

    @property
    def rails(self) -> int:
        return self._rails

    def _rows(self, length: int) -> int:
        """Rails the zigzag actually reaches for a text of ``length``."""
        return min(self._rails, length)

    def encode(self, plaintext: str) -> str:
        clean = _strip_whitespace(plaintext)
        if not clean:
            return ""
        fence = [[] for _ in range(self._rows(len(clean)))]
        for ch, rail in zip(clean, zigzag(len(clean), self._rails)):
            fence[rail].append(ch)
        return "".join("".join(row) for row in fence)

    def decode(self, ciphertext: str) -> str:
        clean = _strip_whitespace(ciphertext)
        if not clean:
            return ""
        path = zigzag(len(clean), self._rails)

        # 1. mark the cells the zigzag visits
        fence = [[None] * len(clean) for _ in range(self._rows(len(clean)))]
        for col, rail in enumerate(path):
            fence[rail][col] = self._MARK

        # 2. fill marked cells rail by rail with the ciphertext
        chars = iter(clean)
        for row in fence:
            for col, cell in enumerate(row):
                if cell is self._MARK:
                    row[col] = next(chars)

        # 3. read back along the zigzag
        return "".join(fence[rail][col] for col, rail in enumerate(path))


def encode(text: str, rails: IntKey) -> str:
    return RailFenceCipher(rails).encode(text)


def decode(text: str, rails: IntKey) -> str:
    return RailFenceCipher(rails).decode(text)
