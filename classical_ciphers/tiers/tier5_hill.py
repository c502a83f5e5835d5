"""
Tier 5 — LINEAR ALGEBRA: Hill Cipher (2×2)
==========================================
Pairs of letters are treated as vectors and multiplied by a key matrix
modulo 26.

Historical note: Lester S. Hill, 1929. The first polygraphic cipher
that was practical to run on more than three symbols at once. Linear, so
a handful of known plaintext pairs recovers the key.

Key:      four integers "a,b,c,d" -> [[a, b], [c, d]]
          det = ad - bc must be coprime with 26 (odd, not a multiple of 13)
Encoding: C = K · P mod 26, odd tail padded with X (23)
Decoding: P = K⁻¹ · C mod 26, trailing odd letter dropped
Output:   uppercase letters only
"""

import logging
from math import gcd
from typing import Sequence, Tuple, Union

from ..alphabet import MODULUS, from_values, to_values
from ..errors import NonInvertibleKey
from ..keys import parse_int_list

logger = logging.getLogger(__name__)

Matrix = Tuple[Tuple[int, int], Tuple[int, int]]

FILLER_VALUE = 23   # X


def parse_key(key: Union[str, Sequence[int]]) -> Matrix:
    """Parse "a,b,c,d" (or four ints) into a 2×2 matrix."""
    a, b, c, d = parse_int_list(key, 4)
    return ((a, b), (c, d))


def determinant(m: Matrix) -> int:
    return m[0][0] * m[1][1] - m[0][1] * m[1][0]


def mod_inverse(value: int, modulus: int = MODULUS) -> int:
    """Brute-force modular inverse; raises NonInvertibleKey if none exists."""
    value %= modulus
    for x in range(1, modulus):
        if (value * x) % modulus == 1:
            return x
    raise NonInvertibleKey(f"{value} has no inverse modulo {modulus}.")


def inverse_matrix(m: Matrix) -> Matrix:
    """Adjugate times det⁻¹, every entry reduced into [0, 26)."""
    det_inv = mod_inverse(determinant(m))
    (a, b), (c, d) = m
    return (
        ((d * det_inv) % MODULUS, (-b * det_inv) % MODULUS),
        ((-c * det_inv) % MODULUS, (a * det_inv) % MODULUS),
    )


def multiply(m: Matrix, x: int, y: int) -> Tuple[int, int]:
    return (
        (m[0][0] * x + m[0][1] * y) % MODULUS,
        (m[1][0] * x + m[1][1] * y) % MODULUS,
    )


class HillCipher:
    """2×2 modular matrix block cipher."""

    BLOCK_SIZE = 2

    def __init__(self, key: Union[str, Sequence[int]]):
        self._matrix = parse_key(key)
        det = determinant(self._matrix)
        if gcd(det % MODULUS, MODULUS) != 1:
            raise NonInvertibleKey(
                f"Invalid key: determinant {det} must be coprime with 26."
            )
        self._inverse = inverse_matrix(self._matrix)
        logger.debug(f"Hill det={det} inverse={self._inverse}")

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    @property
    def inverse(self) -> Matrix:
        return self._inverse

    def encode(self, plaintext: str) -> str:
        values = to_values(plaintext)
        if len(values) % self.BLOCK_SIZE:
            values.append(FILLER_VALUE)
        out = []
        for i in range(0, len(values), self.BLOCK_SIZE):
            out.extend(multiply(self._matrix, values[i], values[i + 1]))
        return from_values(out)

    def decode(self, ciphertext: str) -> str:
        values = to_values(ciphertext)
        out = []
        for i in range(0, len(values) - 1, self.BLOCK_SIZE):
            out.extend(multiply(self._inverse, values[i], values[i + 1]))
        return from_values(out)


def encode(text: str, key: Union[str, Sequence[int]]) -> str:
    return HillCipher(key).encode(text)


def decode(text: str, key: Union[str, Sequence[int]]) -> str:
    return HillCipher(key).decode(text)
