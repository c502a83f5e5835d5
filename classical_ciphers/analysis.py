"""
Letter frequency analysis.

Shows how much of the plaintext's letter distribution survives a cipher:
substitution tiers permute the bars, transposition keeps them exactly,
and a good one-time pad flattens them.
"""

from collections import Counter
from typing import Dict, List, NamedTuple

from .alphabet import normalize

# Percentages for English text, most common first.
ENGLISH_FREQUENCIES: Dict[str, float] = {
    "E": 12.7, "T": 9.1, "A": 8.2, "O": 7.5, "I": 7.0, "N": 6.7, "S": 6.3,
    "H": 6.1, "R": 6.0, "D": 4.3, "L": 4.0, "C": 2.8, "U": 2.8, "M": 2.4,
    "W": 2.4, "F": 2.2, "G": 2.0, "Y": 2.0, "P": 1.9, "B": 1.5, "V": 1.0,
    "K": 0.8, "J": 0.2, "X": 0.2, "Q": 0.1, "Z": 0.1,
}


class LetterCount(NamedTuple):
    letter: str
    count: int
    percentage: float


class FrequencyComparison(NamedTuple):
    input: List[LetterCount]
    output: List[LetterCount]
    max_count: int


def letter_frequencies(text: str) -> List[LetterCount]:
    """
    Count letters in the normalized text.

    Sorted by descending count, ties broken alphabetically. Letters that
    never occur are left out; text without letters gives an empty list.
    """
    clean = normalize(text)
    total = len(clean)
    counts = Counter(clean)
    return [
        LetterCount(letter, count, round(count / total * 100, 2))
        for letter, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    ]


def compare_frequencies(input_text: str, output_text: str,
                        top: int = 5) -> FrequencyComparison:
    """Top ``top`` letters on each side plus a shared bar-scale maximum."""
    before = letter_frequencies(input_text)
    after = letter_frequencies(output_text)
    max_count = max(before[0].count if before else 1,
                    after[0].count if after else 1)
    return FrequencyComparison(before[:top], after[:top], max_count)
