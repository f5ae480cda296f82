"""Brute-force reference matcher.

Tries every alignment of the pattern against the text. O(m * n) time, so
it is only meant as an oracle for checking the real matchers.
"""

from typing import Sequence

from .protocols import NOT_FOUND, validate_pattern


def naive_search(pattern: Sequence, text: Sequence) -> int:
    """Find the first occurrence of pattern in text by direct comparison.

    Raises:
        EmptyPatternError: If pattern is empty.
    """
    validate_pattern(pattern)

    length = len(pattern)
    for start in range(len(text) - length + 1):
        if all(text[start + k] == pattern[k] for k in range(length)):
            return start
    return NOT_FOUND
