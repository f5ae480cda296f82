"""Constant-space matcher.

Instead of a failure table, the pattern is split at a critical position
into a left and right half. The right half is matched left to right and
the left half right to left; the split guarantees that any mismatch allows
a shift that never skips an occurrence. Only a handful of integers are
kept, so auxiliary memory is O(1) while the scan stays O(m + n).

Two rolling indices drive the scan:

- ``match_index``: position in the pattern currently compared against
  the text window (right half).
- ``prefix_run``: length of the pattern prefix already known to match the
  current window, carried over when a periodic pattern shifts by its
  period. It lets the scan skip elements it has already compared.
"""

from typing import Sequence, Tuple

from .protocols import NOT_FOUND, validate_pattern


def _maximal_suffix(pattern: Sequence, reverse: bool) -> Tuple[int, int]:
    """Find the lexicographically maximal suffix and its period.

    Args:
        pattern: Non-empty sequence of orderable elements.
        reverse: Use the reversed element ordering.

    Returns:
        Tuple of (index just before the suffix starts, period of suffix).
    """
    length = len(pattern)
    suffix = -1
    j = 0
    k = period = 1

    while j + k < length:
        a = pattern[j + k]
        b = pattern[suffix + k]
        if (b < a) if reverse else (a < b):
            # Candidate is smaller; the whole prefix so far is one period
            j += k
            k = 1
            period = j - suffix
        elif a == b:
            if k != period:
                k += 1
            else:
                j += period
                k = 1
        else:
            # Candidate is larger; restart from here
            suffix = j
            j += 1
            k = period = 1

    return suffix, period


def critical_factorization(pattern: Sequence) -> Tuple[int, int]:
    """Split pattern at a critical position.

    Takes the longer of the maximal suffixes under the two opposite
    orderings of the elements.

    Args:
        pattern: Non-empty sequence of orderable elements.

    Returns:
        Tuple of (split, period) where ``pattern[split:]`` is the right
        half and ``period`` is the period of that right half.

    Raises:
        EmptyPatternError: If pattern is empty.
    """
    validate_pattern(pattern)

    suffix, period = _maximal_suffix(pattern, reverse=False)
    suffix_rev, period_rev = _maximal_suffix(pattern, reverse=True)

    if suffix_rev < suffix:
        return suffix + 1, period
    return suffix_rev + 1, period_rev


def _is_periodic(pattern: Sequence, split: int, period: int) -> bool:
    """Check whether the left half recurs one period later."""
    if split + period > len(pattern):
        return False
    return all(pattern[k] == pattern[k + period] for k in range(split))


def constant_space_search(pattern: Sequence, text: Sequence) -> int:
    """Find the first occurrence of pattern in text without a table.

    Args:
        pattern: Non-empty sequence of orderable elements.
        text: Sequence to search in; may be empty.

    Returns:
        0-based start index of the first match, or NOT_FOUND.

    Raises:
        EmptyPatternError: If pattern is empty.
    """
    split, period = critical_factorization(pattern)
    length = len(pattern)
    text_length = len(text)
    periodic = _is_periodic(pattern, split, period)
    if not periodic:
        # Halves are distinct: any full-window mismatch allows a maximal shift
        period = max(split, length - split) + 1

    start = 0
    prefix_run = 0
    while start + length <= text_length:
        match_index = max(split, prefix_run)
        while match_index < length and pattern[match_index] == text[start + match_index]:
            match_index += 1

        if match_index < length:
            start += match_index - split + 1
            prefix_run = 0
            continue

        left = split - 1
        while left >= prefix_run and pattern[left] == text[start + left]:
            left -= 1
        if left < prefix_run:
            return start

        start += period
        if periodic:
            prefix_run = length - period

    return NOT_FOUND
