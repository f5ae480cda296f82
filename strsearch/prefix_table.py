"""Prefix-table matcher.

The pattern is turned into a string-matching automaton whose states count
how many leading pattern elements have been matched. The automaton is
stored compactly as ``repeat_states``: entry ``i`` is the length of the
longest "prefix run" ending at pattern position ``i``, i.e. the longest
proper prefix of ``pattern[:i + 1]`` that is also its suffix. A state that
sits on a prefix run of length ``r`` inherits the transitions of state
``r``, so a mismatch never has to re-read text.

Building the table is O(m) time and space; the scan is O(n) time.
"""

from typing import List, Sequence

from .protocols import NOT_FOUND, validate_pattern


def build_repeat_states(pattern: Sequence) -> List[int]:
    """Compute the prefix-run length for every pattern position.

    A run extends when the next element repeats the element just after
    the current run. Otherwise the shorter runs nested inside it are tried
    in turn, ending with a restart at ``pattern[0]`` (length 1) or no run
    at all (length 0).

    Args:
        pattern: Non-empty sequence to build the table for.

    Returns:
        List with one entry per pattern position; entry 0 is always 0.

    Raises:
        EmptyPatternError: If pattern is empty.

    Example:
        build_repeat_states("aabaaac")  # [0, 1, 0, 1, 2, 2, 0]
    """
    validate_pattern(pattern)

    repeat_states = [0] * len(pattern)
    for i in range(1, len(pattern)):
        prev = repeat_states[i - 1]
        while prev > 0 and pattern[i] != pattern[prev]:
            prev = repeat_states[prev - 1]
        if pattern[i] == pattern[prev]:
            repeat_states[i] = prev + 1
        else:
            repeat_states[i] = 0
    return repeat_states


def prefix_table_search(pattern: Sequence, text: Sequence) -> int:
    """Find the first occurrence of pattern in text.

    ``state`` is the index of the last matched pattern element, so -1 is
    the start state (nothing matched) and ``len(pattern) - 1`` accepts.

    Args:
        pattern: Non-empty sequence to look for.
        text: Sequence to search in; may be empty.

    Returns:
        0-based start index of the first match, or NOT_FOUND.

    Raises:
        EmptyPatternError: If pattern is empty.
    """
    repeat_states = build_repeat_states(pattern)
    accept = len(pattern) - 1

    state = -1
    for i, element in enumerate(text):
        # Fall back to shorter runs until one can take this element
        while state != -1 and element != pattern[state + 1]:
            state = repeat_states[state] - 1

        if element == pattern[state + 1]:
            state += 1
            if state == accept:
                return i - state

    return NOT_FOUND
