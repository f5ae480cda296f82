"""Protocols, enums and shared contract for the matchers.

Every matcher takes a pattern and a text and returns the index of the
first occurrence of the pattern, or NOT_FOUND.
"""

from enum import Enum
from typing import Protocol, Sequence, runtime_checkable

NOT_FOUND = -1


class EmptyPatternError(ValueError):
    """Raised when a search is given an empty pattern."""
    pass


class SearchAlgorithm(Enum):
    """Which matcher a search should run.

    The value is the name used on the command line and in batch files.
    """
    PREFIX_TABLE = 'prefix_table'        # failure table + single scan
    CONSTANT_SPACE = 'constant_space'    # two rolling indices, no table
    NAIVE = 'naive'                      # brute force, reference only

    @classmethod
    def from_name(cls, name: str) -> 'SearchAlgorithm':
        """Look up an algorithm by name.

        Accepts dashes in place of underscores and ignores case.

        Raises:
            ValueError: If no algorithm has this name.
        """
        normalized = name.strip().lower().replace('-', '_')
        for algorithm in cls:
            if algorithm.value == normalized:
                return algorithm
        valid = ', '.join(a.value for a in cls)
        raise ValueError(f"Unknown algorithm: {name!r}. Valid algorithms: {valid}")


@runtime_checkable
class Matcher(Protocol):
    """Callable that finds the first occurrence of pattern in text."""

    def __call__(self, pattern: Sequence, text: Sequence) -> int:
        """Return the start index of the first occurrence, or NOT_FOUND."""
        ...


def validate_pattern(pattern: Sequence) -> None:
    """Reject patterns no matcher can search for.

    Raises:
        EmptyPatternError: If pattern has no elements.
    """
    if len(pattern) == 0:
        raise EmptyPatternError("Pattern must contain at least one element")
