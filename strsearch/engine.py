"""Search dispatcher that routes a search to the chosen matcher.

The matchers themselves are plain functions; this module maps a
SearchAlgorithm to the function, validates input once, and logs the
outcome.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Sequence, Union

from .constant_space import constant_space_search
from .prefix_table import prefix_table_search
from .protocols import NOT_FOUND, Matcher, SearchAlgorithm, validate_pattern
from .reference import naive_search

logger = logging.getLogger(__name__)

_MATCHERS: Dict[SearchAlgorithm, Matcher] = {
    SearchAlgorithm.PREFIX_TABLE: prefix_table_search,
    SearchAlgorithm.CONSTANT_SPACE: constant_space_search,
    SearchAlgorithm.NAIVE: naive_search,
}


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a single search.

    Attributes:
        pattern: The pattern that was searched for.
        text: The text that was searched.
        algorithm: Matcher that produced the index.
        index: Start of the first occurrence, or NOT_FOUND.
    """
    pattern: Sequence
    text: Sequence
    algorithm: SearchAlgorithm
    index: int

    @property
    def found(self) -> bool:
        """Whether the pattern occurs in the text."""
        return self.index != NOT_FOUND


def _resolve(algorithm: Union[SearchAlgorithm, str]) -> SearchAlgorithm:
    if isinstance(algorithm, SearchAlgorithm):
        return algorithm
    return SearchAlgorithm.from_name(algorithm)


def get_matcher(algorithm: Union[SearchAlgorithm, str]) -> Matcher:
    """Return the matcher function for an algorithm.

    Args:
        algorithm: SearchAlgorithm member or its name.

    Raises:
        ValueError: If the name is not a known algorithm.
    """
    return _MATCHERS[_resolve(algorithm)]


def search(
    pattern: Sequence,
    text: Sequence,
    algorithm: Union[SearchAlgorithm, str] = SearchAlgorithm.PREFIX_TABLE,
) -> int:
    """Find the first occurrence of pattern in text.

    Args:
        pattern: Non-empty sequence to look for.
        text: Sequence to search in.
        algorithm: Which matcher to run (default: prefix table).

    Returns:
        0-based start index of the first match, or NOT_FOUND (-1).

    Raises:
        EmptyPatternError: If pattern is empty.
        ValueError: If algorithm is an unknown name.

    Example:
        search("aaa", "aaaa")                     # 0
        search("x", "abcx", "constant_space")     # 3
    """
    resolved = _resolve(algorithm)
    validate_pattern(pattern)

    index = _MATCHERS[resolved](pattern, text)
    logger.debug(
        "%s search for pattern of length %d in text of length %d -> %d",
        resolved.value, len(pattern), len(text), index,
    )
    return index


def search_result(
    pattern: Sequence,
    text: Sequence,
    algorithm: Union[SearchAlgorithm, str] = SearchAlgorithm.PREFIX_TABLE,
) -> SearchResult:
    """Like search(), but wrap the index in a SearchResult."""
    resolved = _resolve(algorithm)
    return SearchResult(
        pattern=pattern,
        text=text,
        algorithm=resolved,
        index=search(pattern, text, resolved),
    )
