"""Exact substring search.

Two interchangeable matchers find the first occurrence of a pattern in a
text:

- prefix_table_search: builds a failure table over the pattern, O(m)
  space, then scans the text once
- constant_space_search: scans the text with O(1) auxiliary memory

Both return the 0-based start index, or NOT_FOUND (-1).

Example:
    from strsearch import search, SearchAlgorithm

    search("aaa", "aaaa")                                  # 0
    search("x", "abcx", SearchAlgorithm.CONSTANT_SPACE)    # 3
"""

from .protocols import (
    NOT_FOUND,
    EmptyPatternError,
    Matcher,
    SearchAlgorithm,
    validate_pattern,
)
from .prefix_table import build_repeat_states, prefix_table_search
from .constant_space import critical_factorization, constant_space_search
from .reference import naive_search
from .engine import SearchResult, get_matcher, search, search_result

__all__ = [
    # Protocols and enums
    'NOT_FOUND',
    'EmptyPatternError',
    'Matcher',
    'SearchAlgorithm',
    'validate_pattern',
    # Matchers
    'build_repeat_states',
    'prefix_table_search',
    'critical_factorization',
    'constant_space_search',
    'naive_search',
    # Dispatcher
    'SearchResult',
    'get_matcher',
    'search',
    'search_result',
]
