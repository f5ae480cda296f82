"""Batch searches defined in YAML, plus the command line entry point.

Example searches.yaml:
    config:
      algorithm: constant_space

    searches:
      - pattern: "aaaaabaaaabaaabaabab"
        text: "aaaaaaaabaaaabaaabaabab"
        expected: 3

Usage:
    from strsearch.batch import run_batch
    report = run_batch('searches.yaml')

CLI:
    python -m strsearch.batch searches.yaml
"""

from .parser import parse_batch_file, parse_batch_string, BatchConfig, BatchParseError
from .runner import run_batch, run_searches, compare_algorithms, BatchReport, main

__all__ = [
    'parse_batch_file',
    'parse_batch_string',
    'BatchConfig',
    'BatchParseError',
    'run_batch',
    'run_searches',
    'compare_algorithms',
    'BatchReport',
    'main',
]
