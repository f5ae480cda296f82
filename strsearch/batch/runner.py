"""Batch runner and command line entry point.

With no arguments the CLI prints the index of the worked example, a
periodic pattern whose first occurrence starts at 3.
"""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from strsearch.engine import SearchResult, search, search_result
from strsearch.logging_config import setup_logging
from strsearch.protocols import SearchAlgorithm

from .parser import parse_batch_file, BatchConfig

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "aaaaabaaaabaaabaabab"
DEFAULT_TEXT = "aaaaaaaabaaaabaaabaabab"


@dataclass
class BatchReport:
    """Results of running a batch file.

    Attributes:
        results: One SearchResult per search, in file order.
        mismatches: Human-readable descriptions of searches whose result
            differed from 'expected' or where matchers disagreed.
    """
    results: List[SearchResult] = field(default_factory=list)
    mismatches: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when every search met its expectation."""
        return not self.mismatches


def compare_algorithms(pattern: str, text: str) -> Dict[SearchAlgorithm, int]:
    """Run every matcher on the same input.

    Returns:
        Mapping of algorithm to the index it returned.
    """
    return {algorithm: search(pattern, text, algorithm) for algorithm in SearchAlgorithm}


def run_searches(
    batch: BatchConfig,
    algorithm: Optional[SearchAlgorithm] = None,
    compare: bool = False,
) -> BatchReport:
    """Run every search in a parsed batch.

    The algorithm is chosen per search, first match wins: the
    ``algorithm`` argument, the search's own 'algorithm', the batch
    config's 'algorithm', then the prefix table.

    Args:
        batch: Parsed batch file.
        algorithm: Override for every search.
        compare: Also run all matchers and record disagreements.

    Returns:
        BatchReport with results and mismatches.
    """
    default = batch.config.get('algorithm', SearchAlgorithm.PREFIX_TABLE.value)
    report = BatchReport()

    for i, entry in enumerate(batch.searches):
        chosen = algorithm or SearchAlgorithm.from_name(entry.get('algorithm', default))
        result = search_result(entry['pattern'], entry['text'], chosen)
        report.results.append(result)

        expected = entry.get('expected')
        if expected is not None and result.index != expected:
            report.mismatches.append(
                f"Search {i}: expected {expected}, got {result.index}"
            )

        if compare:
            indexes = compare_algorithms(entry['pattern'], entry['text'])
            if len(set(indexes.values())) > 1:
                found = ', '.join(f"{a.value}={idx}" for a, idx in indexes.items())
                report.mismatches.append(f"Search {i}: matchers disagree ({found})")

    logger.info("Ran %d search(es), %d mismatch(es)",
                len(report.results), len(report.mismatches))
    return report


def run_batch(
    batch_path: Union[str, Path],
    algorithm: Optional[SearchAlgorithm] = None,
    compare: bool = False,
    verbose: bool = False,
) -> BatchReport:
    """Load and run searches from a YAML batch file.

    Args:
        batch_path: Path to the YAML file
        algorithm: Override the algorithm for every search
        compare: Also run all matchers and record disagreements
        verbose: Print progress information

    Returns:
        BatchReport with one result per search

    Example:
        report = run_batch('searches.yaml')
        if report.ok:
            print(f"All {len(report.results)} searches passed")
    """
    batch_path = Path(batch_path)
    batch = parse_batch_file(batch_path)

    if verbose:
        print(f"Loaded {len(batch.searches)} search(es) from {batch_path}")

    return run_searches(batch, algorithm=algorithm, compare=compare)


def main(args: Optional[List[str]] = None) -> int:
    """CLI entry point.

    Usage:
        python -m strsearch.batch [options] [batch_file]

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code: 0 on success, 1 on error, 2 when a single search finds
        nothing or a batch has mismatches.
    """
    import argparse

    parser = argparse.ArgumentParser(
        description='Find the first occurrence of a pattern in a text',
        prog='python -m strsearch.batch',
    )
    parser.add_argument(
        'batch_file',
        nargs='?',
        default=None,
        help='YAML file listing searches to run',
    )
    parser.add_argument(
        '-p', '--pattern',
        type=str,
        default=None,
        help='Pattern to search for (default: worked example)',
    )
    parser.add_argument(
        '-t', '--text',
        type=str,
        default=None,
        help='Text to search in (default: worked example)',
    )
    parser.add_argument(
        '-a', '--algorithm',
        choices=[a.value for a in SearchAlgorithm],
        default=None,
        help='Matcher to use (default: prefix_table)',
    )
    parser.add_argument(
        '--compare',
        action='store_true',
        help='Run every matcher and report disagreements',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Print progress information',
    )

    parsed = parser.parse_args(args)

    if parsed.batch_file and (parsed.pattern is not None or parsed.text is not None):
        parser.error("--pattern/--text cannot be combined with a batch file")
    if (parsed.pattern is None) != (parsed.text is None):
        parser.error("--pattern and --text must be given together")

    setup_logging(parsed.verbose)
    algorithm = SearchAlgorithm.from_name(parsed.algorithm) if parsed.algorithm else None

    try:
        if parsed.batch_file:
            report = run_batch(
                parsed.batch_file,
                algorithm=algorithm,
                compare=parsed.compare,
                verbose=parsed.verbose,
            )
            for i, result in enumerate(report.results):
                print(f"{i}: {result.index} ({result.algorithm.value})")
            for mismatch in report.mismatches:
                print(f"Mismatch: {mismatch}", file=sys.stderr)
            return 0 if report.ok else 2

        if parsed.pattern is None:
            pattern, text = DEFAULT_PATTERN, DEFAULT_TEXT
        else:
            pattern, text = parsed.pattern, parsed.text

        if parsed.compare:
            indexes = compare_algorithms(pattern, text)
            for a, index in indexes.items():
                print(f"{a.value}: {index}")
            if len(set(indexes.values())) > 1:
                print("Warning: matchers disagree", file=sys.stderr)
                return 2
            return 0

        result = search_result(pattern, text, algorithm or SearchAlgorithm.PREFIX_TABLE)
        print(result.index)
        return 0 if result.found else 2

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if parsed.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
