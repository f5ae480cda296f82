"""CLI entry point for strsearch.batch.

Usage:
    python -m strsearch.batch [options] [batch_file]

Example:
    python -m strsearch.batch
    python -m strsearch.batch -p aaa -t aaaa --compare
    python -m strsearch.batch --algorithm constant_space searches.yaml
"""

from .runner import main
import sys

if __name__ == '__main__':
    sys.exit(main())
