"""YAML parsing and validation for batch search files.

A batch file lists pattern/text pairs to search, with optional shared
config:

    config:
      algorithm: constant_space

    searches:
      - pattern: "aaa"
        text: "aaaa"
        expected: 0
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Any, Union

import yaml

from strsearch.protocols import SearchAlgorithm


@dataclass
class BatchConfig:
    """Parsed batch file."""
    config: Dict[str, Any] = field(default_factory=dict)
    searches: List[Dict[str, Any]] = field(default_factory=list)


class BatchParseError(Exception):
    """Error parsing or validating a batch file."""
    pass


def parse_batch_file(path: Union[str, Path]) -> BatchConfig:
    """Parse and validate a batch YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        BatchConfig with parsed config and searches

    Raises:
        BatchParseError: If the file is invalid or missing required fields
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Batch file not found: {path}")

    with open(path, encoding='utf-8') as f:
        return parse_batch_string(f.read())


def parse_batch_string(content: str) -> BatchConfig:
    """Parse batch YAML content from a string.

    Args:
        content: YAML content as string

    Returns:
        BatchConfig with parsed config and searches
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise BatchParseError(f"Invalid YAML syntax: {e}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise BatchParseError("YAML root must be a mapping")

    return _validate_batch_data(data)


def _validate_batch_data(data: Dict[str, Any]) -> BatchConfig:
    """Validate parsed YAML data structure.

    Raises:
        BatchParseError: If validation fails
    """
    config = data.get('config', {})
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise BatchParseError("'config' must be a mapping")
    if 'algorithm' in config:
        _validate_algorithm(config['algorithm'], "'config'")

    searches = data.get('searches', [])
    if searches is None:
        searches = []
    if not isinstance(searches, list):
        raise BatchParseError("'searches' must be a list")

    validated = [_validate_search(entry, i) for i, entry in enumerate(searches)]
    return BatchConfig(config=config, searches=validated)


def _validate_search(entry: Any, index: int) -> Dict[str, Any]:
    """Validate a single search entry.

    Args:
        entry: Search dictionary
        index: Index in searches list (for error messages)

    Raises:
        BatchParseError: If validation fails
    """
    if not isinstance(entry, dict):
        raise BatchParseError(f"Search {index} must be a mapping")

    if 'pattern' not in entry:
        raise BatchParseError(f"Search {index} missing required field 'pattern'")
    if not isinstance(entry['pattern'], str):
        raise BatchParseError(f"Search {index}: 'pattern' must be a string")
    if not entry['pattern']:
        raise BatchParseError(f"Search {index}: 'pattern' must not be empty")

    if 'text' not in entry:
        raise BatchParseError(f"Search {index} missing required field 'text'")
    if not isinstance(entry['text'], str):
        raise BatchParseError(f"Search {index}: 'text' must be a string")

    # bool is an int subclass; reject it explicitly
    if 'expected' in entry:
        expected = entry['expected']
        if isinstance(expected, bool) or not isinstance(expected, int):
            raise BatchParseError(f"Search {index}: 'expected' must be an integer")

    if 'algorithm' in entry:
        _validate_algorithm(entry['algorithm'], f"Search {index}")

    return entry


def _validate_algorithm(name: Any, where: str) -> None:
    if not isinstance(name, str):
        raise BatchParseError(f"{where}: 'algorithm' must be a string")
    try:
        SearchAlgorithm.from_name(name)
    except ValueError as e:
        raise BatchParseError(f"{where}: {e}")
