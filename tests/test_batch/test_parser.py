"""Tests for the batch file parser."""

import pytest

pytest.importorskip("yaml")

from strsearch.batch.parser import (
    parse_batch_file,
    parse_batch_string,
    BatchConfig,
    BatchParseError,
)


class TestParseBatchString:
    """Tests for parse_batch_string function."""

    def test_empty_yaml(self):
        """Test parsing empty YAML."""
        batch = parse_batch_string("")
        assert batch.config == {}
        assert batch.searches == []

    def test_config_only(self):
        """Test parsing config without searches."""
        yaml = """
config:
  algorithm: constant_space
"""
        batch = parse_batch_string(yaml)
        assert batch.config['algorithm'] == 'constant_space'
        assert batch.searches == []

    def test_simple_search(self):
        """Test parsing a single search."""
        yaml = """
searches:
  - pattern: "aaa"
    text: "aaaa"
    expected: 0
"""
        batch = parse_batch_string(yaml)
        assert len(batch.searches) == 1

        entry = batch.searches[0]
        assert entry['pattern'] == "aaa"
        assert entry['text'] == "aaaa"
        assert entry['expected'] == 0

    def test_empty_text_allowed(self):
        """Test searching an empty text is valid."""
        yaml = """
searches:
  - pattern: "a"
    text: ""
"""
        batch = parse_batch_string(yaml)
        assert batch.searches[0]['text'] == ""

    def test_per_search_algorithm(self):
        """Test an algorithm on a single search."""
        yaml = """
searches:
  - pattern: "x"
    text: "abcx"
    algorithm: naive
"""
        batch = parse_batch_string(yaml)
        assert batch.searches[0]['algorithm'] == 'naive'

    def test_returns_batch_config(self):
        """Test the return type."""
        assert isinstance(parse_batch_string("searches: []"), BatchConfig)


class TestParseBatchErrors:
    """Tests for validation errors."""

    def test_invalid_syntax(self):
        """Test malformed YAML."""
        with pytest.raises(BatchParseError, match="Invalid YAML syntax"):
            parse_batch_string("searches: [unclosed")

    def test_root_not_mapping(self):
        """Test a list at the root is rejected."""
        with pytest.raises(BatchParseError, match="root must be a mapping"):
            parse_batch_string("- a\n- b\n")

    def test_config_not_mapping(self):
        """Test config must be a mapping."""
        with pytest.raises(BatchParseError, match="'config' must be a mapping"):
            parse_batch_string("config: fast\n")

    def test_searches_not_list(self):
        """Test searches must be a list."""
        with pytest.raises(BatchParseError, match="'searches' must be a list"):
            parse_batch_string("searches:\n  pattern: a\n")

    def test_search_not_mapping(self):
        """Test each search must be a mapping."""
        with pytest.raises(BatchParseError, match="Search 0 must be a mapping"):
            parse_batch_string("searches:\n  - just a string\n")

    def test_missing_pattern(self):
        """Test pattern is required."""
        with pytest.raises(BatchParseError, match="missing required field 'pattern'"):
            parse_batch_string('searches:\n  - text: "abc"\n')

    def test_empty_pattern(self):
        """Test empty pattern is rejected at parse time."""
        with pytest.raises(BatchParseError, match="'pattern' must not be empty"):
            parse_batch_string('searches:\n  - pattern: ""\n    text: "abc"\n')

    def test_non_string_pattern(self):
        """Test numeric pattern is rejected."""
        with pytest.raises(BatchParseError, match="'pattern' must be a string"):
            parse_batch_string('searches:\n  - pattern: 12\n    text: "123"\n')

    def test_missing_text(self):
        """Test text is required."""
        with pytest.raises(BatchParseError, match="missing required field 'text'"):
            parse_batch_string('searches:\n  - pattern: "a"\n')

    def test_null_text(self):
        """Test a bare 'text:' key is rejected."""
        with pytest.raises(BatchParseError, match="'text' must be a string"):
            parse_batch_string('searches:\n  - pattern: "a"\n    text:\n')

    def test_expected_not_int(self):
        """Test expected must be an integer."""
        with pytest.raises(BatchParseError, match="'expected' must be an integer"):
            parse_batch_string(
                'searches:\n  - pattern: "a"\n    text: "a"\n    expected: "0"\n'
            )

    def test_expected_bool_rejected(self):
        """Test booleans are not accepted as indexes."""
        with pytest.raises(BatchParseError, match="'expected' must be an integer"):
            parse_batch_string(
                'searches:\n  - pattern: "a"\n    text: "a"\n    expected: true\n'
            )

    def test_unknown_config_algorithm(self):
        """Test config algorithm must be known."""
        with pytest.raises(BatchParseError, match="Unknown algorithm"):
            parse_batch_string("config:\n  algorithm: boyer_moore\n")

    def test_unknown_search_algorithm(self):
        """Test per-search algorithm must be known."""
        with pytest.raises(BatchParseError, match="Search 0: Unknown algorithm"):
            parse_batch_string(
                'searches:\n  - pattern: "a"\n    text: "a"\n    algorithm: kmp\n'
            )


class TestParseBatchFile:
    """Tests for parse_batch_file function."""

    def test_parse_file(self, tmp_path):
        """Test parsing from a file."""
        batch_file = tmp_path / "searches.yaml"
        batch_file.write_text("""
config:
  algorithm: naive
searches:
  - pattern: "x"
    text: "abcx"
""")
        batch = parse_batch_file(batch_file)
        assert batch.config['algorithm'] == 'naive'
        assert batch.searches[0]['pattern'] == 'x'

    def test_accepts_str_path(self, tmp_path):
        """Test a plain string path works."""
        batch_file = tmp_path / "searches.yaml"
        batch_file.write_text("searches: []\n")
        assert parse_batch_file(str(batch_file)).searches == []

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            parse_batch_file(tmp_path / "missing.yaml")
