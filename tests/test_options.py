"""
Tests for ScannerOptions
========================

Covers defaults, environment overrides, keyword extension and validation.
"""

import pytest

from cfgscan.errors import ConfigError
from cfgscan.scanner import DIRECTIVE_PREFIX, KEYWORDS, SENTINELS, ScannerOptions


class TestDefaults:
    """Tests for default option values."""

    def test_defaults(self):
        options = ScannerOptions()
        assert options.keywords == KEYWORDS
        assert options.sentinels == SENTINELS
        assert options.directive_prefix == DIRECTIVE_PREFIX == "##"

    def test_with_keywords_returns_copy(self):
        options = ScannerOptions()
        extended = options.with_keywords(["struct"])
        assert "struct" in extended.keywords
        assert "FUNC" in extended.keywords
        assert "struct" not in options.keywords

    def test_sentinels_by_length(self):
        options = ScannerOptions(sentinels=frozenset({"#a", "#abc", "#ab"}))
        assert options.sentinels_by_length() == ("#abc", "#ab", "#a")


class TestFromEnv:
    """Tests for ScannerOptions.from_env()."""

    def test_no_environment(self, monkeypatch):
        for name in ("CFGSCAN_KEYWORDS", "CFGSCAN_SENTINELS", "CFGSCAN_DIRECTIVE_PREFIX"):
            monkeypatch.delenv(name, raising=False)
        assert ScannerOptions.from_env() == ScannerOptions()

    def test_keywords_override(self, monkeypatch):
        monkeypatch.setenv("CFGSCAN_KEYWORDS", "struct, int ,,")
        options = ScannerOptions.from_env()
        assert options.keywords == frozenset({"struct", "int"})

    def test_sentinels_override(self, monkeypatch):
        monkeypatch.setenv("CFGSCAN_SENTINELS", "#var,#const")
        options = ScannerOptions.from_env()
        assert options.sentinels == frozenset({"#var", "#const"})

    def test_directive_prefix_override(self, monkeypatch):
        monkeypatch.setenv("CFGSCAN_DIRECTIVE_PREFIX", "%%")
        assert ScannerOptions.from_env().directive_prefix == "%%"

    def test_blank_directive_prefix_disables(self, monkeypatch):
        monkeypatch.setenv("CFGSCAN_DIRECTIVE_PREFIX", "")
        assert ScannerOptions.from_env().directive_prefix == ""

    def test_bad_keyword_in_environment(self, monkeypatch):
        monkeypatch.setenv("CFGSCAN_KEYWORDS", "int,2x")
        with pytest.raises(ConfigError) as exc_info:
            ScannerOptions.from_env()
        assert exc_info.value.setting == "keywords"
        assert exc_info.value.value == "2x"

    def test_whitespace_in_directive_prefix(self, monkeypatch):
        monkeypatch.setenv("CFGSCAN_DIRECTIVE_PREFIX", "# #")
        with pytest.raises(ConfigError, match="directive_prefix"):
            ScannerOptions.from_env()


class TestValidation:
    """Tests for rejecting vocabulary the scanner can never match."""

    @pytest.mark.parametrize("word", ["", "bad word", "9lives", "a-b", "#var"])
    def test_keyword_must_be_identifier(self, word):
        with pytest.raises(ConfigError, match="keywords must be identifiers"):
            ScannerOptions(keywords=frozenset({word}))

    def test_keyword_identifiers_accepted(self):
        options = ScannerOptions(keywords=frozenset({"_x", "Int32", "struct"}))
        assert "Int32" in options.keywords

    @pytest.mark.parametrize("sentinel", ["", "#v ar", "#var\n"])
    def test_sentinel_must_be_one_word(self, sentinel):
        with pytest.raises(ConfigError, match="sentinels"):
            ScannerOptions(sentinels=frozenset({sentinel}))

    def test_directive_prefix_with_newline(self):
        with pytest.raises(ConfigError):
            ScannerOptions(directive_prefix="#\n")

    def test_with_keywords_validates(self):
        with pytest.raises(ConfigError) as exc_info:
            ScannerOptions().with_keywords(["struct", "bad word"])
        assert exc_info.value.value == "bad word"
