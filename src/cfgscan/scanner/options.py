"""
Scanner Configuration
=====================

ScannerOptions collects the tunable vocabulary of the scanner: which
identifiers are reserved, which marker-prefixed sentinels exist, and what
prefix introduces a line directive.

Configuration can come from:
- Default values (the tables in cfgscan.scanner.tokens)
- Environment variables (ScannerOptions.from_env)
- Explicit construction by the caller

Environment Variables
---------------------
CFGSCAN_KEYWORDS          Comma-separated keyword list (replaces defaults)
CFGSCAN_SENTINELS         Comma-separated sentinel list (replaces defaults)
CFGSCAN_DIRECTIVE_PREFIX  Line directive prefix ("" disables directives)

Values the scanner could never match raise ConfigError.
"""

from dataclasses import dataclass, field, replace
from typing import Iterable
import os
import string

from cfgscan.errors import ConfigError
from cfgscan.scanner.tokens import DIRECTIVE_PREFIX, KEYWORDS, SENTINELS

_IDENT_START = string.ascii_letters + "_"
_IDENT_CHARS = string.ascii_letters + string.digits + "_"


def _split_list(value: str) -> frozenset[str]:
    """Parse a comma-separated list, dropping blank entries."""
    return frozenset(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class ScannerOptions:
    """
    Vocabulary settings for a Scanner.

    Attributes:
        keywords: Identifiers reclassified as KEYWORD (case-sensitive)
        sentinels: Marker-prefixed words emitted as KEYWORD, e.g. "#var"
        directive_prefix: Prefix of a CONFIG_DIRECTIVE line; empty disables
    """
    keywords: frozenset[str] = field(default_factory=lambda: KEYWORDS)
    sentinels: frozenset[str] = field(default_factory=lambda: SENTINELS)
    directive_prefix: str = DIRECTIVE_PREFIX

    def __post_init__(self):
        """
        Reject vocabulary the scanner could never match.

        Raises:
            ConfigError: For a keyword that is not an identifier, a blank
                or whitespace-containing sentinel, or a directive prefix
                containing whitespace
        """
        for word in sorted(self.keywords):
            if not word or word[0] not in _IDENT_START or any(
                c not in _IDENT_CHARS for c in word
            ):
                raise ConfigError("keywords", word, "keywords must be identifiers")

        for sentinel in sorted(self.sentinels):
            if not sentinel or any(c.isspace() for c in sentinel):
                raise ConfigError(
                    "sentinels", sentinel, "sentinels must be non-empty and contain no whitespace"
                )

        if any(c.isspace() for c in self.directive_prefix):
            raise ConfigError(
                "directive_prefix", self.directive_prefix, "the prefix cannot contain whitespace"
            )

    @classmethod
    def from_env(cls) -> "ScannerOptions":
        """
        Create ScannerOptions from environment variables.

        Unset variables keep their defaults. A set but blank
        CFGSCAN_DIRECTIVE_PREFIX disables directive recognition.
        """
        options = cls()

        if keywords := os.environ.get("CFGSCAN_KEYWORDS"):
            options = replace(options, keywords=_split_list(keywords))

        if sentinels := os.environ.get("CFGSCAN_SENTINELS"):
            options = replace(options, sentinels=_split_list(sentinels))

        prefix = os.environ.get("CFGSCAN_DIRECTIVE_PREFIX")
        if prefix is not None:
            options = replace(options, directive_prefix=prefix.strip())

        return options

    def with_keywords(self, extra: Iterable[str]) -> "ScannerOptions":
        """Return a copy with `extra` added to the keyword set."""
        return replace(self, keywords=self.keywords | frozenset(extra))

    def sentinels_by_length(self) -> tuple[str, ...]:
        """Sentinels ordered longest first, so the longest lookahead wins."""
        return tuple(sorted(self.sentinels, key=lambda s: (-len(s), s)))
