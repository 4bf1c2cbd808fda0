"""
cfgscan Error Hierarchy
=======================

This module defines the exception hierarchy for the cfgscan package.
All exceptions inherit from CfgScanError, allowing callers to catch every
scanner-related failure with a single except clause.

Exception Hierarchy
-------------------
CfgScanError (base)
├── ConfigError - scanner options that can never match anything
└── ScanError (anything carrying a source location)
    └── ScanSyntaxError - input that cannot be tokenized
        └── UnterminatedStringError - string literal runs off the end of input

Only an unterminated string is fatal while scanning. Every other anomaly
(an unexpected character, for instance) is reported as an UNKNOWN token
and scanning continues.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class CfgScanError(Exception):
    """
    Base exception for all cfgscan errors.

        try:
            tokens = tokenize(source)
        except CfgScanError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in source text, used by tokens and errors.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Scanner Exceptions
# =============================================================================

class ScanError(CfgScanError):
    """
    Base exception for errors tied to a position in the input.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            app.cfg:3:9: error: unterminated string literal
                name = "server
                       ^
            hint: add a closing '"' to complete the string
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class ScanSyntaxError(ScanError):
    """
    Input that the scanner cannot turn into a token.

    The scanner itself only raises the UnterminatedStringError subclass;
    this class exists so callers can catch any lexical failure.
    """
    pass


class UnterminatedStringError(ScanSyntaxError):
    """
    String literal with no closing quote before the end of input.

    The location points at the opening quote, since that is where the
    lexeme that could not be delimited begins.

    Example:
        name = "server      <- missing closing quote, input ends here
    """

    def __init__(
        self,
        quote: str = '"',
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.quote = quote
        super().__init__(
            "unterminated string literal",
            location=location,
            hint=f"add a closing '{quote}' to complete the string",
            source_line=source_line,
        )


# =============================================================================
# Configuration Exceptions
# =============================================================================

class ConfigError(CfgScanError):
    """
    Invalid scanner configuration.

    Raised when ScannerOptions is given a keyword, sentinel or directive
    prefix that the scanner could never match, for example a keyword
    containing a space or a prefix containing a newline.

    Attributes:
        setting: Name of the offending option (e.g. "keywords")
        value: The rejected value
    """

    def __init__(self, setting: str, value: str, reason: str):
        self.setting = setting
        self.value = value
        self.reason = reason
        super().__init__(f"invalid {setting} entry {value!r}: {reason}")
