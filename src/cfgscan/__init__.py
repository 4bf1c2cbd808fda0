"""
cfgscan - Scanner for a Small Configuration Notation
====================================================

This package converts configuration/scripting notation source text into
a stream of typed tokens. It covers tokenization only: no grammar, parser
or interpreter is defined here.

Main Components
---------------
- **scanner**: The Scanner, token definitions and scanner options
- **errors**: Exception hierarchy and source locations
- **cli**: The cfglex command-line token lister

Quick Start
-----------
Scan a string:
    >>> from cfgscan import Scanner
    >>> scanner = Scanner("FUNC add")
    >>> scanner.next_token()
    Token(KEYWORD, 'FUNC', 1:1)

Or use the command-line tool:
    $ cfglex settings.cfg
    $ cfglex -c 'x = 10;'
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from cfgscan.errors import (
    CfgScanError,
    ConfigError,
    ScanError,
    ScanSyntaxError,
    SourceLocation,
    UnterminatedStringError,
)
from cfgscan.scanner import (
    KEYWORDS,
    Scanner,
    ScannerOptions,
    ScannerState,
    Token,
    TokenKind,
    tokenize,
)

__all__ = [
    "__version__",
    # Scanner
    "Scanner",
    "ScannerState",
    "ScannerOptions",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "tokenize",
    # Exception hierarchy
    "CfgScanError",
    "ConfigError",
    "ScanError",
    "ScanSyntaxError",
    "SourceLocation",
    "UnterminatedStringError",
]
