"""
cfgscan Scanner
===============

Lexical scanner for the configuration notation.

Main Components
---------------
- **Scanner**: Turns source text into tokens, one next_token() call at a time
- **Token / TokenKind**: The immutable token value and its classification
- **ScannerOptions**: Keyword, sentinel and directive-prefix settings

Example Usage
-------------
>>> from cfgscan.scanner import tokenize
>>> [t.kind.name for t in tokenize("x = 10;")]
['IDENTIFIER', 'ASSIGN', 'NUMBER', 'SEMICOLON', 'EOF']
"""

from cfgscan.scanner.tokens import (
    DIRECTIVE_PREFIX,
    KEYWORDS,
    SENTINELS,
    Token,
    TokenKind,
)
from cfgscan.scanner.options import ScannerOptions
from cfgscan.scanner.lexer import Scanner, ScannerState, tokenize

__all__ = [
    "Scanner",
    "ScannerState",
    "ScannerOptions",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "SENTINELS",
    "DIRECTIVE_PREFIX",
    "tokenize",
]
