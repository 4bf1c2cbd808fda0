"""
Token Definitions
=================

Token kinds, the reserved word tables, and the immutable Token value
produced by the scanner.

Token Kinds
-----------
| Kind             | Example         | Notes                               |
|------------------|-----------------|-------------------------------------|
| IDENTIFIER       | myFunc2         | letters, digits, underscores        |
| NUMBER           | 007             | decimal digits only, zeros kept     |
| STRING           | "hello"         | text excludes the quotes            |
| OPERATOR         | + - * /         |                                     |
| ASSIGN           | =               |                                     |
| EQUALS           | ==              |                                     |
| SEMICOLON        | ;               |                                     |
| COLON            | :               |                                     |
| LPAREN / RPAREN  | ( )             |                                     |
| BRACE_OPEN/CLOSE | { }             |                                     |
| KEYWORD          | FUNC, #var      | reserved words and sentinels        |
| CONFIG_DIRECTIVE | ## mode=fast    | whole line after a line-start "##"  |
| UNKNOWN          | @               | one unrecognized character          |
| EOF              |                 | always last, empty text             |
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from cfgscan.errors import SourceLocation


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Closed set of token classifications."""

    # === Values ===
    IDENTIFIER = auto()
    NUMBER = auto()
    STRING = auto()

    # === Operators ===
    OPERATOR = auto()       # + - * /
    ASSIGN = auto()         # =
    EQUALS = auto()         # ==

    # === Punctuation ===
    SEMICOLON = auto()      # ;
    COLON = auto()          # :
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    BRACE_OPEN = auto()     # {
    BRACE_CLOSE = auto()    # }

    # === Reserved ===
    KEYWORD = auto()
    CONFIG_DIRECTIVE = auto()

    # === Structural ===
    UNKNOWN = auto()
    EOF = auto()

    @property
    def ordinal(self) -> int:
        """Zero-based position of this kind in the enumeration."""
        return self.value - 1


# =============================================================================
# Reserved Words
# =============================================================================

# Identifiers that are reclassified as KEYWORD (exact, case-sensitive match)
KEYWORDS: frozenset[str] = frozenset({
    "FUNC",
    "VAR",
    "STR",
    "NUM",
    "BOOL",
    "IF",
    "ELSE",
    "WHILE",
    "RETURN",
    "TRUE",
    "FALSE",
})

# Marker-prefixed reserved words, matched by fixed-length lookahead
SENTINELS: frozenset[str] = frozenset({"#var"})

# Marker that turns the rest of a line into a CONFIG_DIRECTIVE token
DIRECTIVE_PREFIX = "##"


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Attributes:
        kind: The TokenKind classification
        text: The lexeme (quotes stripped for strings, empty for EOF)
        line: Line of the first character (1-indexed)
        column: Column of the first character (1-indexed)
        filename: Name of the source the token came from
    """
    kind: TokenKind
    text: str
    line: int
    column: int
    filename: str = "<input>"

    def __repr__(self) -> str:
        if self.kind is TokenKind.EOF:
            return f"Token(EOF, {self.line}:{self.column})"
        return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    @property
    def diagnostic(self) -> Optional[str]:
        """Human-readable complaint for UNKNOWN tokens, None otherwise."""
        if self.kind is TokenKind.UNKNOWN:
            return f"Invalid character '{self.text}'"
        return None

    def format(self) -> str:
        """One-line listing used by the cfglex driver."""
        return (
            f"Token: {self.kind.ordinal}, Type: {self.kind.name}, "
            f"Text: '{self.text}', Line: {self.line}, Column: {self.column}"
        )
