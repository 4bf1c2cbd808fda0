"""
Configuration Notation Scanner
==============================

This module implements the hand-written scanner that converts notation
source text into a stream of tokens, one token per call.

Classification Order
--------------------
After skipping whitespace (space, tab, CR, LF), the character under the
cursor is classified by the first rule that matches:

1. End of input          -> EOF
2. Sentinel word (#var)  -> KEYWORD        (fixed-length lookahead)
3. "##" at line start    -> CONFIG_DIRECTIVE (rest of the line)
4. Letter or underscore  -> IDENTIFIER / KEYWORD (maximal munch)
5. Digit                 -> NUMBER (integers only, leading zeros kept)
6. Quote (" or ')        -> STRING (quotes excluded, no escapes)
7. Punctuation table     -> OPERATOR, ASSIGN, EQUALS, SEMICOLON, ...
8. Anything else         -> UNKNOWN (exactly one character)

An unterminated string is the only condition that raises.

Example
-------
>>> from cfgscan.scanner import Scanner
>>> scanner = Scanner('#var:struct Pair { x = 10; }')
>>> for token in scanner.tokenize_all():
...     print(token)
Token(KEYWORD, '#var', 1:1)
Token(COLON, ':', 1:5)
Token(IDENTIFIER, 'struct', 1:6)
Token(IDENTIFIER, 'Pair', 1:13)
Token(BRACE_OPEN, '{', 1:18)
Token(IDENTIFIER, 'x', 1:20)
Token(ASSIGN, '=', 1:22)
Token(NUMBER, '10', 1:24)
Token(SEMICOLON, ';', 1:26)
Token(BRACE_CLOSE, '}', 1:28)
Token(EOF, 1:29)
"""

from dataclasses import dataclass
from typing import Iterator, Optional
import logging
import string

from cfgscan.errors import SourceLocation, UnterminatedStringError
from cfgscan.scanner.options import ScannerOptions
from cfgscan.scanner.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


# =============================================================================
# Scanner State Snapshot
# =============================================================================

@dataclass(frozen=True)
class ScannerState:
    """
    Cursor position of a Scanner at one instant.

    Attributes:
        pos: Offset into the source (0 <= pos <= len(source))
        line: Current line (1-indexed)
        column: Current column (1-indexed)
    """
    pos: int
    line: int
    column: int


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes configuration notation source text.

    The scanner keeps no buffered tokens: each call to next_token()
    re-derives its behaviour from the character under the cursor.
    The only state carried between calls is the cursor itself.

    Usage:
        scanner = Scanner(source_text, filename)
        tokens = list(scanner.tokenize_all())

    Attributes:
        source: The text being tokenized (never copied or modified)
        filename: Name used in token locations and error messages
        options: Keyword, sentinel and directive settings
    """

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters + "_"

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    WHITESPACE = " \t\r\n"

    QUOTES = "\"'"

    # Single-character tokens ("=" is handled separately for "==")
    SINGLE_CHAR_TOKENS = {
        "+": TokenKind.OPERATOR,
        "-": TokenKind.OPERATOR,
        "*": TokenKind.OPERATOR,
        "/": TokenKind.OPERATOR,
        ";": TokenKind.SEMICOLON,
        ":": TokenKind.COLON,
        "(": TokenKind.LPAREN,
        ")": TokenKind.RPAREN,
        "{": TokenKind.BRACE_OPEN,
        "}": TokenKind.BRACE_CLOSE,
    }

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        options: Optional[ScannerOptions] = None,
    ):
        """
        Initialize the scanner with source text.

        Args:
            source: The complete input to tokenize
            filename: Name of the source (for locations and errors)
            options: Vocabulary settings (defaults to ScannerOptions())
        """
        self.source = source
        self.filename = filename
        self.options = options or ScannerOptions()

        self._sentinels = self.options.sentinels_by_length()

        # Current position in source
        self._pos = 0
        self._line = 1
        self._column = 1

        # Offset of the first character of the current line
        self._line_start_pos = 0

    # =========================================================================
    # Public Interface
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Once the input is exhausted every call returns an EOF token.

        Raises:
            UnterminatedStringError: If a string literal has no closing quote
        """
        self._skip_whitespace()

        if self._at_end():
            return self._make_token(TokenKind.EOF, "", self._line, self._column)

        return self._scan_token()

    def tokenize_all(self) -> Iterator[Token]:
        """
        Generate tokens until, and including, the first EOF token.

        The iterator is lazy and single-pass: it drives this scanner's
        cursor, so it cannot be restarted.
        """
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.EOF:
                return

    def peek_token(self) -> Token:
        """
        Return the next token without consuming it.

        Saves the cursor, scans one token, then restores the cursor.
        """
        saved = self.state
        saved_line_start = self._line_start_pos
        try:
            return self.next_token()
        finally:
            self._pos = saved.pos
            self._line = saved.line
            self._column = saved.column
            self._line_start_pos = saved_line_start

    @property
    def state(self) -> ScannerState:
        """Snapshot of the current cursor position."""
        return ScannerState(self._pos, self._line, self._column)

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """
        Look at character at current position + offset without advancing.

        Returns empty string if past end of source.
        """
        pos = self._pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """
        Consume and return the current character, advancing position.

        This is the only place the cursor moves forward.
        """
        if self._at_end():
            return ""

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
            self._line_start_pos = self._pos
        else:
            self._column += 1

        return char

    def _match(self, expected: str) -> bool:
        """Consume next character if it matches expected."""
        if self._peek() == expected:
            self._advance()
            return True
        return False

    def _at_line_start(self) -> bool:
        """
        True if only blanks precede the cursor on the current line.

        Walks back over the blank run just before the cursor only, so each
        check costs no more than that run.
        """
        pos = self._pos - 1
        while pos >= self._line_start_pos and self.source[pos] in " \t":
            pos -= 1
        return pos < self._line_start_pos

    def _is_ident_char(self, char: str) -> bool:
        # '' in IDENT_CHARS is True, so reject the end-of-input marker first
        return bool(char) and char in self.IDENT_CHARS

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _make_token(
        self,
        kind: TokenKind,
        text: str,
        start_line: int,
        start_column: int,
    ) -> Token:
        return Token(
            kind=kind,
            text=text,
            line=start_line,
            column=start_column,
            filename=self.filename,
        )

    def _line_text(self, line_start_pos: int) -> str:
        """Return the source line beginning at line_start_pos."""
        line_end = self.source.find("\n", line_start_pos)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[line_start_pos:line_end].rstrip("\r")

    # =========================================================================
    # Whitespace Handling
    # =========================================================================

    def _skip_whitespace(self) -> None:
        """Skip a maximal run of spaces, tabs, carriage returns and newlines."""
        while self._peek() and self._peek() in self.WHITESPACE:
            self._advance()

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> Token:
        """Classify the character under the cursor and scan one token."""
        start_line = self._line
        start_column = self._column

        sentinel = self._match_sentinel()
        if sentinel is not None:
            for _ in sentinel:
                self._advance()
            return self._make_token(TokenKind.KEYWORD, sentinel, start_line, start_column)

        if self._at_directive():
            return self._scan_directive(start_line, start_column)

        char = self._peek()

        if char in self.IDENT_START:
            return self._scan_identifier(start_line, start_column)

        if char in string.digits:
            return self._scan_number(start_line, start_column)

        if char in self.QUOTES:
            return self._scan_string(start_line, start_column)

        return self._scan_punctuation(start_line, start_column)

    def _match_sentinel(self) -> Optional[str]:
        """
        Return the sentinel spelled at the cursor, if any.

        A sentinel ending in an identifier character only matches when the
        character after it cannot continue an identifier, so "#variable"
        is not mistaken for "#var" followed by "iable".
        """
        for sentinel in self._sentinels:
            if not self.source.startswith(sentinel, self._pos):
                continue
            if sentinel[-1] in self.IDENT_CHARS and self._is_ident_char(
                self._peek(len(sentinel))
            ):
                continue
            return sentinel
        return None

    def _at_directive(self) -> bool:
        prefix = self.options.directive_prefix
        return (
            bool(prefix)
            and self.source.startswith(prefix, self._pos)
            and self._at_line_start()
        )

    def _scan_directive(self, start_line: int, start_column: int) -> Token:
        """
        Scan a directive line.

        The token covers the prefix through the end of the line. The line
        terminator (LF or CR LF) is left for the next whitespace skip.
        """
        start = self._pos
        while not self._at_end():
            char = self._peek()
            if char == "\n" or (char == "\r" and self._peek(1) == "\n"):
                break
            self._advance()

        text = self.source[start:self._pos]
        logger.debug(f"{self.filename}:{start_line}:{start_column}: directive {text!r}")
        return self._make_token(TokenKind.CONFIG_DIRECTIVE, text, start_line, start_column)

    def _scan_identifier(self, start_line: int, start_column: int) -> Token:
        """
        Scan an identifier or keyword.

        Keywords are identifiers whose full text is in the keyword set.
        """
        start = self._pos
        while self._is_ident_char(self._peek()):
            self._advance()

        name = self.source[start:self._pos]

        if name in self.options.keywords:
            return self._make_token(TokenKind.KEYWORD, name, start_line, start_column)

        return self._make_token(TokenKind.IDENTIFIER, name, start_line, start_column)

    def _scan_number(self, start_line: int, start_column: int) -> Token:
        """Scan a run of decimal digits, keeping leading zeros verbatim."""
        start = self._pos
        while self._peek() and self._peek() in string.digits:
            self._advance()

        return self._make_token(
            TokenKind.NUMBER, self.source[start:self._pos], start_line, start_column
        )

    def _scan_string(self, start_line: int, start_column: int) -> Token:
        """
        Scan a quoted string literal.

        The literal ends at the next quote of the same kind. Newlines may
        appear inside it.

        Raises:
            UnterminatedStringError: If input ends before the closing quote
        """
        line_start = self._line_start_pos
        quote = self._advance()
        start = self._pos

        while not self._at_end():
            if self._peek() == quote:
                text = self.source[start:self._pos]
                self._advance()  # consume closing quote
                return self._make_token(TokenKind.STRING, text, start_line, start_column)
            self._advance()

        raise UnterminatedStringError(
            quote,
            SourceLocation(self.filename, start_line, start_column),
            self._line_text(line_start),
        )

    def _scan_punctuation(self, start_line: int, start_column: int) -> Token:
        """Scan an operator or delimiter, or a single UNKNOWN character."""
        char = self._advance()

        if char == "=":
            if self._match("="):
                return self._make_token(TokenKind.EQUALS, "==", start_line, start_column)
            return self._make_token(TokenKind.ASSIGN, "=", start_line, start_column)

        if char in self.SINGLE_CHAR_TOKENS:
            return self._make_token(
                self.SINGLE_CHAR_TOKENS[char], char, start_line, start_column
            )

        logger.debug(
            f"{self.filename}:{start_line}:{start_column}: invalid character {char!r}"
        )
        return self._make_token(TokenKind.UNKNOWN, char, start_line, start_column)


# =============================================================================
# Convenience Function
# =============================================================================

def tokenize(
    source: str,
    filename: str = "<input>",
    options: Optional[ScannerOptions] = None,
) -> list[Token]:
    """Scan `source` completely and return every token, ending with EOF."""
    return list(Scanner(source, filename, options).tokenize_all())
