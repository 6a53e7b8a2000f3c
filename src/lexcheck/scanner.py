"""
C-like Source Scanner
=====================

This module implements the lexical scanner. It converts raw source text
into an ordered sequence of classified tokens, or fails on the first
character it cannot classify.

Token Categories
----------------
- Keyword: reserved words of the C language (int, while, return, ...)
- Identifier: names that are not reserved words
- Constant: unsigned decimal integers, kept verbatim as text
- Operator: + - * / = % < > ! & | ^ ~ and their two-character forms
- Symbol: ( ) { } [ ] ; , . : "
- Comment: // to end of line

Scanning Rules
--------------
The source is split on newlines and each line is scanned left to right.
Multi-character constructs use maximal munch. Two-character operators are
formed only when the second character is '=', or for '&&' and '||'. There
is no '++', '->' or '<<': such sequences come out as single-character
operators. Double quotes are plain symbols; there is no string scanning.

Example Usage
-------------
>>> from lexcheck.scanner import scan
>>> for token in scan("int x = 5;"):
...     print(token)
[Keyword] int
[Identifier] x
[Operator] =
[Constant] 5
[Symbol] ;
"""

import logging
import string
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from lexcheck.errors import LexicalError, SourceLocation

logger = logging.getLogger(__name__)


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    The six token categories.

    The value of each member is its display name in the report.
    """
    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    CONSTANT = "Constant"
    OPERATOR = "Operator"
    SYMBOL = "Symbol"
    COMMENT = "Comment"


# =============================================================================
# Character Classes
# =============================================================================

KEYWORDS: frozenset[str] = frozenset({
    "auto", "break", "case", "char", "const", "continue", "default",
    "do", "double", "else", "enum", "extern", "float", "for", "goto",
    "if", "int", "long", "register", "return", "short", "signed",
    "sizeof", "static", "struct", "switch", "typedef", "union",
    "unsigned", "void", "volatile", "while",
})

OPERATOR_CHARS = frozenset("+-*/=%<>!&|^~")

SYMBOL_CHARS = frozenset('(){}[];,.:"')

# Operators that double up into a two-character operator
DOUBLING_OPERATORS = frozenset("&|")

# Skipped between tokens and trimmed from lines and comments. Includes the
# BOM; excludes \x1c-\x1f and \x85, unlike str.isspace().
WHITESPACE = frozenset(
    "\t\n\v\f\r \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
WHITESPACE_CHARS = "".join(sorted(WHITESPACE))

IDENT_START = string.ascii_letters + "_"
IDENT_CHARS = string.ascii_letters + string.digits + "_"


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified token.

    Attributes:
        kind: The TokenKind category
        text: The exact matched text (stripped for comments)
        line: Line number in source (1-indexed)
        column: Column number in source (1-indexed)
    """
    kind: TokenKind
    text: str
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        """Format as a report line, e.g. '[Keyword] int'."""
        return f"[{self.kind.value}] {self.text}"


@dataclass(frozen=True)
class ScanResult:
    """
    Outcome of scanning one source text.

    Holds either the complete token sequence or the lexical error that
    stopped the scan, never both.
    """
    tokens: tuple[Token, ...] = ()
    error: Optional[LexicalError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Scans C-like source text into tokens.

    A scanner instance owns its position state and is meant to be used
    for a single source text.

    Usage:
        tokens = Scanner(source_text).tokenize()

        result = Scanner(source_text).run()
        if not result.ok:
            print(result.error)
    """

    def __init__(self, source: str, filename: str = "<input>"):
        """
        Initialize the scanner with source text.

        Args:
            source: The source text to scan
            filename: Name of the source (for error locations)
        """
        self.source = source
        self.filename = filename

        # Current line being scanned
        self._text = ""
        self._line = 0
        self._pos = 0

    def tokenize(self) -> list[Token]:
        """
        Scan the whole source.

        Returns:
            All tokens in source order

        Raises:
            LexicalError: On the first unrecognized character
        """
        tokens: list[Token] = []

        for index, text in enumerate(self.source.split("\n")):
            self._text = text
            self._line = index + 1
            self._pos = 0
            self._scan_line(tokens)

        logger.debug("scanned %d line(s) into %d token(s)", self._line, len(tokens))
        return tokens

    def run(self) -> ScanResult:
        """
        Scan the whole source, capturing a lexical failure as a value.

        Returns:
            ScanResult with either every token or the error
        """
        try:
            return ScanResult(tokens=tuple(self.tokenize()))
        except LexicalError as e:
            logger.debug("scan aborted: %s", e)
            return ScanResult(error=e)

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _peek(self, offset: int = 0) -> str:
        """Look at the character at position + offset, or '' past the line end."""
        pos = self._pos + offset
        if pos >= len(self._text):
            return ""
        return self._text[pos]

    def _make_token(self, kind: TokenKind, text: str, start: int) -> Token:
        return Token(kind=kind, text=text, line=self._line, column=start + 1)

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_line(self, tokens: list[Token]) -> None:
        """Scan the current line, appending its tokens."""
        while self._pos < len(self._text):
            char = self._peek()

            if char in WHITESPACE:
                self._pos += 1
                continue

            # A comment runs to the end of the line
            if char == "/" and self._peek(1) == "/":
                tokens.append(self._make_token(
                    TokenKind.COMMENT, self._text[self._pos:].strip(WHITESPACE_CHARS), self._pos
                ))
                return

            if char in OPERATOR_CHARS:
                tokens.append(self._scan_operator())
            elif char in SYMBOL_CHARS:
                tokens.append(self._make_token(TokenKind.SYMBOL, char, self._pos))
                self._pos += 1
            elif char in string.digits:
                tokens.append(self._scan_constant())
            elif char in IDENT_START:
                tokens.append(self._scan_identifier())
            else:
                raise LexicalError(
                    char,
                    self._line,
                    location=SourceLocation(self.filename, self._line, self._pos + 1),
                    source_line=self._text,
                )

    def _scan_operator(self) -> Token:
        """
        Scan a one or two character operator.

        The second character is taken only for 'X=' and for '&&' / '||'.
        """
        start = self._pos
        char = self._peek()
        following = self._peek(1)

        if following == "=" or (char in DOUBLING_OPERATORS and following == char):
            self._pos += 2
        else:
            self._pos += 1

        return self._make_token(TokenKind.OPERATOR, self._text[start:self._pos], start)

    def _scan_constant(self) -> Token:
        """Scan a run of decimal digits."""
        start = self._pos
        while self._peek() and self._peek() in string.digits:
            self._pos += 1
        return self._make_token(TokenKind.CONSTANT, self._text[start:self._pos], start)

    def _scan_identifier(self) -> Token:
        """
        Scan an identifier or keyword.

        Identifiers start with a letter or underscore and continue with
        letters, digits and underscores. Keywords are distinguished only
        by membership in KEYWORDS.
        """
        start = self._pos
        while self._peek() and self._peek() in IDENT_CHARS:
            self._pos += 1

        name = self._text[start:self._pos]
        kind = TokenKind.KEYWORD if name in KEYWORDS else TokenKind.IDENTIFIER
        return self._make_token(kind, name, start)


# =============================================================================
# Convenience Functions
# =============================================================================

def scan(source: str, filename: str = "<input>") -> list[Token]:
    """
    Scan source text into tokens.

    Args:
        source: The source text
        filename: Name of the source (for error locations)

    Returns:
        All tokens in source order

    Raises:
        LexicalError: On the first unrecognized character
    """
    return Scanner(source, filename).tokenize()
