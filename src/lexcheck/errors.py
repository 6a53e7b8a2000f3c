"""
lexcheck Error Hierarchy
========================

This module defines the exception hierarchy for lexcheck. All exceptions
inherit from LexcheckError, allowing callers to catch every analyzer
error with a single except clause if desired.

Exception Hierarchy
-------------------
LexcheckError (base)
└── LexicalError - unrecognized character, aborts the whole analysis

Only lexical failures are exceptions. Delimiter and terminator problems
found by the checker are ordinary data (see lexcheck.checker.Diagnostic)
and are always reported in full.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

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
# Base Exception Class
# =============================================================================

class LexcheckError(Exception):
    """
    Base exception for all lexcheck errors.

    Provides common formatting with source location tracking, source
    line context and an optional hint.

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
        """Format the error message. Subclasses may override."""
        return self.describe()

    def describe(self) -> str:
        """
        Format the error with location, source context, and hint.

        Example output:
            main.c:3:13: error: invalid character '@'
                int x = @;
                        ^
            hint: remove the character or replace it
        """
        parts = []

        # Location prefix
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


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(LexcheckError):
    """
    Unrecognized character in the source text.

    Raised by the scanner on the first character that is not whitespace,
    a comment start, an operator, a symbol, a digit or an identifier
    start. The whole analysis is abandoned: no tokens, counts or syntax
    diagnostics are produced for that input.

    str() of this error is the exact one-line message used in the report,
    e.g. "Lexical Error: Invalid character '@' at line 1". Use describe()
    for the located form with a caret pointer.

    Attributes:
        char: The offending character
        line: 1-based line number of the character
    """

    def __init__(
        self,
        char: str,
        line: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        self.line = line
        super().__init__(
            f"invalid character '{char}'",
            location=location,
            hint="only C operators, symbols, digits, identifiers and // comments are recognized",
            source_line=source_line,
        )

    def _format_message(self) -> str:
        """Return the fixed one-line report message."""
        return f"Lexical Error: Invalid character '{self.char}' at line {self.line}"
