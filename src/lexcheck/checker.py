"""
Delimiter and Terminator Checker
================================

This module walks raw source text, independently of the scanner, and
collects structural syntax diagnostics:

- Extra closing delimiter: ')' or '}' with nothing open
- Mismatched delimiter: closer that does not pair with the innermost opener
- Possible missing semicolon: line-level heuristic
- Unclosed delimiter: opener still pending at end of input

Only parentheses and braces are tracked. Each line is stripped of
surrounding whitespace before it is inspected.

Recovery
--------
A mismatched closer leaves the pending opener on the stack, so the same
opener may mismatch again against later closers and is still reported as
unclosed at the end. Unclosed openers are reported innermost first.

Usage
-----
>>> from lexcheck.checker import check
>>> for diagnostic in check("{(a;"):
...     print(diagnostic)
Line 1: Unclosed '('
Line 1: Unclosed '{'
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from lexcheck.scanner import WHITESPACE_CHARS

logger = logging.getLogger(__name__)


OPENERS = {"(": ")", "{": "}"}
CLOSERS = frozenset(OPENERS.values())

# Statement lines ending with one of these are never flagged
TERMINATORS = (";", "{", "}")

CONTROL_KEYWORDS = re.compile(r"\b(if|else|for|while|switch)\b", re.ASCII)


# =============================================================================
# Diagnostic Data Classes
# =============================================================================

class DiagnosticKind(Enum):
    """Categories of checker findings."""
    EXTRA_CLOSING = auto()
    MISMATCHED = auto()
    MISSING_TERMINATOR = auto()
    UNCLOSED = auto()


@dataclass(frozen=True)
class Diagnostic:
    """
    A single syntax finding.

    Attributes:
        line: Line number (1-indexed)
        kind: The DiagnosticKind
        char: The offending character (the opener for UNCLOSED, the closer
              otherwise; empty for MISSING_TERMINATOR)
        opener: The pending opener a closer was mismatched against
    """
    line: int
    kind: DiagnosticKind
    char: str = ""
    opener: Optional[str] = None

    @property
    def message(self) -> str:
        if self.kind is DiagnosticKind.EXTRA_CLOSING:
            return f"Line {self.line}: Extra closing '{self.char}'"
        if self.kind is DiagnosticKind.MISMATCHED:
            return f"Line {self.line}: Mismatched '{self.opener}' with '{self.char}'"
        if self.kind is DiagnosticKind.UNCLOSED:
            return f"Line {self.line}: Unclosed '{self.char}'"
        return f"Line {self.line}: Possible missing semicolon"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class PendingDelimiter:
    """An opener waiting for its closer."""
    char: str
    line: int


class DiagnosticCollector:
    """
    Accumulates diagnostics in the order they are found.

    Example:
        collector = DiagnosticCollector()
        collector.add(Diagnostic(3, DiagnosticKind.EXTRA_CLOSING, "}"))
        print(collector.count())
    """

    def __init__(self):
        self.diagnostics: List[Diagnostic] = []

    def add(self, diagnostic: Diagnostic) -> None:
        """Add a diagnostic to the collection."""
        self.diagnostics.append(diagnostic)

    def count(self) -> int:
        return len(self.diagnostics)


# =============================================================================
# Line Heuristic
# =============================================================================

def is_missing_terminator(trimmed: str) -> bool:
    """
    Return True if a stripped line looks like a statement without ';'.

    The line is flagged when it is non-empty, is not a // comment, does not
    end with ';', '{' or '}', contains no '#', and contains none of the
    control keywords if/else/for/while/switch as a whole word.
    """
    return bool(
        trimmed
        and not trimmed.startswith("//")
        and not trimmed.endswith(TERMINATORS)
        and "#" not in trimmed
        and not CONTROL_KEYWORDS.search(trimmed)
    )


# =============================================================================
# Checker Implementation
# =============================================================================

class DelimiterChecker:
    """
    Checks delimiter balance and statement terminators.

    The pending-delimiter stack belongs to the instance, so each instance
    checks exactly one source text.

    Usage:
        diagnostics = DelimiterChecker(source_text).run()
    """

    def __init__(self, source: str):
        self.source = source
        self._stack: List[PendingDelimiter] = []
        self._diagnostics = DiagnosticCollector()

    def run(self) -> List[Diagnostic]:
        """
        Check the whole source.

        Returns:
            Diagnostics in report order: per line, delimiter findings left
            to right followed by the terminator finding, then every
            unclosed opener innermost first
        """
        for index, line in enumerate(self.source.split("\n")):
            line_number = index + 1
            trimmed = line.strip(WHITESPACE_CHARS)

            for char in trimmed:
                if char in OPENERS:
                    self._stack.append(PendingDelimiter(char, line_number))
                elif char in CLOSERS:
                    self._close(char, line_number)

            if is_missing_terminator(trimmed):
                self._diagnostics.add(
                    Diagnostic(line_number, DiagnosticKind.MISSING_TERMINATOR)
                )

        while self._stack:
            pending = self._stack.pop()
            self._diagnostics.add(
                Diagnostic(pending.line, DiagnosticKind.UNCLOSED, pending.char)
            )

        logger.debug("checker found %d diagnostic(s)", self._diagnostics.count())
        return list(self._diagnostics.diagnostics)

    def _close(self, char: str, line_number: int) -> None:
        """Match a closer against the innermost pending opener."""
        if not self._stack:
            self._diagnostics.add(
                Diagnostic(line_number, DiagnosticKind.EXTRA_CLOSING, char)
            )
            return

        top = self._stack[-1]
        if OPENERS[top.char] == char:
            self._stack.pop()
        else:
            # The opener stays pending
            self._diagnostics.add(
                Diagnostic(line_number, DiagnosticKind.MISMATCHED, char, opener=top.char)
            )


def check(source: str) -> List[Diagnostic]:
    """
    Check source text for delimiter and terminator problems.

    Args:
        source: The source text

    Returns:
        Diagnostics in report order (possibly empty)
    """
    return DelimiterChecker(source).run()
