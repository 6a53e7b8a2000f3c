"""
lexcheck - Lexical and Delimiter Analyzer for C-like Source
===========================================================

This package analyzes source text written in a C-like language and
produces a human-readable report: a classified token stream, counts of
constant, identifier and comment tokens, and a list of structural syntax
issues.

It is a teaching and demonstration tool, not a compiler front end. It
builds no parse tree and checks no grammar beyond delimiter balance.

Main Components
---------------
- **scanner**: converts source text into Keyword, Identifier, Constant,
    Operator, Symbol and Comment tokens, aborting on the first
    unrecognized character

- **checker**: independently re-walks the source, tracking ( and {
    nesting and flagging lines that look like they are missing a ';'

- **report**: runs both passes and formats the combined report

Quick Start
-----------
    >>> from lexcheck import analyze
    >>> print(analyze("int x = 5"))
    [Keyword] int
    [Identifier] x
    [Operator] =
    [Constant] 5
    <BLANKLINE>
    Summary:
    Constants: 1
    Identifiers: 1
    Comments: 0
    <BLANKLINE>
    Syntax Check:
    Line 1: Possible missing semicolon

Or use the command-line tool:
    $ lexcheck main.c
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from lexcheck.errors import LexcheckError, LexicalError, SourceLocation
from lexcheck.scanner import (
    KEYWORDS,
    Scanner,
    ScanResult,
    Token,
    TokenKind,
    scan,
)
from lexcheck.checker import (
    DelimiterChecker,
    Diagnostic,
    DiagnosticKind,
    check,
    is_missing_terminator,
)
from lexcheck.report import (
    AnalysisReport,
    Analyzer,
    CategoryCounts,
    analyze,
    count_categories,
)

__all__ = [
    # Version info
    "__version__",
    # Errors
    "LexcheckError",
    "LexicalError",
    "SourceLocation",
    # Scanner
    "KEYWORDS",
    "Scanner",
    "ScanResult",
    "Token",
    "TokenKind",
    "scan",
    # Checker
    "DelimiterChecker",
    "Diagnostic",
    "DiagnosticKind",
    "check",
    "is_missing_terminator",
    # Report
    "AnalysisReport",
    "Analyzer",
    "CategoryCounts",
    "analyze",
    "count_categories",
]
