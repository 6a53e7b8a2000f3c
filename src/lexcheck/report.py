"""
Analysis Report
===============

This module runs the complete analysis and formats the report:

    Source → Scanner → (abort on lexical error) → Checker → Report

The scanner runs first. If it fails, the report is the error line alone
and the checker is never invoked. Otherwise the checker re-walks the same
source text independently and both results are merged.

Report Format
-------------
On success:

    [Keyword] int
    [Identifier] x
    ...

    Summary:
    Constants: 1
    Identifiers: 1
    Comments: 0

    Syntax Check:
    No syntax errors found

On lexical failure:

    ERROR Lexical Error: Invalid character '@' at line 1
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from lexcheck.checker import Diagnostic, check
from lexcheck.errors import LexicalError
from lexcheck.scanner import Scanner, Token, TokenKind

logger = logging.getLogger(__name__)


NO_SYNTAX_ERRORS = "No syntax errors found"


@dataclass(frozen=True)
class CategoryCounts:
    """Number of constant, identifier and comment tokens."""
    constants: int = 0
    identifiers: int = 0
    comments: int = 0


def count_categories(tokens: Iterable[Token]) -> CategoryCounts:
    """Count constant, identifier and comment tokens."""
    constants = identifiers = comments = 0
    for token in tokens:
        if token.kind is TokenKind.CONSTANT:
            constants += 1
        elif token.kind is TokenKind.IDENTIFIER:
            identifiers += 1
        elif token.kind is TokenKind.COMMENT:
            comments += 1
    return CategoryCounts(constants, identifiers, comments)


@dataclass
class AnalysisReport:
    """
    Result of analyzing one source text.

    Attributes:
        filename: Source filename for messages
        tokens: Scanned tokens (empty on lexical failure)
        counts: Category counts over tokens
        diagnostics: Checker findings (empty on lexical failure)
        error: The lexical error, if scanning failed
    """
    filename: str = "<input>"
    tokens: list[Token] = field(default_factory=list)
    counts: CategoryCounts = field(default_factory=CategoryCounts)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    error: Optional[LexicalError] = None

    @property
    def success(self) -> bool:
        """True if the source scanned without a lexical error."""
        return self.error is None

    def render(self) -> str:
        """Format the report text."""
        if self.error is not None:
            return f"ERROR {self.error}"

        token_lines = "\n".join(str(token) for token in self.tokens)
        summary = (
            "Summary:\n"
            f"Constants: {self.counts.constants}\n"
            f"Identifiers: {self.counts.identifiers}\n"
            f"Comments: {self.counts.comments}"
        )
        if self.diagnostics:
            syntax = "\n".join(d.message for d in self.diagnostics)
        else:
            syntax = NO_SYNTAX_ERRORS

        return f"{token_lines}\n\n{summary}\n\nSyntax Check:\n{syntax}"


class Analyzer:
    """
    Runs the scanner and checker over source text.

    Example:
        report = Analyzer().analyze_source("int x = 5;")
        print(report.render())
    """

    def analyze_source(self, source: str, filename: str = "<input>") -> AnalysisReport:
        """
        Analyze source text.

        Args:
            source: The source text
            filename: Source filename for error locations

        Returns:
            AnalysisReport; on lexical failure only `error` is set
        """
        report = AnalysisReport(filename=filename)

        result = Scanner(source, filename).run()
        if not result.ok:
            report.error = result.error
            return report

        report.tokens = list(result.tokens)
        report.counts = count_categories(report.tokens)
        report.diagnostics = check(source)

        logger.debug(
            "%s: %d token(s), %d diagnostic(s)",
            filename, len(report.tokens), len(report.diagnostics),
        )
        return report

    def analyze_file(self, filepath: str) -> AnalysisReport:
        """
        Analyze a source file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        source = path.read_text(encoding="utf-8")
        return self.analyze_source(source, str(path))


def analyze(source: str) -> str:
    """
    Analyze source text and return the report text.

    Args:
        source: The source text

    Returns:
        The formatted report
    """
    return Analyzer().analyze_source(source).render()
