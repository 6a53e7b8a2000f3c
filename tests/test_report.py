# =============================================================================
# test_report.py - Analysis Report Tests
# =============================================================================
# End-to-end tests for analyze() and the Analyzer:
#   - Exact report text for the documented examples
#   - Category counts
#   - Lexical errors short-circuit the checker
#   - File analysis
# =============================================================================

import pytest

from lexcheck import analyze
from lexcheck.checker import DiagnosticKind
from lexcheck.report import (
    AnalysisReport,
    Analyzer,
    CategoryCounts,
    count_categories,
)
from lexcheck.scanner import TokenKind, scan


# =============================================================================
# Exact Output Tests
# =============================================================================

class TestReportText:
    """Test the exact report layout."""

    def test_declaration(self):
        assert analyze("int x = 5;") == (
            "[Keyword] int\n"
            "[Identifier] x\n"
            "[Operator] =\n"
            "[Constant] 5\n"
            "[Symbol] ;\n"
            "\n"
            "Summary:\n"
            "Constants: 1\n"
            "Identifiers: 1\n"
            "Comments: 0\n"
            "\n"
            "Syntax Check:\n"
            "No syntax errors found"
        )

    def test_missing_semicolon(self):
        assert analyze("int x = 5") == (
            "[Keyword] int\n"
            "[Identifier] x\n"
            "[Operator] =\n"
            "[Constant] 5\n"
            "\n"
            "Summary:\n"
            "Constants: 1\n"
            "Identifiers: 1\n"
            "Comments: 0\n"
            "\n"
            "Syntax Check:\n"
            "Line 1: Possible missing semicolon"
        )

    def test_lexical_error(self):
        assert analyze("int x = @;") == "ERROR Lexical Error: Invalid character '@' at line 1"

    def test_lexical_error_suppresses_syntax_check(self):
        """The unbalanced brace on line 1 is never reported."""
        report = analyze("{\nint $;")
        assert report == "ERROR Lexical Error: Invalid character '$' at line 2"

    def test_empty_input(self):
        assert analyze("") == (
            "\n"
            "\n"
            "Summary:\n"
            "Constants: 0\n"
            "Identifiers: 0\n"
            "Comments: 0\n"
            "\n"
            "Syntax Check:\n"
            "No syntax errors found"
        )

    def test_whitespace_input_same_as_empty(self):
        assert analyze("  \n\t\n") == analyze("")

    def test_byte_order_mark_is_whitespace(self):
        assert analyze("\ufeffint x;") == analyze("int x;")

    def test_file_separator_is_invalid(self):
        assert analyze("int\x1cx;") == (
            "ERROR Lexical Error: Invalid character '\x1c' at line 1"
        )

    def test_diagnostics_in_order(self):
        report = analyze("if (a) { b; )")
        assert report.endswith(
            "Syntax Check:\n"
            "Line 1: Mismatched '{' with ')'\n"
            "Line 1: Unclosed '{'"
        )

    def test_comment_counted(self):
        report = analyze("// setup\nint n = 10; // ten")
        assert "[Comment] // setup\n" in report
        assert "[Comment] // ten\n" in report
        assert "Constants: 1\nIdentifiers: 1\nComments: 2" in report


# =============================================================================
# Category Count Tests
# =============================================================================

class TestCategoryCounts:
    """Test folding tokens into counts."""

    def test_empty(self):
        assert count_categories([]) == CategoryCounts(0, 0, 0)

    def test_mixed(self):
        tokens = scan("for (i = 0; i < 10; i += 1) total = total + i; // sum")
        assert count_categories(tokens) == CategoryCounts(
            constants=3, identifiers=6, comments=1
        )

    @pytest.mark.parametrize("source", [
        "int x = 5;",
        "a b c 1 2 // c",
        "while (x) { x -= 1; }",
        "",
    ])
    def test_counts_bounded_by_token_total(self, source):
        tokens = scan(source)
        counts = count_categories(tokens)
        counted = counts.constants + counts.identifiers + counts.comments
        others = [t for t in tokens if t.kind in (
            TokenKind.KEYWORD, TokenKind.OPERATOR, TokenKind.SYMBOL
        )]
        assert counted <= len(tokens)
        assert (counted == len(tokens)) == (not others)


# =============================================================================
# Analyzer Tests
# =============================================================================

class TestAnalyzer:
    """Test the structured AnalysisReport."""

    def test_success_report(self):
        report = Analyzer().analyze_source("int x = 5")
        assert report.success
        assert report.error is None
        assert [t.text for t in report.tokens] == ["int", "x", "=", "5"]
        assert report.counts == CategoryCounts(1, 1, 0)
        assert [d.kind for d in report.diagnostics] == [
            DiagnosticKind.MISSING_TERMINATOR
        ]

    def test_failure_report(self):
        report = Analyzer().analyze_source("a @", "bad.c")
        assert not report.success
        assert report.tokens == []
        assert report.diagnostics == []
        assert report.counts == CategoryCounts()
        assert report.error.line == 1
        assert str(report.error.location) == "bad.c:1:3"

    def test_render_matches_analyze(self):
        source = "int main() {\n  return 0\n}"
        assert Analyzer().analyze_source(source).render() == analyze(source)

    def test_default_report_is_empty(self):
        assert AnalysisReport().render() == analyze("")

    def test_analyze_file(self, tmp_path):
        source_file = tmp_path / "prog.c"
        source_file.write_text("int a;\nint b\n", encoding="utf-8")

        report = Analyzer().analyze_file(str(source_file))

        assert report.filename == str(source_file)
        assert report.render() == analyze("int a;\nint b\n")

    def test_analyze_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Analyzer().analyze_file(str(tmp_path / "missing.c"))

    def test_calls_are_independent(self):
        analyzer = Analyzer()
        first = analyzer.analyze_source("{{{").render()
        assert analyzer.analyze_source("x;").render().endswith("No syntax errors found")
        assert analyzer.analyze_source("{{{").render() == first
