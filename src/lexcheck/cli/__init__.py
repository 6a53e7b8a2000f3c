"""
lexcheck Command-Line Interface
===============================

This package provides the `lexcheck` command-line tool, a Click-based
front end to lexcheck.report.
"""

__all__ = ["lexcheck"]
