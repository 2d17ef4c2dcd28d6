"""
Validate the MAG pp.yml principal-parts dataset.
"""

from .linter import check_word, lint_pp, lint_record

__all__ = [
    "check_word",
    "lint_pp",
    "lint_record",
]
