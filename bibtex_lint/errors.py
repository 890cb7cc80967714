"""Errors raised by the BibTeX pipeline."""

from __future__ import annotations


class BibTeXLintError(Exception):
    """Base error for this package."""


class BibTeXSyntaxError(BibTeXLintError, ValueError):
    """Raised when the parser meets malformed input."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at position {position}")
        self.position = position


class EmptyBibliographyError(BibTeXLintError):
    """Raised when a file contains no BibTeX records at all."""


class InvalidRecordError(BibTeXLintError, TypeError):
    """Raised when a value is none of Entry, Preamble or Comment."""
