"""Errors that stop a snippet check run.

Content mismatches are not errors: they are reported as
:class:`~snippet_checker.snippet.model.SnippetMismatch` values and the run
continues. The exceptions below mean the documentation itself is malformed,
which makes any further comparison meaningless.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .snippet.model import DocumentReport


class SnippetCheckError(Exception):
    """Base class for errors raised while checking snippets."""

    fatal = True

    def __init__(self, message: str, *, path: str | None = None, snippet_index: int | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.snippet_index = snippet_index
        # Filled in by the comparator: the markdown file being checked and
        # the report of the snippets checked before the failure.
        self.document: str | None = None
        self.report: DocumentReport | None = None


class ConfigError(SnippetCheckError):
    """Missing or invalid configuration."""


class FileDecodeError(SnippetCheckError):
    """A document or source file is not valid UTF-8."""

    @classmethod
    def from_unicode_error(cls, error: UnicodeDecodeError, path: str) -> "FileDecodeError":
        return cls(f"File is not valid UTF-8 ({error.reason} at byte {error.start})", path=path)


class SnippetPathError(SnippetCheckError):
    """Declared snippet path does not resolve to a source file."""


class BlockNotFoundError(SnippetCheckError):
    """No block of the source file matches the snippet."""


class SnippetIndentationError(SnippetCheckError):
    """Every line of a snippet carries the same indentation."""


__all__ = [
    "BlockNotFoundError",
    "ConfigError",
    "FileDecodeError",
    "SnippetCheckError",
    "SnippetIndentationError",
    "SnippetPathError",
]
