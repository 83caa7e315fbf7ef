"""Snippet models and the extraction, normalization and matching helpers."""

from .diff import line_diff
from .extractor import extract_snippets, strip_blockquotes
from .locator import locate_block
from .model import (
    CheckSummary,
    DiffLine,
    DiffTag,
    Document,
    DocumentReport,
    Snippet,
    SnippetMismatch,
    SourceBlock,
    Verdict,
)
from .normalizer import is_meaningful_line, remove_indentation, split_lines, strip_comments

__all__ = [
    "CheckSummary",
    "DiffLine",
    "DiffTag",
    "Document",
    "DocumentReport",
    "Snippet",
    "SnippetMismatch",
    "SourceBlock",
    "Verdict",
    "extract_snippets",
    "is_meaningful_line",
    "line_diff",
    "locate_block",
    "remove_indentation",
    "split_lines",
    "strip_blockquotes",
    "strip_comments",
]
