"""Orchestration components for checking documentation snippets."""

from .comparison import SnippetComparator
from .pipeline import CheckPipeline, check_book

__all__ = ["CheckPipeline", "SnippetComparator", "check_book"]
