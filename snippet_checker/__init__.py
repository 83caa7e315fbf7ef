"""Core package for checking documentation snippets against source files."""

from .config import CheckerConfig
from .exception_handler import ErrorHandler
from .orchestration import CheckPipeline, SnippetComparator, check_book
from .reporter import TerminalReporter
from .snippet import CheckSummary, Document, DocumentReport, Snippet, SourceBlock, Verdict
from .utils import DocumentLoader

__all__ = [
    "CheckerConfig",
    "CheckPipeline",
    "CheckSummary",
    "Document",
    "DocumentLoader",
    "DocumentReport",
    "ErrorHandler",
    "Snippet",
    "SnippetComparator",
    "SourceBlock",
    "TerminalReporter",
    "Verdict",
    "check_book",
]
