from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Verdict(str, Enum):
    """Outcome of checking every snippet of a single document."""

    NO_SNIPPETS = "no_snippets"
    MATCH = "match"
    MISMATCH = "mismatch"


class DiffTag(str, Enum):
    EQUAL = "equal"
    DELETE = "delete"
    INSERT = "insert"


class Document(BaseModel):
    """A markdown file read once from the book directory."""

    path: str
    relative_path: str
    text: str

    model_config = ConfigDict(frozen=True)


class Snippet(BaseModel):
    """Annotated code fence extracted from a document."""

    index: int
    path: str = Field(..., description="Source path relative to the crates directory")
    code: str

    model_config = ConfigDict(frozen=True)


class SourceBlock(BaseModel):
    """Region of a source file located for a snippet.

    ``start_line`` is the 1-based line of the anchor and ``code`` only holds
    the meaningful lines of the region.
    """

    path: str | None = None
    start_line: int
    code: str

    model_config = ConfigDict(frozen=True)


class DiffLine(BaseModel):
    tag: DiffTag
    text: str

    model_config = ConfigDict(frozen=True)


class SnippetMismatch(BaseModel):
    """Snippet whose normalized text differs from the real code."""

    snippet_index: int
    path: str
    resolved_path: str
    start_line: int
    diff: List[DiffLine] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class DocumentReport(BaseModel):
    path: str
    verdict: Verdict
    snippet_count: int = 0
    mismatches: List[SnippetMismatch] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class CheckSummary(BaseModel):
    """Aggregated result of a run over every document."""

    reports: List[DocumentReport] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def passed(self) -> bool:
        return not any(report.verdict is Verdict.MISMATCH for report in self.reports)

    @property
    def mismatch_count(self) -> int:
        return sum(len(report.mismatches) for report in self.reports)

    @property
    def snippet_count(self) -> int:
        return sum(report.snippet_count for report in self.reports)


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
]
