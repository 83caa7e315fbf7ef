import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional

from ..config import CheckerConfig
from ..exceptions import (
    BlockNotFoundError,
    FileDecodeError,
    SnippetCheckError,
    SnippetIndentationError,
    SnippetPathError,
)
from ..snippet import (
    Document,
    DocumentReport,
    Snippet,
    SnippetMismatch,
    Verdict,
    extract_snippets,
    line_diff,
    locate_block,
    remove_indentation,
    strip_comments,
)


logger = logging.getLogger("snippet_checker")


class _DocumentState(Enum):
    NOT_STARTED = "not_started"
    HAS_SNIPPETS = "has_snippets"
    HAS_DIFF = "has_diff"


_VERDICTS = {
    _DocumentState.NOT_STARTED: Verdict.NO_SNIPPETS,
    _DocumentState.HAS_SNIPPETS: Verdict.MATCH,
    _DocumentState.HAS_DIFF: Verdict.MISMATCH,
}


class SnippetComparator:
    """Compare the annotated snippets of a document with the source tree."""

    def __init__(self, config: CheckerConfig) -> None:
        self.config = config

    def resolve_path(self, declared: str, *, snippet_index: Optional[int] = None) -> Path:
        """Map a declared snippet path to a file under the crates directory."""
        path = self.config.source_root / declared
        if not path.is_file():
            raise SnippetPathError(
                f"File path read from snippet {snippet_index} does not exist",
                path=declared,
                snippet_index=snippet_index,
            )
        return path

    def compare_snippet(self, snippet: Snippet) -> Optional[SnippetMismatch]:
        """Return the mismatch for ``snippet``, or None when it matches."""
        code_path = self.resolve_path(snippet.path, snippet_index=snippet.index)
        try:
            code_content = code_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            error = FileDecodeError.from_unicode_error(exc, snippet.path)
            error.snippet_index = snippet.index
            raise error from exc

        cleaned_snippet = strip_comments(snippet.code)
        if remove_indentation(cleaned_snippet, self.config.indent_width) is not None:
            raise SnippetIndentationError(
                f"Snippet {snippet.index} is indented on every line",
                path=snippet.path,
                snippet_index=snippet.index,
            )

        block = locate_block(code_content, cleaned_snippet, path=str(code_path))
        if block is None:
            raise BlockNotFoundError(
                f"Could not find matching block for snippet {snippet.index}",
                path=snippet.path,
                snippet_index=snippet.index,
            )

        logger.debug(
            "Snippet %d matched %s at line %d", snippet.index, snippet.path, block.start_line
        )
        real_code = block.code
        if cleaned_snippet == real_code:
            return None

        # Documentation may show a nested item without its enclosing indentation.
        no_indent = remove_indentation(real_code, self.config.indent_width)
        if no_indent is not None:
            if no_indent == cleaned_snippet:
                return None
            real_code = no_indent

        logger.info("Snippet %d differs from %s:%d", snippet.index, snippet.path, block.start_line)
        return SnippetMismatch(
            snippet_index=snippet.index,
            path=snippet.path,
            resolved_path=str(code_path),
            start_line=block.start_line,
            diff=line_diff(cleaned_snippet, real_code),
        )

    def compare_document(self, document: Document) -> DocumentReport:
        """Check every snippet of ``document``.

        A mismatch does not stop the remaining snippets from being checked.
        Fatal errors propagate to the caller carrying the document path and
        the report of the snippets checked so far.
        """
        state = _DocumentState.NOT_STARTED
        snippet_count = 0
        mismatches: List[SnippetMismatch] = []

        for snippet in extract_snippets(document.text, language=self.config.language):
            snippet_count += 1
            if state is _DocumentState.NOT_STARTED:
                state = _DocumentState.HAS_SNIPPETS

            try:
                mismatch = self.compare_snippet(snippet)
            except SnippetCheckError as exc:
                exc.document = document.relative_path
                exc.report = DocumentReport(
                    path=document.relative_path,
                    verdict=_VERDICTS[state],
                    snippet_count=snippet_count - 1,
                    mismatches=mismatches,
                )
                raise
            if mismatch is not None:
                mismatches.append(mismatch)
                state = _DocumentState.HAS_DIFF

        return DocumentReport(
            path=document.relative_path,
            verdict=_VERDICTS[state],
            snippet_count=snippet_count,
            mismatches=mismatches,
        )


__all__ = ["SnippetComparator"]
