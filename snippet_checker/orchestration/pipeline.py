import logging
import time
from typing import Callable, Iterable, List, Optional

from ..config import CheckerConfig
from ..snippet import CheckSummary, Document, DocumentReport, Verdict
from ..utils.file_loader import DocumentLoader
from .comparison import SnippetComparator


logger = logging.getLogger("snippet_checker")

DocumentCallback = Callable[[DocumentReport, int, int], None]


class CheckPipeline:
    """High-level orchestrator that checks every document of a book."""

    def __init__(
        self,
        config: CheckerConfig,
        *,
        loader: Optional[DocumentLoader] = None,
        comparator: Optional[SnippetComparator] = None,
    ) -> None:
        self.config = config
        self.loader = loader or DocumentLoader()
        self.comparator = comparator or SnippetComparator(config)

    def run(self, *, on_document_complete: Optional[DocumentCallback] = None) -> CheckSummary:
        """Check the documents under the configured book directory."""
        documents = self.loader.load_documents(self.config.book_dir)
        return self.check_documents(documents, on_document_complete=on_document_complete)

    def check_documents(
        self,
        documents: Iterable[Document],
        *,
        on_document_complete: Optional[DocumentCallback] = None,
    ) -> CheckSummary:
        """Compare documents one after another and fold their reports.

        Fatal errors are not caught here: the first one ends the walk.
        """
        documents = list(documents)
        total = len(documents)
        reports: List[DocumentReport] = []
        start_time = time.time()

        for index, document in enumerate(documents, 1):
            report = self.comparator.compare_document(document)
            reports.append(report)
            if on_document_complete is not None:
                on_document_complete(report, index, total)

        summary = CheckSummary(reports=reports)
        logger.info(
            "Checked %d documents, %d snippets, %d mismatches in %.2fs",
            total,
            summary.snippet_count,
            summary.mismatch_count,
            time.time() - start_time,
        )
        without_snippets = sum(1 for report in reports if report.verdict is Verdict.NO_SNIPPETS)
        if without_snippets:
            logger.debug("%d documents contain no snippets", without_snippets)

        return summary


def check_book(
    config: CheckerConfig,
    *,
    on_document_complete: Optional[DocumentCallback] = None,
) -> CheckSummary:
    """Convenience helper to run the pipeline and return its summary."""
    return CheckPipeline(config).run(on_document_complete=on_document_complete)
