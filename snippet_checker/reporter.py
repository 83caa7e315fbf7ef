"""Terminal rendering of snippet check results."""
from __future__ import annotations

from typing import Any, Dict, List, TextIO

import click
from tqdm import tqdm

from .snippet import CheckSummary, DiffLine, DiffTag, DocumentReport, SnippetMismatch, Verdict

_DIFF_STYLES = {
    DiffTag.DELETE: ("- ", {"fg": "red"}),
    DiffTag.INSERT: ("+ ", {"fg": "green"}),
    DiffTag.EQUAL: ("  ", {"fg": "white"}),
}


class TerminalReporter:
    """Write per-document status lines, diffs and the final status."""

    def __init__(self, *, color: bool = True, stream: TextIO | None = None) -> None:
        self.color = color
        self.stream = stream

    def style(self, text: str, **styles: Any) -> str:
        if not self.color:
            return text
        return click.style(text, **styles)

    def write(self, text: str = "") -> None:
        # tqdm.write keeps an active progress bar below the printed lines.
        tqdm.write(text, file=self.stream)

    def render_document(self, report: DocumentReport) -> List[str]:
        if report.verdict is Verdict.NO_SNIPPETS:
            return [f"{report.path} ... {self.style('no snippets', fg='yellow')}"]
        if report.verdict is Verdict.MATCH:
            return [f"{report.path} ... {self.style('ok', fg='green')}"]

        lines: List[str] = []
        for position, mismatch in enumerate(report.mismatches):
            prefix = f"{report.path} " if position == 0 else ""
            lines.append(f"{prefix}... {self.style('DIFF', fg='red', bold=True)}")
            lines.append("")
            lines.extend(self.render_mismatch(mismatch))
        return lines

    def render_mismatch(self, mismatch: SnippetMismatch) -> List[str]:
        lines = [
            f"Snippet index: {self.style(str(mismatch.snippet_index), fg='yellow', bold=True)}",
            "Code: {}:{}".format(
                self.style(mismatch.path, fg="yellow", bold=True),
                self.style(str(mismatch.start_line), bold=True),
            ),
            f"File: {mismatch.resolved_path}",
            "",
        ]
        lines.extend(self.render_diff_line(line) for line in mismatch.diff)
        lines.append("")
        return lines

    def render_diff_line(self, line: DiffLine) -> str:
        prefix, styles = _DIFF_STYLES[line.tag]
        return self.style(f"{prefix}{line.text}", **styles)

    def document_complete(self, report: DocumentReport, index: int, total: int) -> None:
        for line in self.render_document(report):
            self.write(line)

    def final_status(self, summary: CheckSummary) -> None:
        if summary.passed:
            status = self.style("OK", fg="green")
        else:
            status = self.style("DIFF FOUND", fg="red", bold=True)
        self.write(f"\nFinal status: {status}")

    def fatal(self, info: Dict[str, Any]) -> None:
        # Mismatches found in the document before the failure are still shown.
        report = info.get("report")
        if report is not None and report.mismatches:
            for line in self.render_document(report):
                self.write(line)

        headline = self.style(f"Error: {info['message']}", fg="red", bold=True)
        if info.get("path"):
            headline = f"{headline} - {info['path']}"
        self.write(f"\n{headline}")
        if info.get("document"):
            self.write(f"Document: {self.style(info['document'], fg='yellow', bold=True)}")
        self.write()


__all__ = ["TerminalReporter"]
