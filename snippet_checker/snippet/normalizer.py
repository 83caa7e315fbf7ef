"""Canonical forms used to compare documentation snippets with real code."""
from __future__ import annotations

from typing import List, Optional

LINE_COMMENT = "//"
HIDDEN_LINE_MARKER = "#"
ATTRIBUTE_PREFIX = "#["
DEFAULT_INDENT_WIDTH = 4


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` only, dropping a trailing ``\\r`` and a final empty line.

    Form feeds and Unicode line separators stay inside their line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def is_meaningful_line(line: str) -> bool:
    """Return True for lines that are neither blank nor a line comment."""
    return bool(line.strip()) and not line.lstrip().startswith(LINE_COMMENT)


def _unhide_line(line: str) -> str:
    trimmed = line.lstrip()
    if not trimmed.startswith(HIDDEN_LINE_MARKER) or trimmed.startswith(ATTRIBUTE_PREFIX):
        return line

    # Hidden lines ("# let x = 1;") are compiled but not rendered; keep the code.
    marker = line.index(HIDDEN_LINE_MARKER)
    return line[:marker] + line[marker + 1 :].lstrip()


def strip_comments(code: str) -> str:
    """Drop comment and blank lines, and unhide ``#``-prefixed lines.

    Attributes such as ``#[derive(Debug)]`` are left untouched. The text
    before a hidden-line marker is preserved so indentation survives.
    """
    lines = (_unhide_line(line) for line in split_lines(code))
    return "\n".join(line for line in lines if is_meaningful_line(line))


def remove_indentation(block: str, width: int = DEFAULT_INDENT_WIDTH) -> Optional[str]:
    """Remove one indentation level from every line of ``block``.

    Returns None when any line lacks the prefix; the block is never
    partially de-indented.
    """
    prefix = " " * width
    stripped = []
    for line in split_lines(block):
        if not line.startswith(prefix):
            return None
        stripped.append(line[width:])
    return "\n".join(stripped)


__all__ = ["is_meaningful_line", "remove_indentation", "split_lines", "strip_comments"]
