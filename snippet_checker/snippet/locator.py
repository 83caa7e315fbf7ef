from __future__ import annotations

from typing import List, Optional

from .model import SourceBlock
from .normalizer import is_meaningful_line, split_lines


def locate_block(file_text: str, snippet: str, *, path: Optional[str] = None) -> Optional[SourceBlock]:
    """Find the block of ``file_text`` that a normalized snippet illustrates.

    The block starts at the first file line equal (after trimming) to the
    first non-blank snippet line and spans as many meaningful lines as the
    snippet has. Comments and blank lines inside the block are skipped.

    Returns None when the anchor is missing or the file ends before the
    block is complete. Only the first anchor is considered.
    """
    snippet_lines = split_lines(snippet)
    anchor = next((line.strip() for line in snippet_lines if line.strip()), None)
    if anchor is None:
        return None

    block: List[str] = []
    start_line = 0

    for line_no, line in enumerate(split_lines(file_text), 1):
        if not start_line:
            if line.strip() != anchor:
                continue
            start_line = line_no

        if is_meaningful_line(line):
            block.append(line)

        if len(block) == len(snippet_lines):
            return SourceBlock(path=path, start_line=start_line, code="\n".join(block))

    return None


__all__ = ["locate_block"]
