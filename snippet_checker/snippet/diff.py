"""Line diff between a documentation snippet and the code it was taken from."""
from __future__ import annotations

from difflib import SequenceMatcher
from typing import List

from .model import DiffLine, DiffTag
from .normalizer import split_lines


def line_diff(doc_code: str, real_code: str) -> List[DiffLine]:
    """Return the tagged lines turning ``doc_code`` into ``real_code``."""
    old = split_lines(doc_code)
    new = split_lines(real_code)
    lines: List[DiffLine] = []

    matcher = SequenceMatcher(a=old, b=new, autojunk=False)
    for opcode, i1, i2, j1, j2 in matcher.get_opcodes():
        if opcode == "equal":
            lines.extend(DiffLine(tag=DiffTag.EQUAL, text=text) for text in old[i1:i2])
            continue
        # "replace" shows the removed lines first, then their replacement.
        if opcode in ("delete", "replace"):
            lines.extend(DiffLine(tag=DiffTag.DELETE, text=text) for text in old[i1:i2])
        if opcode in ("insert", "replace"):
            lines.extend(DiffLine(tag=DiffTag.INSERT, text=text) for text in new[j1:j2])

    return lines


__all__ = ["line_diff"]
