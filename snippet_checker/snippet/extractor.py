"""Locate annotated code fences inside markdown documents."""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterator, Pattern

from .model import Snippet
from .normalizer import split_lines

BLOCKQUOTE_PREFIX = "> "
PATH_MARKER = "# // Path: "
DEFAULT_LANGUAGE = "rust"


@lru_cache(maxsize=None)
def _fence_pattern(language: str) -> Pattern[str]:
    # The path marker must be the first line of the fence; the body is
    # everything up to the first closing fence.
    return re.compile(
        r"```" + re.escape(language) + r"\n" + re.escape(PATH_MARKER) + r"(.*?)\n(.*?)\n```",
        re.DOTALL,
    )


def strip_blockquotes(text: str) -> str:
    """Remove one ``> `` prefix per line so quoted snippets are still found."""
    return "\n".join(
        line[len(BLOCKQUOTE_PREFIX):] if line.startswith(BLOCKQUOTE_PREFIX) else line
        for line in split_lines(text)
    )


def extract_snippets(text: str, *, language: str = DEFAULT_LANGUAGE) -> Iterator[Snippet]:
    """Yield the annotated snippets of a markdown document in document order."""
    pattern = _fence_pattern(language)
    for index, match in enumerate(pattern.finditer(strip_blockquotes(text))):
        yield Snippet(index=index, path=match.group(1), code=match.group(2))


__all__ = ["extract_snippets", "strip_blockquotes", "PATH_MARKER"]
