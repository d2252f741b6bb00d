"""Text helpers for whole-word matching."""

from __future__ import annotations

import re
from typing import Iterator

_SEPARATOR_RE = re.compile(r"[^A-Za-z0-9_]+")


def iter_tokens(text: str) -> Iterator[str]:
    """Yield the non-empty tokens of ``text`` split on runs of non-word characters."""
    for token in _SEPARATOR_RE.split(text):
        if token:
            yield token


def count_occurrences(text: str, word: str) -> int:
    """Count tokens of ``text`` equal to ``word``, ignoring case.

    Substrings of a larger token do not count: ``"cat"`` does not match
    ``"category"``.
    """
    if not text or not word:
        return 0
    target = word.lower()
    return sum(1 for token in iter_tokens(text) if token.lower() == target)


def normalize_whitespace(text: str) -> str:
    """Collapse runs of blank lines and strip each line."""
    return "\n".join(line.strip() for line in text.splitlines() if line.strip())
