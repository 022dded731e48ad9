"""
Normalizer - Comparison keys for case and whitespace insensitive diffs

Normalized text is only used to decide equality. Display always uses the
original text.
"""

from __future__ import annotations

import re

from models.diff import DiffOptions

_WHITESPACE_RUN = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim"""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def normalize_line(line: str, options: DiffOptions) -> str:
    """Comparison key for a single line"""
    if options.ignore_case:
        line = line.casefold()
    if options.ignore_whitespace:
        line = collapse_whitespace(line)
    return line


def normalize_text(text: str, options: DiffOptions) -> str:
    """Apply the same transforms to a whole document"""
    if options.ignore_case:
        text = text.casefold()
    if options.ignore_whitespace:
        text = collapse_whitespace(text)
    return text
