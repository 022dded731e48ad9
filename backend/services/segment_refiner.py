"""
Segment Refiner - Word-level highlighting for replaced line pairs
"""

from __future__ import annotations

import logging
import re
from difflib import SequenceMatcher

from models.diff import ChangeKind, Line, LineKind, Segment

from .exceptions import ResourceExhaustedError

logger = logging.getLogger(__name__)

# Whitespace runs are tokens of their own so they survive verbatim
_TOKEN_PATTERN = re.compile(r"\s+|\S+")


def tokenize(text: str) -> list[str]:
    """Split text into alternating word and whitespace runs"""
    return _TOKEN_PATTERN.findall(text)


def diff_words(
    old: str,
    new: str,
    max_tokens: int | None = None,
) -> list[tuple[ChangeKind, str]]:
    """Word-level diff of two strings as ordered (kind, text) parts.

    Joining the removed and unchanged texts rebuilds ``old``; joining the
    added and unchanged texts rebuilds ``new``.
    """
    old_tokens = tokenize(old)
    new_tokens = tokenize(new)

    if max_tokens is not None:
        largest = max(len(old_tokens), len(new_tokens))
        if largest > max_tokens:
            raise ResourceExhaustedError(
                f"Line has {largest} tokens, limit is {max_tokens}",
                limit=max_tokens,
                actual=largest,
            )

    matcher = SequenceMatcher(None, old_tokens, new_tokens, autojunk=False)
    parts: list[tuple[ChangeKind, str]] = []

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            parts.append((ChangeKind.UNCHANGED, "".join(old_tokens[i1:i2])))
            continue
        if tag in ("delete", "replace"):
            parts.append((ChangeKind.REMOVED, "".join(old_tokens[i1:i2])))
        if tag in ("insert", "replace"):
            parts.append((ChangeKind.ADDED, "".join(new_tokens[j1:j2])))

    return parts


def _is_pair(first: Line, second: Line) -> bool:
    kinds = {first.kind, second.kind}
    return kinds == {LineKind.DELETED, LineKind.ADDED}


def _whole_line_segments(line: Line) -> list[Segment]:
    if not line.content:
        return []
    return [Segment(text=line.content, highlighted=True, start=0, end=len(line.content))]


def _refine_pair(deleted_line: Line, added_line: Line, max_tokens: int | None):
    if max_tokens is not None and max(
        len(tokenize(deleted_line.content)), len(tokenize(added_line.content))
    ) > max_tokens:
        # Too long to align word by word: highlight both lines whole
        logger.debug("Line pair over %d tokens, highlighting whole lines", max_tokens)
        deleted_line.segments = _whole_line_segments(deleted_line)
        added_line.segments = _whole_line_segments(added_line)
        return

    deleted_segments: list[Segment] = []
    added_segments: list[Segment] = []
    deleted_pos = 0
    added_pos = 0

    for kind, text in diff_words(deleted_line.content, added_line.content, max_tokens):
        if kind != ChangeKind.ADDED:
            deleted_segments.append(
                Segment(
                    text=text,
                    highlighted=kind == ChangeKind.REMOVED,
                    start=deleted_pos,
                    end=deleted_pos + len(text),
                )
            )
            deleted_pos += len(text)
        if kind != ChangeKind.REMOVED:
            added_segments.append(
                Segment(
                    text=text,
                    highlighted=kind == ChangeKind.ADDED,
                    start=added_pos,
                    end=added_pos + len(text),
                )
            )
            added_pos += len(text)

    deleted_line.segments = deleted_segments
    added_line.segments = added_segments


def refine_segments(lines: list[Line], max_tokens: int | None = None) -> list[Line]:
    """Attach segments to adjacent deleted/added pairs, in place.

    Each line joins at most one pair. Pairs with a line over ``max_tokens``
    tokens are highlighted whole. Returns ``lines`` for chaining.
    """
    i = 0
    while i < len(lines) - 1:
        current, following = lines[i], lines[i + 1]
        if _is_pair(current, following):
            if current.kind == LineKind.DELETED:
                _refine_pair(current, following, max_tokens)
            else:
                _refine_pair(following, current, max_tokens)
            i += 2
        else:
            i += 1
    return lines
