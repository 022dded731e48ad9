"""
Line Differ - Line-level edit script between two documents
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from difflib import SequenceMatcher

from models.diff import ChangeKind, DiffOptions, RawLinePart

from .exceptions import ResourceExhaustedError
from .normalizer import normalize_line

logger = logging.getLogger(__name__)

# A line with its terminator (\r\n, \r or \n), or a final unterminated line
_LINE_PATTERN = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+")


def split_lines(text: str) -> list[tuple[str, bool]]:
    """Split on universal newlines into (text, terminated) pairs.

    No empty line is produced for a trailing newline, and "" has no lines.
    """
    lines = []
    for match in _LINE_PATTERN.finditer(text):
        raw = match.group()
        body = raw.rstrip("\r\n")
        lines.append((body, len(body) != len(raw)))
    return lines


class LineDiffer:
    """Compute the line edit script used by every view"""

    def __init__(self, max_lines: int | None = None, max_alignment_work: int | None = None):
        self.max_lines = max_lines
        self.max_alignment_work = max_alignment_work

    def diff_lines(
        self,
        original: str,
        modified: str,
        options: DiffOptions,
    ) -> list[RawLinePart]:
        """Return the ordered runs of removed, added and unchanged lines.

        Removed and unchanged runs rebuild the original lines, added and
        unchanged runs rebuild the modified lines. A replaced block is
        reported as a removed run followed by an added run.
        """
        old_lines = split_lines(original)
        new_lines = split_lines(modified)
        self._check_size(len(old_lines), len(new_lines))

        old_keys = [self._key(line, options) for line in old_lines]
        new_keys = [self._key(line, options) for line in new_lines]
        self._check_work(old_keys, new_keys)

        try:
            matcher = SequenceMatcher(None, old_keys, new_keys, autojunk=False)
            opcodes = matcher.get_opcodes()
        except (MemoryError, RecursionError) as e:
            logger.warning("Line alignment ran out of resources: %s", e)
            raise ResourceExhaustedError(f"Line alignment ran out of resources: {type(e).__name__}") from e

        old_text = [text for text, _ in old_lines]
        new_text = [text for text, _ in new_lines]
        parts: list[RawLinePart] = []

        for tag, i1, i2, j1, j2 in opcodes:
            if tag == "equal":
                parts.append(
                    RawLinePart(
                        kind=ChangeKind.UNCHANGED,
                        lines=new_text[j1:j2],
                        old_lines=old_text[i1:i2],
                        new_lines=new_text[j1:j2],
                    )
                )
                continue
            if tag in ("delete", "replace"):
                parts.append(
                    RawLinePart(kind=ChangeKind.REMOVED, lines=old_text[i1:i2], old_lines=old_text[i1:i2])
                )
            if tag in ("insert", "replace"):
                parts.append(
                    RawLinePart(kind=ChangeKind.ADDED, lines=new_text[j1:j2], new_lines=new_text[j1:j2])
                )

        return parts

    def _check_size(self, old_count: int, new_count: int):
        if self.max_lines is None:
            return
        largest = max(old_count, new_count)
        if largest > self.max_lines:
            logger.warning("Refusing line diff: %d lines exceeds limit %d", largest, self.max_lines)
            raise ResourceExhaustedError(
                f"Document has {largest} lines, limit is {self.max_lines}",
                limit=self.max_lines,
                actual=largest,
            )

    def _check_work(self, old_keys: list, new_keys: list):
        """Refuse inputs whose repeated lines make alignment quadratic.

        Alignment visits every (old, new) pair of equal keys, so the work is
        bounded by the sum of old_count * new_count over shared keys.
        """
        if self.max_alignment_work is None:
            return
        old_counts = Counter(old_keys)
        new_counts = Counter(new_keys)
        work = sum(count * new_counts[key] for key, count in old_counts.items() if key in new_counts)
        if work > self.max_alignment_work:
            logger.warning("Refusing line diff: alignment work %d exceeds limit %d", work, self.max_alignment_work)
            raise ResourceExhaustedError(
                f"Documents repeat too many lines to align (work {work}, limit {self.max_alignment_work})",
                limit=self.max_alignment_work,
                actual=work,
            )

    @staticmethod
    def _key(line: tuple[str, bool], options: DiffOptions) -> tuple[str, bool]:
        text, terminated = line
        # A missing final newline is whitespace too
        return normalize_line(text, options), terminated or options.ignore_whitespace
