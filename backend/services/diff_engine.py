"""
Diff Engine - Compare two texts into unified and split views
"""

from __future__ import annotations

import logging
import time

from models.diff import DiffOptions, DiffResult, DiffSummary, Line, LineKind

from .line_differ import LineDiffer
from .move_detector import detect_moved_lines
from .segment_refiner import refine_segments
from .view_projector import project_split, project_unified

logger = logging.getLogger(__name__)

DEFAULT_MAX_LINES = 20000
DEFAULT_MAX_LINE_TOKENS = 4000
DEFAULT_MAX_ALIGNMENT_WORK = 10_000_000


class DiffEngine:
    """Text comparison engine.

    Holds only its limits; every call builds its result from scratch, so one
    instance can serve concurrent callers.
    """

    def __init__(
        self,
        max_lines: int | None = DEFAULT_MAX_LINES,
        max_line_tokens: int | None = DEFAULT_MAX_LINE_TOKENS,
        max_alignment_work: int | None = DEFAULT_MAX_ALIGNMENT_WORK,
    ):
        self.max_lines = max_lines
        self.max_line_tokens = max_line_tokens
        self.max_alignment_work = max_alignment_work
        self._line_differ = LineDiffer(max_lines=max_lines, max_alignment_work=max_alignment_work)

    @classmethod
    def from_config(cls, config: dict) -> "DiffEngine":
        """Build an engine from the ``limits`` section of the settings"""
        limits = config.get("limits", {})
        return cls(
            max_lines=limits.get("maxLines", DEFAULT_MAX_LINES),
            max_line_tokens=limits.get("maxLineTokens", DEFAULT_MAX_LINE_TOKENS),
            max_alignment_work=limits.get("maxAlignmentWork", DEFAULT_MAX_ALIGNMENT_WORK),
        )

    def compare(
        self,
        original: str,
        modified: str,
        options: DiffOptions | None = None,
    ) -> DiffResult:
        """Compare two texts.

        Raises:
            ResourceExhaustedError: input exceeds the engine limits. No
                partial result is produced.
        """
        options = options or DiffOptions()
        started = time.perf_counter()

        parts = self._line_differ.diff_lines(original, modified, options)

        unified = project_unified(parts)
        split = project_split(parts)

        for lines in (unified, split.left, split.right):
            refine_segments(lines, self.max_line_tokens)

        if options.detect_moved:
            for lines in (unified, split.left, split.right):
                detect_moved_lines(lines)

        result = DiffResult(unified=unified, split=split, summary=summarize(unified))

        logger.debug(
            "Compared %d runs into %d unified lines in %.1f ms",
            len(parts),
            len(unified),
            (time.perf_counter() - started) * 1000,
        )
        return result


def summarize(lines: list[Line]) -> DiffSummary:
    """Count lines per kind"""
    counts = {kind: 0 for kind in LineKind}
    for line in lines:
        counts[line.kind] += 1
    return DiffSummary(
        added=counts[LineKind.ADDED],
        deleted=counts[LineKind.DELETED],
        unchanged=counts[LineKind.UNCHANGED],
        moved=counts[LineKind.MOVED],
    )


def compare(
    original: str,
    modified: str,
    options: DiffOptions | None = None,
) -> DiffResult:
    """Compare two texts with the default limits"""
    return DiffEngine().compare(original, modified, options)
