"""
Move Detector - Pair deleted and added lines with identical content
"""

from __future__ import annotations

from collections import defaultdict, deque

from models.diff import Line, LineKind


def detect_moved_lines(lines: list[Line]) -> list[Line]:
    """Relabel matching deleted/added lines as moved pairs, in place.

    Matching is on trimmed content. Each added line takes the oldest
    unmatched deleted line with the same content, so duplicates pair up
    one-to-one in sequence order.
    """
    deleted_by_content: dict[str, deque[int]] = defaultdict(deque)
    for index, line in enumerate(lines):
        if line.kind == LineKind.DELETED:
            deleted_by_content[line.content.strip()].append(index)

    for index, line in enumerate(lines):
        if line.kind != LineKind.ADDED:
            continue
        queue = deleted_by_content.get(line.content.strip())
        if not queue:
            continue
        deleted_index = queue.popleft()
        line.kind = LineKind.MOVED
        line.moved_from = deleted_index
        lines[deleted_index].kind = LineKind.MOVED
        lines[deleted_index].moved_to = index

    return lines
