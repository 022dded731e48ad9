"""
View Projector - Reshape the line edit script into unified and split views
"""

from __future__ import annotations

from models.diff import ChangeKind, Line, LineKind, RawLinePart, SplitView


def project_unified(parts: list[RawLinePart]) -> list[Line]:
    """Single interleaved column; only unchanged lines are numbered"""
    line_number = 1
    unified: list[Line] = []

    for part in parts:
        for text in part.lines:
            if part.kind == ChangeKind.UNCHANGED:
                unified.append(Line(content=text, kind=LineKind.UNCHANGED, line_number=line_number))
                line_number += 1
            elif part.kind == ChangeKind.ADDED:
                unified.append(Line(content=text, kind=LineKind.ADDED))
            else:
                unified.append(Line(content=text, kind=LineKind.DELETED))

    return unified


def project_split(parts: list[RawLinePart]) -> SplitView:
    """Two columns numbered independently from 1"""
    left_line_number = 1
    right_line_number = 1
    left: list[Line] = []
    right: list[Line] = []

    for part in parts:
        if part.kind == ChangeKind.REMOVED:
            for text in part.old_lines:
                left.append(Line(content=text, kind=LineKind.DELETED, line_number=left_line_number))
                left_line_number += 1
        elif part.kind == ChangeKind.ADDED:
            for text in part.new_lines:
                right.append(Line(content=text, kind=LineKind.ADDED, line_number=right_line_number))
                right_line_number += 1
        else:
            for old_text, new_text in zip(part.old_lines, part.new_lines):
                left.append(Line(content=old_text, kind=LineKind.UNCHANGED, line_number=left_line_number))
                right.append(Line(content=new_text, kind=LineKind.UNCHANGED, line_number=right_line_number))
                left_line_number += 1
                right_line_number += 1

    return SplitView(left=left, right=right)
