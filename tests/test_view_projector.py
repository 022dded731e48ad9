"""Tests for services/view_projector.py"""

from models.diff import ChangeKind, LineKind, RawLinePart
from services.view_projector import project_split, project_unified


def _parts():
    return [
        RawLinePart(kind=ChangeKind.UNCHANGED, lines=["a"], old_lines=["a"], new_lines=["a"]),
        RawLinePart(kind=ChangeKind.REMOVED, lines=["b", "c"], old_lines=["b", "c"]),
        RawLinePart(kind=ChangeKind.ADDED, lines=["x"], new_lines=["x"]),
        RawLinePart(kind=ChangeKind.UNCHANGED, lines=["D"], old_lines=["d"], new_lines=["D"]),
    ]


class TestProjectUnified:
    def test_kinds_and_order(self):
        unified = project_unified(_parts())
        assert [(line.content, line.kind) for line in unified] == [
            ("a", LineKind.UNCHANGED),
            ("b", LineKind.DELETED),
            ("c", LineKind.DELETED),
            ("x", LineKind.ADDED),
            ("D", LineKind.UNCHANGED),
        ]

    def test_only_unchanged_lines_are_numbered(self):
        unified = project_unified(_parts())
        assert [line.line_number for line in unified] == [1, None, None, None, 2]

    def test_no_segments_or_moves(self):
        for line in project_unified(_parts()):
            assert line.segments is None
            assert line.moved_from is None and line.moved_to is None

    def test_empty(self):
        assert project_unified([]) == []


class TestProjectSplit:
    def test_left_holds_original_side(self):
        split = project_split(_parts())
        assert [(line.content, line.kind, line.line_number) for line in split.left] == [
            ("a", LineKind.UNCHANGED, 1),
            ("b", LineKind.DELETED, 2),
            ("c", LineKind.DELETED, 3),
            ("d", LineKind.UNCHANGED, 4),
        ]

    def test_right_holds_modified_side(self):
        split = project_split(_parts())
        assert [(line.content, line.kind, line.line_number) for line in split.right] == [
            ("a", LineKind.UNCHANGED, 1),
            ("x", LineKind.ADDED, 2),
            ("D", LineKind.UNCHANGED, 3),
        ]

    def test_empty(self):
        split = project_split([])
        assert split.left == []
        assert split.right == []
