"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON keys"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChangeKind(str, Enum):
    """Kind of a run in the line-level edit script"""

    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


class LineKind(str, Enum):
    """Kind of a line exposed to callers"""

    ADDED = "added"
    DELETED = "deleted"
    UNCHANGED = "unchanged"
    MOVED = "moved"


class DiffOptions(_CamelModel):
    """Comparison switches, fixed for one comparison"""

    model_config = ConfigDict(frozen=True)

    ignore_whitespace: bool = False
    ignore_case: bool = False
    detect_moved: bool = False


class RawLinePart(BaseModel):
    """A run of lines sharing one kind in the line edit script"""

    kind: ChangeKind
    lines: list[str]  # Display text: modified side for unchanged runs
    old_lines: list[str] = []  # Original text of removed/unchanged runs
    new_lines: list[str] = []  # Modified text of added/unchanged runs


class Segment(_CamelModel):
    """A plain or highlighted slice of a refined line"""

    text: str
    highlighted: bool
    start: int  # Offset into the owning line's content
    end: int


class Line(_CamelModel):
    """A single line of a projected view"""

    content: str
    kind: LineKind
    line_number: int | None = None  # None is the placeholder for one-sided lines
    segments: list[Segment] | None = None
    moved_from: int | None = None
    moved_to: int | None = None


class SplitView(_CamelModel):
    """Side-by-side projection"""

    left: list[Line] = []
    right: list[Line] = []


class DiffSummary(_CamelModel):
    """Line counts over the unified view"""

    added: int = 0
    deleted: int = 0
    unchanged: int = 0
    moved: int = 0


class DiffResult(_CamelModel):
    """Complete comparison result"""

    unified: list[Line] = []
    split: SplitView = Field(default_factory=SplitView)
    summary: DiffSummary = Field(default_factory=DiffSummary)


class CompareRequest(_CamelModel):
    """Request body for a comparison"""

    original: str
    modified: str
    options: DiffOptions | None = None  # Falls back to configured defaults
