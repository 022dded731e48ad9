"""Models module - Pydantic data models"""

from .diff import (
    ChangeKind,
    CompareRequest,
    DiffOptions,
    DiffResult,
    DiffSummary,
    Line,
    LineKind,
    RawLinePart,
    Segment,
    SplitView,
)

__all__ = [
    "ChangeKind",
    "CompareRequest",
    "DiffOptions",
    "DiffResult",
    "DiffSummary",
    "Line",
    "LineKind",
    "RawLinePart",
    "Segment",
    "SplitView",
]
