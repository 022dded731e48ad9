"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_engine import DiffEngine, compare
from .exceptions import DiffError, ResourceExhaustedError
from .line_differ import LineDiffer, split_lines
from .move_detector import detect_moved_lines
from .normalizer import normalize_line, normalize_text
from .segment_refiner import diff_words, refine_segments
from .view_projector import project_split, project_unified

__all__ = [
    "ConfigManager",
    "DiffEngine",
    "compare",
    "DiffError",
    "ResourceExhaustedError",
    "LineDiffer",
    "split_lines",
    "detect_moved_lines",
    "normalize_line",
    "normalize_text",
    "diff_words",
    "refine_segments",
    "project_split",
    "project_unified",
]
