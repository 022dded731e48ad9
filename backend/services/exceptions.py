"""Errors raised by the comparison engine"""

from __future__ import annotations


class DiffError(Exception):
    """Base class for comparison failures"""


class ResourceExhaustedError(DiffError):
    """Input is too large to compare within the configured limits"""

    def __init__(self, message: str, limit: int | None = None, actual: int | None = None):
        super().__init__(message)
        self.limit = limit
        self.actual = actual
