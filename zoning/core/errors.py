"""Zoning error taxonomy."""

from __future__ import annotations


class ZoningError(Exception):
    """Base class for zoning core errors."""


class DuplicateKeyError(ZoningError, KeyError):
    """Rect already present in the partition."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "duplicate rect"


class NotFoundError(ZoningError, KeyError):
    """Rect absent from the partition."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "rect not found"


class InvalidRectangleError(ZoningError, ValueError):
    """Rect unusable by a mutator."""


class InvalidToleranceError(ZoningError, ValueError):
    """Grid tolerance or cell size that is not a positive number."""
