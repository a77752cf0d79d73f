"""Structured error types for argument validation failures."""

from __future__ import annotations


class ArrayTasksError(Exception):
    """Base class for structured array-tasks errors."""


class InvalidArgumentError(ArrayTasksError, ValueError):
    """An operation received an argument outside its contract."""


class IndexRangeError(InvalidArgumentError, IndexError):
    """Index argument falls outside the valid range."""


class ArrayShapeError(InvalidArgumentError):
    """Nested structure or array shape is malformed for the operation."""


class ArrayTypeError(InvalidArgumentError, TypeError):
    """Argument has the wrong value kind (e.g. a string where a number is required)."""


def classify_exception(err: Exception) -> ArrayTasksError:
    """Best-effort classification of foreign exceptions for structured reports."""
    if isinstance(err, ArrayTasksError):
        return err

    message = str(err)
    if isinstance(err, IndexError):
        return IndexRangeError(message)
    if isinstance(err, TypeError):
        return ArrayTypeError(message)

    lowered = message.lower()
    shape_markers = ("shape", "rank", "axis", "length", "broadcast", "dimension")
    if any(marker in lowered for marker in shape_markers):
        return ArrayShapeError(message)
    if isinstance(err, ValueError):
        return InvalidArgumentError(message)
    return ArrayTasksError(message)
