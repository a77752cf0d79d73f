"""String-valued operations: lengths, joining, hex colors and digit names."""

from __future__ import annotations

from typing import Final

from .errors import ArrayTypeError, InvalidArgumentError
from .values import as_int, as_sequence, is_array, to_display_text


_DIGIT_NAMES: Final[dict[str, int]] = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

_MAX_RGB: Final[int] = 0xFFFFFF


def _strings(arr, *, where: str) -> list[str]:
    items = as_sequence(arr, where=where)
    if is_array(items):
        raise ArrayTypeError(f"{where} requires strings, got a numeric array")
    for idx, item in enumerate(items):
        if not isinstance(item, str):
            raise ArrayTypeError(f"{where} element {idx} must be a string, got {type(item).__name__}")
    return items


def get_strings_length(arr) -> list[int]:
    return [len(item) for item in _strings(arr, where="get_strings_length")]


def is_same_length(arr) -> bool:
    items = _strings(arr, where="is_same_length")
    if not items:
        return True
    first = len(items[0])
    return all(len(item) == first for item in items)


def to_string_list(arr) -> str:
    """Join every element's text form with ``","``.

    ``None``/``UNDEFINED`` render as empty text, booleans as ``true``/``false``
    and NaN as ``NaN``.
    """
    items = as_sequence(arr, where="to_string_list")
    if is_array(items):
        items = items.tolist()
    return ",".join(to_display_text(item) for item in items)


def get_hex_rgb_values(arr) -> list[str]:
    """``#RRGGBB`` uppercase strings for integer colors.

    >>> get_hex_rgb_values([0, 255, 16777215])
    ['#000000', '#0000FF', '#FFFFFF']
    """
    items = as_sequence(arr, where="get_hex_rgb_values")
    if is_array(items):
        items = items.tolist()

    out: list[str] = []
    for idx, item in enumerate(items):
        color = as_int(item, where=f"get_hex_rgb_values arr[{idx}]")
        if color < 0 or color > _MAX_RGB:
            raise InvalidArgumentError(f"get_hex_rgb_values arr[{idx}] = {color} outside [0, {_MAX_RGB}]")
        out.append(f"#{color:06X}")
    return out


def sort_digit_names_by_numeric_order(arr) -> list[str]:
    items = _strings(arr, where="sort_digit_names_by_numeric_order")
    for item in items:
        if item not in _DIGIT_NAMES:
            raise InvalidArgumentError(f"sort_digit_names_by_numeric_order: unknown digit name {item!r}")
    return sorted(items, key=_DIGIT_NAMES.__getitem__)
