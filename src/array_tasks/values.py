"""Runtime value model shared by the array operations.

Two kinds of array are accepted everywhere a sequence is expected:

* Python sequences (``list``/``tuple``), which may be heterogeneous and nested.
* JAX arrays of rank >= 1, which take vectorized ``jax.numpy`` paths.

Falsiness and equality follow explicit, enumerated rules instead of Python's
own ``bool()``/``==`` so that, for example, ``True`` and ``1`` stay distinct.
"""

from __future__ import annotations

import math
import numbers
import os
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Final

import jax.numpy as jnp

from .errors import ArrayShapeError, ArrayTypeError, InvalidArgumentError


USE_ARRAY_FAST_PATH: Final[bool] = os.environ.get("ARRAY_TASKS_DISABLE_ARRAY_FAST_PATH", "0") != "1"


class _Undefined:
    """Marker for an absent value, distinct from ``None``."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED: Final = _Undefined()


class ValueKind(str, Enum):
    ATOM = "atom"
    SEQUENCE = "sequence"
    ARRAY = "array"
    UNDEFINED = "undefined"


@dataclass(frozen=True)
class ValueInfo:
    kind: ValueKind
    shape: tuple[int, ...]
    rank: int
    depth: int


def is_array(value: object) -> bool:
    return isinstance(value, jnp.ndarray)


def is_sequence(value: object) -> bool:
    return isinstance(value, (list, tuple))


def is_container(value: object) -> bool:
    """True for anything that can be indexed into as an array (strings excluded)."""
    if is_sequence(value):
        return True
    return is_array(value) and value.ndim >= 1


def is_number(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Number):
        return True
    return is_array(value) and value.ndim == 0 and not jnp.issubdtype(value.dtype, jnp.bool_)


def is_nan(value: object) -> bool:
    if is_array(value):
        if value.ndim != 0 or not jnp.issubdtype(value.dtype, jnp.inexact):
            return False
        return bool(jnp.isnan(value))
    if isinstance(value, numbers.Complex) and not isinstance(value, bool):
        return _complex_isnan(value)
    return False


def _complex_isnan(value: numbers.Complex) -> bool:
    if isinstance(value, numbers.Real):
        return math.isnan(float(value))
    return math.isnan(value.real) or math.isnan(value.imag)


def is_falsy(value: object) -> bool:
    """Enumerated falsy set: False, None, UNDEFINED, numeric zero, "" and NaN."""
    if value is None or value is UNDEFINED or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if is_array(value):
        if value.ndim != 0:
            return False
        if jnp.issubdtype(value.dtype, jnp.bool_):
            return not bool(value)
        return is_nan(value) or bool(value == 0)
    if isinstance(value, numbers.Number):
        return is_nan(value) or value == 0
    return False


def _as_scalar(value: object) -> object:
    if is_array(value) and value.ndim == 0:
        return value.item()
    return value


def strict_equals(left: object, right: object) -> bool:
    """Type-aware equality: bools never equal numbers and NaN equals nothing."""
    left = _as_scalar(left)
    right = _as_scalar(right)
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    if isinstance(left, numbers.Number) and isinstance(right, numbers.Number):
        if is_nan(left) or is_nan(right):
            return False
        return left == right
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    if left is None or right is None or left is UNDEFINED or right is UNDEFINED:
        return left is right
    if isinstance(left, (numbers.Number, str)) or isinstance(right, (numbers.Number, str)):
        return False
    return left is right


def same_value_zero(left: object, right: object) -> bool:
    """Equality used for de-duplication: like ``strict_equals`` except NaN matches NaN."""
    if is_nan(left) and is_nan(right):
        return True
    return strict_equals(left, right)


def _format_float(real: float) -> str:
    """Shortest round-trip digits laid out the way ECMAScript Number#toString does."""
    if real == 0:
        return "0"
    sign = "-" if real < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(real))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    # The value is 0.<digits> * 10**point.
    point = len(digits) + exponent
    if len(digits) <= point <= 21:
        return sign + digits + "0" * (point - len(digits))
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits
    power = point - 1
    mantissa = digits if len(digits) == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"


def _format_number(value: numbers.Number) -> str:
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real):
        real = float(value)
        if math.isnan(real):
            return "NaN"
        if math.isinf(real):
            return "Infinity" if real > 0 else "-Infinity"
        return _format_float(real)
    return str(value)


def to_display_text(value: object) -> str:
    if value is None or value is UNDEFINED:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if is_array(value):
        return to_display_text(value.tolist())
    if is_sequence(value):
        return ",".join(to_display_text(item) for item in value)
    if isinstance(value, numbers.Number):
        return _format_number(value)
    return str(value)


def to_python(value: object) -> object:
    """Recursively convert JAX arrays into plain Python lists/scalars."""
    if is_array(value):
        return value.tolist()
    if is_sequence(value):
        return [to_python(item) for item in value]
    return value


def shape_of(value: object) -> tuple[int, ...]:
    if is_array(value):
        return tuple(int(d) for d in value.shape)
    if is_sequence(value):
        return (len(value),)
    return ()


def depth_of(value: object) -> int:
    if is_array(value):
        return value.ndim
    if not is_sequence(value):
        return 0
    depth = 0
    stack = [(value, 1)]
    while stack:
        current, level = stack.pop()
        depth = max(depth, level)
        for item in current:
            if is_sequence(item):
                stack.append((item, level + 1))
            elif is_array(item):
                depth = max(depth, level + item.ndim)
    return depth


def kind_of(value: object) -> ValueKind:
    if value is UNDEFINED:
        return ValueKind.UNDEFINED
    if is_sequence(value):
        return ValueKind.SEQUENCE
    if is_array(value) and value.ndim >= 1:
        return ValueKind.ARRAY
    return ValueKind.ATOM


def value_info(value: object) -> ValueInfo:
    kind = kind_of(value)
    shape = shape_of(value)
    return ValueInfo(kind=kind, shape=shape, rank=len(shape), depth=depth_of(value))


def as_sequence(value: object, *, where: str):
    """Validate an array argument.

    Returns a fresh ``list`` for Python sequences and the array itself for JAX
    arrays (or its ``tolist()`` when the array fast path is disabled).
    """
    if is_array(value):
        if value.ndim == 0:
            raise ArrayShapeError(f"{where} requires an array of rank >= 1, got a scalar")
        if not USE_ARRAY_FAST_PATH:
            return value.tolist()
        return value
    if is_sequence(value):
        return list(value)
    raise ArrayTypeError(f"{where} requires a list, tuple or array, got {type(value).__name__}")


def as_int(value: object, *, where: str) -> int:
    """Coerce an integer-valued scalar argument (int, integral float, 0-d array)."""
    scalar = _as_scalar(value)
    if isinstance(scalar, bool) or is_array(scalar):
        raise ArrayTypeError(f"{where} must be an integer, got {type(value).__name__}")
    if isinstance(scalar, numbers.Integral):
        return int(scalar)
    if isinstance(scalar, numbers.Real):
        real = float(scalar)
        if real.is_integer():
            return int(real)
    raise ArrayTypeError(f"{where} must be an integer, got {scalar!r}")


def as_count(value: object, *, where: str, minimum: int = 0) -> int:
    count = as_int(value, where=where)
    if count < minimum:
        raise InvalidArgumentError(f"{where} must be >= {minimum}, got {count}")
    return count


def array_match_mask(arr, value):
    """Elementwise strict-equality mask of a rank-1 JAX array against a scalar.

    Returns ``None`` when no element can possibly match (wrong rank or kind).
    """
    if arr.ndim != 1:
        return None
    scalar = _as_scalar(value)
    if jnp.issubdtype(arr.dtype, jnp.bool_):
        if not isinstance(scalar, bool):
            return None
        return arr == scalar
    if isinstance(scalar, bool) or not isinstance(scalar, numbers.Number):
        return None
    return arr == scalar


def same_array_kind(left, right) -> bool:
    """True when two JAX arrays are both boolean or both non-boolean."""
    return jnp.issubdtype(left.dtype, jnp.bool_) == jnp.issubdtype(right.dtype, jnp.bool_)


def first_occurrence_mask(arr):
    """Mask of cells in a rank >= 1 array that are the first of their value.

    NaN cells compare equal to each other, matching ``same_value_zero``.
    """
    count = int(arr.shape[0])
    cells = jnp.reshape(arr, (count, math.prod(int(d) for d in arr.shape[1:])))
    same = cells[:, None, :] == cells[None, :, :]
    if jnp.issubdtype(cells.dtype, jnp.inexact):
        nan = jnp.isnan(cells)
        same = same | (nan[:, None, :] & nan[None, :, :])
    eq = jnp.all(same, axis=2)
    lower = jnp.tril(jnp.ones((count, count), dtype=jnp.bool_))
    first_idx = jnp.argmax(eq & lower, axis=1)
    return first_idx == jnp.arange(count, dtype=first_idx.dtype)
