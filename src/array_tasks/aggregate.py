"""Reductions and numeric summaries over arrays."""

from __future__ import annotations

import numbers
import os
from decimal import ROUND_HALF_UP, Decimal
from typing import Final

import jax.numpy as jnp

from .errors import ArrayShapeError, ArrayTypeError, InvalidArgumentError
from .values import as_count, as_sequence, is_array, is_container, is_falsy, is_nan, is_number


AVERAGE_DECIMALS: Final[int] = max(0, int(os.environ.get("ARRAY_TASKS_AVERAGE_DECIMALS", "2")))


def _require_number(value, *, where: str):
    if is_array(value) and value.ndim == 0:
        value = value.item()
    if not is_number(value):
        raise ArrayTypeError(f"{where} must be a number, got {value!r}")
    return value


def _require_real(value, *, where: str):
    value = _require_number(value, where=where)
    if not isinstance(value, numbers.Real):
        raise ArrayTypeError(f"{where} must be a real number, got {value!r}")
    if is_nan(value):
        raise InvalidArgumentError(f"{where} cannot be NaN")
    return value


def _zero_nan(arr):
    if jnp.issubdtype(arr.dtype, jnp.inexact):
        return jnp.where(jnp.isnan(arr), 0, arr)
    return arr


def sum_arrays(arr1, arr2):
    """Elementwise sum over the longer length; missing and falsy elements count as 0.

    >>> sum_arrays([-1, 0, 1], [1, 2, 3, 4])
    [0, 2, 4, 4]
    """
    left = as_sequence(arr1, where="sum_arrays arr1")
    right = as_sequence(arr2, where="sum_arrays arr2")
    length = max(len(left), len(right))

    if is_array(left) and is_array(right) and left.ndim == 1 and right.ndim == 1:
        left = jnp.pad(_zero_nan(left), (0, length - int(left.shape[0])))
        right = jnp.pad(_zero_nan(right), (0, length - int(right.shape[0])))
        return left + right

    if is_array(left):
        left = left.tolist()
    if is_array(right):
        right = right.tolist()

    out: list[object] = []
    for idx in range(length):
        terms = []
        for side, items in (("arr1", left), ("arr2", right)):
            if idx >= len(items) or is_falsy(items[idx]):
                terms.append(0)
            else:
                terms.append(_require_number(items[idx], where=f"sum_arrays {side}[{idx}]"))
        out.append(terms[0] + terms[1])
    return out


def _round_half_up(value: float, places: int) -> float:
    # Decimal(float) is exact, so ties are judged on the stored binary value.
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def get_average(arr):
    """Mean rounded to ``AVERAGE_DECIMALS`` places; an empty array averages to 0.

    >>> get_average([2, 3, 3])
    2.67
    """
    items = as_sequence(arr, where="get_average")
    count = len(items)
    if count == 0:
        return 0

    if is_array(items):
        if items.ndim != 1 or not jnp.issubdtype(items.dtype, jnp.number) or jnp.issubdtype(items.dtype, jnp.complexfloating):
            raise ArrayTypeError("get_average requires a rank-1 real-valued array")
        # Summed in Python: int32 and float32 accumulators overflow or drift.
        total = sum(items.tolist())
    else:
        total = sum(_require_real(item, where=f"get_average arr[{idx}]") for idx, item in enumerate(items))
    return _round_half_up(total / count, AVERAGE_DECIMALS)


def calculate_balance(arr):
    """Sum of ``income - expense`` over ``[income, expense]`` pairs."""
    pairs = as_sequence(arr, where="calculate_balance")
    if len(pairs) == 0:
        return 0

    if is_array(pairs):
        if pairs.ndim != 2 or int(pairs.shape[1]) < 2:
            raise ArrayShapeError(f"calculate_balance requires shape (k, 2), got {tuple(pairs.shape)}")
        if jnp.issubdtype(pairs.dtype, jnp.bool_):
            raise ArrayTypeError("calculate_balance requires a numeric array")
        return sum(income - expense for income, expense in pairs[:, :2].tolist())

    balance = 0
    for idx, pair in enumerate(pairs):
        if not is_container(pair) or len(pair) < 2:
            raise ArrayShapeError(f"calculate_balance entry {idx} is not an [income, expense] pair: {pair!r}")
        income = _require_number(pair[0], where=f"calculate_balance income[{idx}]")
        expense = _require_number(pair[1], where=f"calculate_balance expense[{idx}]")
        balance += income - expense
    return balance


def get_falsy_values_count(arr) -> int:
    items = as_sequence(arr, where="get_falsy_values_count")
    if is_array(items):
        if items.ndim != 1:
            return 0
        if jnp.issubdtype(items.dtype, jnp.bool_):
            return int(jnp.sum(~items))
        falsy = items == 0
        if jnp.issubdtype(items.dtype, jnp.inexact):
            falsy = falsy | jnp.isnan(items)
        return int(jnp.sum(falsy))
    return sum(1 for item in items if is_falsy(item))


def get_max_items(arr, n):
    """The ``n`` largest values in descending order, duplicates kept.

    >>> get_max_items([10, 2, 7, 5, 3, -5], 3)
    [10, 7, 5]
    """
    items = as_sequence(arr, where="get_max_items")
    count = as_count(n, where="get_max_items n")

    if is_array(items):
        if items.ndim != 1 or jnp.issubdtype(items.dtype, jnp.complexfloating):
            raise ArrayTypeError("get_max_items requires a rank-1 real-valued array")
        if jnp.issubdtype(items.dtype, jnp.inexact) and bool(jnp.any(jnp.isnan(items))):
            raise InvalidArgumentError("get_max_items cannot order NaN")
        return jnp.flip(jnp.sort(items))[:count]

    for idx, item in enumerate(items):
        _require_real(item, where=f"get_max_items arr[{idx}]")
    # sorted(reverse=True) keeps equal values in their original order.
    return sorted(items, reverse=True)[:count]
