"""Lookup and search operations over arrays."""

from __future__ import annotations

import numbers
from bisect import bisect_left

import jax.numpy as jnp

from .errors import ArrayTypeError, InvalidArgumentError
from .values import (
    array_match_mask,
    as_int,
    as_sequence,
    first_occurrence_mask,
    is_array,
    is_container,
    is_nan,
    is_number,
    same_array_kind,
    same_value_zero,
    strict_equals,
)


def find_element(arr, value) -> int:
    """Index of the first element strictly equal to ``value``, or -1."""
    items = as_sequence(arr, where="find_element")
    if is_array(items):
        mask = array_match_mask(items, value)
        if mask is None:
            return -1
        hits = jnp.nonzero(mask)[0]
        return int(hits[0]) if hits.size else -1

    for idx, item in enumerate(items):
        if strict_equals(item, value):
            return idx
    return -1


def find_all_occurrences(arr, item) -> int:
    items = as_sequence(arr, where="find_all_occurrences")
    if is_array(items):
        mask = array_match_mask(items, item)
        return 0 if mask is None else int(jnp.sum(mask))
    return sum(1 for candidate in items if strict_equals(candidate, item))


def is_value_equals_index(arr) -> bool:
    items = as_sequence(arr, where="is_value_equals_index")
    if is_array(items):
        if items.ndim != 1 or jnp.issubdtype(items.dtype, jnp.bool_):
            return False
        return bool(jnp.any(items == jnp.arange(int(items.shape[0]))))
    return any(strict_equals(item, idx) for idx, item in enumerate(items))


def get_element_by_indices(arr, indices):
    """Follow ``indices`` into nested arrays.

    Returns ``None`` as soon as an index is out of range or the walk reaches
    something that cannot be indexed (an atom or a string).

    >>> get_element_by_indices([[[1, 2, 3]]], [0, 0, 1])
    2
    """
    if not is_container(arr):
        raise ArrayTypeError(f"get_element_by_indices requires an array, got {type(arr).__name__}")
    path = as_sequence(indices, where="get_element_by_indices indices")

    current = arr
    for position, raw in enumerate(path):
        idx = as_int(raw, where=f"get_element_by_indices indices[{position}]")
        if not is_container(current):
            return None
        if idx < 0 or idx >= len(current):
            return None
        current = current[idx]

    if is_array(current) and current.ndim == 0:
        return current.item()
    return current


def _is_truncated_odd(value) -> bool:
    # Truncating remainder: -3 leaves -1, so negative odd numbers do not count.
    # For positive values that matches Python's %, which stays exact for big ints.
    if not is_number(value) or isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        raise ArrayTypeError(f"get_indices_of_odd_numbers requires real numbers, got {value!r}")
    return value > 0 and value % 2 == 1


def get_indices_of_odd_numbers(nums):
    items = as_sequence(nums, where="get_indices_of_odd_numbers")
    if is_array(items):
        if items.ndim != 1 or jnp.issubdtype(items.dtype, jnp.bool_) or jnp.issubdtype(items.dtype, jnp.complexfloating):
            raise ArrayTypeError("get_indices_of_odd_numbers requires a rank-1 real-valued array")
        return jnp.nonzero(jnp.fmod(items, 2) == 1)[0]
    return [idx for idx, item in enumerate(items) if _is_truncated_odd(item)]


def find_common_elements(arr1, arr2):
    """Elements of ``arr1`` also present in ``arr2``, in ``arr1`` order, without repeats.

    >>> find_common_elements([1, 2, 3], [2, 3, 4])
    [2, 3]
    """
    left = as_sequence(arr1, where="find_common_elements arr1")
    right = as_sequence(arr2, where="find_common_elements arr2")

    if is_array(left) and is_array(right) and left.ndim == 1 and right.ndim == 1:
        if not same_array_kind(left, right) or left.shape[0] == 0:
            return left[:0]
        member = jnp.any(left[:, None] == right[None, :], axis=1)
        return left[member & first_occurrence_mask(left)]

    if is_array(left):
        left = left.tolist()
    if is_array(right):
        right = right.tolist()

    out: list[object] = []
    for item in left:
        if not any(strict_equals(item, candidate) for candidate in right):
            continue
        if any(same_value_zero(item, existing) for existing in out):
            continue
        out.append(item)
    return out


def _ordered_reals(items, *, where: str) -> list[numbers.Real]:
    out: list[numbers.Real] = []
    for idx, item in enumerate(items):
        if is_array(item) and item.ndim == 0:
            item = item.item()
        if not is_number(item) or not isinstance(item, numbers.Real):
            raise ArrayTypeError(f"{where} requires real numbers, got {item!r}")
        if is_nan(item):
            raise InvalidArgumentError(f"{where} cannot order NaN at index {idx}")
        out.append(item)
    return out


def find_longest_increasing_subsequence(nums, *, contiguous: bool = True) -> int:
    """Length of the longest strictly increasing subsequence.

    By default the subsequence is a run of adjacent elements:

    >>> find_longest_increasing_subsequence([10, 22, 9, 33, 21, 50, 41, 60, 80])
    3

    With ``contiguous=False`` elements may be skipped; this uses patience
    sorting, where ``tails[k]`` is the smallest tail of any increasing
    subsequence of length ``k + 1``:

    >>> find_longest_increasing_subsequence([10, 22, 9, 33, 21, 50, 41, 60, 80], contiguous=False)
    6
    """
    items = as_sequence(nums, where="find_longest_increasing_subsequence")
    if is_array(items):
        items = items.tolist()
    values = _ordered_reals(items, where="find_longest_increasing_subsequence")

    if not contiguous:
        tails: list[numbers.Real] = []
        for value in values:
            pos = bisect_left(tails, value)
            if pos == len(tails):
                tails.append(value)
            else:
                tails[pos] = value
        return len(tails)

    best = 0
    run = 0
    for idx, value in enumerate(values):
        run = run + 1 if idx and value > values[idx - 1] else 1
        best = max(best, run)
    return best
