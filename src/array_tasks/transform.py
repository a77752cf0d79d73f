"""Operations that reorder, slice, filter and reshape arrays.

Each function returns a new container and never mutates its argument. A
Python sequence produces a ``list``; a JAX array produces a JAX array unless
the result is ragged (chunks, ``select_many``), in which case a ``list`` of
array pieces is returned.
"""

from __future__ import annotations

import jax.numpy as jnp

from .errors import ArrayShapeError, ArrayTypeError, IndexRangeError
from .values import (
    as_count,
    as_int,
    as_sequence,
    first_occurrence_mask,
    is_array,
    is_container,
    is_falsy,
    is_number,
    is_sequence,
    same_value_zero,
)


def remove_falsy_values(arr):
    """Drop False, None, UNDEFINED, zero, "" and NaN.

    >>> remove_falsy_values([0, False, 'cat', float('nan'), True, ''])
    ['cat', True]
    """
    items = as_sequence(arr, where="remove_falsy_values")
    if is_array(items):
        if items.ndim != 1:
            return items
        if jnp.issubdtype(items.dtype, jnp.bool_):
            return items[items]
        keep = items != 0
        if jnp.issubdtype(items.dtype, jnp.inexact):
            keep = keep & ~jnp.isnan(items)
        return items[keep]
    return [item for item in items if not is_falsy(item)]


def _insert_into_array(items, item, idx: int):
    if items.ndim == 1 and (is_number(item) or isinstance(item, bool)):
        block = jnp.asarray([item])
    elif items.ndim > 1 and is_container(item):
        block = jnp.asarray(item)
        if block.shape != items.shape[1:]:
            raise ArrayShapeError(
                f"insert_item cell shape {tuple(block.shape)} does not match array cells {tuple(items.shape[1:])}"
            )
        block = block[None]
    else:
        return None
    return jnp.concatenate((items[:idx], block, items[idx:]), axis=0)


def insert_item(arr, item, index):
    items = as_sequence(arr, where="insert_item")
    idx = as_int(index, where="insert_item index")
    if idx < 0 or idx > len(items):
        raise IndexRangeError(f"insert_item index {idx} outside [0, {len(items)}]")

    if is_array(items):
        inserted = _insert_into_array(items, item, idx)
        if inserted is not None:
            return inserted
        items = items.tolist()
    return [*items[:idx], item, *items[idx:]]


def get_head(arr, n):
    items = as_sequence(arr, where="get_head")
    count = as_count(n, where="get_head n")
    return items[:count]


def get_tail(arr, n):
    items = as_sequence(arr, where="get_tail")
    count = as_count(n, where="get_tail n")
    if count == 0:
        return items[:0]
    return items[-count:]


def double_array(arr):
    items = as_sequence(arr, where="double_array")
    if is_array(items):
        return jnp.concatenate((items, items), axis=0)
    return items + items


def distinct(arr):
    """Unique values in first-occurrence order."""
    items = as_sequence(arr, where="distinct")
    if is_array(items):
        if items.shape[0] == 0:
            return items
        return items[first_occurrence_mask(items)]

    out: list[object] = []
    for item in items:
        if not any(same_value_zero(item, existing) for existing in out):
            out.append(item)
    return out


def _flatten_into(out: list[object], value) -> None:
    stack = [iter(value)]
    while stack:
        for item in stack[-1]:
            if is_sequence(item):
                stack.append(iter(item))
                break
            if is_array(item) and item.ndim >= 1:
                out.extend(jnp.ravel(item).tolist())
            else:
                out.append(item)
        else:
            stack.pop()


def flatten_array(nested_array):
    """Depth-first, left-to-right flattening of arbitrarily nested arrays.

    >>> flatten_array([1, [2, [3, 4], 5], 6])
    [1, 2, 3, 4, 5, 6]
    """
    items = as_sequence(nested_array, where="flatten_array")
    if is_array(items):
        return jnp.ravel(items)
    if not any(is_container(item) for item in items):
        return items

    out: list[object] = []
    _flatten_into(out, items)
    return out


def select_many(arr, children_selector) -> list[object]:
    """Map each element to a sequence and concatenate the results one level deep.

    A selector result that is not a sequence is kept as a single element.
    """
    if not callable(children_selector):
        raise ArrayTypeError("select_many children_selector must be callable")
    items = as_sequence(arr, where="select_many")

    out: list[object] = []
    for item in items:
        children = children_selector(item)
        if is_sequence(children):
            out.extend(children)
        elif is_array(children) and children.ndim >= 1:
            out.extend(children.tolist())
        else:
            out.append(children)
    return out


def create_chunks(arr, chunk_size) -> list[object]:
    """Consecutive pieces of ``chunk_size`` elements; the last one may be shorter.

    >>> create_chunks([1, 2, 3, 4, 5, 6, 7], 3)
    [[1, 2, 3], [4, 5, 6], [7]]
    """
    items = as_sequence(arr, where="create_chunks")
    size = as_count(chunk_size, where="create_chunks chunk_size", minimum=1)
    return [items[start : start + size] for start in range(0, len(items), size)]


def propagate_items_by_position_index(arr):
    """Repeat the item at 1-based position ``k`` exactly ``k`` times."""
    items = as_sequence(arr, where="propagate_items_by_position_index")
    count = len(items)
    if is_array(items):
        if count == 0:
            return items
        repeats = jnp.arange(1, count + 1)
        return jnp.repeat(items, repeats, axis=0, total_repeat_length=count * (count + 1) // 2)

    out: list[object] = []
    for position, item in enumerate(items, start=1):
        out.extend(item for _ in range(position))
    return out


def shift_array(arr, n):
    """Circular rotation: positive ``n`` moves the last ``n`` items to the front.

    >>> shift_array(['a', 'b', 'c', 'd'], -1)
    ['b', 'c', 'd', 'a']
    """
    items = as_sequence(arr, where="shift_array")
    count = as_int(n, where="shift_array n")
    if len(items) == 0:
        return items
    # Right by n == left by -n.
    split = -count % len(items)
    if is_array(items):
        return jnp.concatenate((items[split:], items[:split]), axis=0)
    return [*items[split:], *items[:split]]


def swap_head_and_tail(arr):
    """Swap the first and last halves, leaving an odd middle element in place.

    >>> swap_head_and_tail([1, 2, 3, 4, 5])
    [4, 5, 3, 1, 2]
    """
    items = as_sequence(arr, where="swap_head_and_tail")
    length = len(items)
    half = length // 2
    head = items[:half]
    middle = items[half : length - half]
    tail = items[length - half :]
    if is_array(items):
        return jnp.concatenate((tail, middle, head), axis=0)
    return [*tail, *middle, *head]
