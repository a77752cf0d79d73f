"""Operations that build new arrays from scalar parameters."""

from __future__ import annotations

import jax.numpy as jnp

from .errors import InvalidArgumentError
from .values import as_count, as_int


def get_interval_array(start, end) -> list[int]:
    """Inclusive ascending integers from ``start`` to ``end``.

    >>> get_interval_array(-2, 2)
    [-2, -1, 0, 1, 2]
    """
    lo = as_int(start, where="get_interval_array start")
    hi = as_int(end, where="get_interval_array end")
    if lo > hi:
        raise InvalidArgumentError(f"get_interval_array requires start <= end, got {lo} > {hi}")
    return list(range(lo, hi + 1))


def generate_odds(length) -> list[int]:
    """First ``length`` positive odd integers."""
    count = as_count(length, where="generate_odds length")
    return list(range(1, 2 * count, 2))


def get_identity_matrix(n) -> list[list[int]]:
    size = as_count(n, where="get_identity_matrix n")
    if size == 0:
        return []
    # tolist() yields fresh row lists of Python ints.
    return jnp.eye(size, dtype=jnp.int32).tolist()


def create_n_dimensional_array(n, size):
    """Zero-filled array nested ``n`` levels deep, every level of length ``size``.

    Each nested list is built independently, so mutating one branch never
    affects another.

    >>> create_n_dimensional_array(3, 2)
    [[[0, 0], [0, 0]], [[0, 0], [0, 0]]]
    """
    depth = as_count(n, where="create_n_dimensional_array n", minimum=1)
    length = as_count(size, where="create_n_dimensional_array size", minimum=1)
    return _zeros(depth, length)


def _zeros(depth: int, length: int):
    if depth == 1:
        return [0] * length
    return [_zeros(depth - 1, length) for _ in range(length)]
