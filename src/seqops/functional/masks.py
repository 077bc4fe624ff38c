"""Logical (mask) vectors.

A mask is a boolean array aligned position-wise with a source sequence.
Masks are built from a predicate with :func:`apply_predicate_mask` and
consumed by :func:`true_indices`, :func:`select` and :func:`count_true`.

Examples:
    >>> x = [1, 2, 3, 4, 5]
    >>> mask = apply_predicate_mask(x, lambda v: v > 2)
    >>> true_indices(mask)
    Array([2, 3, 4], dtype=int64)
    >>> select(x, mask)
    Array([3, 4, 5], dtype=int64)
"""

import typing as tp

import jax
import jax.numpy as jnp
import numpy as np

from seqops.core.validation import as_mask, as_vector, check_same_length

__all__ = [
    "apply_predicate_mask",
    "true_indices",
    "select",
    "count_true",
]


def apply_predicate_mask(
    x: tp.Any, predicate: tp.Callable[[tp.Any], tp.Any]
) -> jax.Array:
    """Evaluate ``predicate`` at every position of ``x``.

    Args:
        x: One-dimensional numeric sequence.
        predicate: Callable applied to each element as a Python scalar.

    Returns:
        Boolean array with ``mask[i] == bool(predicate(x[i]))``.
    """
    if not callable(predicate):
        raise TypeError(
            f"predicate must be callable, got {type(predicate).__name__}."
        )
    values = as_vector(x).tolist()
    flags = np.fromiter(
        (bool(predicate(value)) for value in values), dtype=bool, count=len(values)
    )
    return jnp.asarray(flags)


def true_indices(mask: tp.Any) -> jax.Array:
    """Positions where ``mask`` is true, in ascending order.

    Returns an empty integer array when no position is true.
    """
    return jnp.flatnonzero(jnp.asarray(as_mask(mask)))


def select(x: tp.Any, mask: tp.Any) -> jax.Array:
    """Elements of ``x`` at the true positions of ``mask``.

    Raises:
        LengthMismatchError: If ``mask`` and ``x`` differ in length.
    """
    values = as_vector(x)
    flags = as_mask(mask)
    check_same_length(values, flags)
    return jnp.asarray(values[flags])


def count_true(mask: tp.Any) -> int:
    """Number of true positions in ``mask``."""
    return int(np.count_nonzero(as_mask(mask)))
