"""Whole-sequence reductions and elementwise maps."""

import typing as tp

import jax
import jax.numpy as jnp

from seqops.core.validation import as_vector

__all__ = [
    "reduce_sum",
    "map_square",
]


@jax.jit
def _sum(x: jax.Array) -> jax.Array:
    return jnp.sum(x)


@jax.jit
def _square(x: jax.Array) -> jax.Array:
    return jnp.square(x)


def reduce_sum(x: tp.Any) -> jax.Array:
    """Sum all elements of a sequence.

    Args:
        x: One-dimensional numeric sequence.

    Returns:
        A scalar array holding the sum; ``0`` for an empty sequence.
    """
    return _sum(jnp.asarray(as_vector(x)))


def map_square(x: tp.Any) -> jax.Array:
    """Square every element, preserving order and length."""
    return _square(jnp.asarray(as_vector(x)))
