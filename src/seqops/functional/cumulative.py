"""Cumulative aggregates and their exact inverses.

The prefix operators map a sequence ``x`` of length ``n`` to a sequence of
running totals of the same length:

.. math::

    c_i = \\sum_{k=0}^{i} x_k \\qquad p_i = \\prod_{k=0}^{i} x_k

Their inverses recover ``x`` element for element, keeping the length:

.. math::

    x_0 = c_0, \\quad x_i = c_i - c_{i-1} \\qquad
    x_0 = p_0, \\quad x_i = p_i / p_{i-1}

This differs from the plain difference operator
(:func:`successive_differences`), which drops the first element and so
returns ``n - 1`` values.

Note:
    Integer inputs round-trip exactly through the sum pair. Floating point
    inputs, and anything passed through the product pair, round-trip within
    floating point tolerance only.

Examples:
    >>> from seqops.functional.cumulative import cumulative_sum, inverse_of_cumulative_sum
    >>> cumulative_sum([1, 2, 3, 4, 5])
    Array([ 1,  3,  6, 10, 15], dtype=int64)
    >>> inverse_of_cumulative_sum([1, 3, 6, 10, 15])
    Array([1, 2, 3, 4, 5], dtype=int64)
"""

import typing as tp

import jax
import jax.numpy as jnp
import numpy as np

from seqops.core.errors import DomainError
from seqops.core.validation import as_vector
from seqops.logger.logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "cumulative_sum",
    "cumulative_product",
    "inverse_of_cumulative_sum",
    "inverse_of_cumulative_product",
    "successive_differences",
]

InverseMethod = tp.Literal["divide", "log"]


# =============================================================================
# Kernels
# =============================================================================


@jax.jit
def _cumsum(x: jax.Array) -> jax.Array:
    return jnp.cumsum(x)


@jax.jit
def _cumprod(x: jax.Array) -> jax.Array:
    return jnp.cumprod(x)


@jax.jit
def _uncumsum(c: jax.Array) -> jax.Array:
    return jnp.concatenate([c[:1], c[1:] - c[:-1]])


@jax.jit
def _uncumprod_divide(p: jax.Array) -> jax.Array:
    return jnp.concatenate([p[:1], p[1:] / p[:-1]])


@jax.jit
def _uncumprod_log(p: jax.Array) -> jax.Array:
    # exp(log p_i - log p_{i-1}) == p_i / p_{i-1} for p > 0
    ratios = jnp.exp(jnp.log(p[1:]) - jnp.log(p[:-1]))
    return jnp.concatenate([p[:1], ratios])


@jax.jit
def _diff(x: jax.Array) -> jax.Array:
    return x[1:] - x[:-1]


# =============================================================================
# Public API
# =============================================================================


def cumulative_sum(x: tp.Any) -> jax.Array:
    """Inclusive prefix sums: ``c[i] = x[0] + ... + x[i]``.

    Args:
        x: One-dimensional numeric sequence.

    Returns:
        Array with the same length as ``x``.
    """
    return _cumsum(jnp.asarray(as_vector(x)))


def cumulative_product(x: tp.Any) -> jax.Array:
    """Inclusive prefix products: ``p[i] = x[0] * ... * x[i]``.

    An empty sequence gives an empty result.
    """
    return _cumprod(jnp.asarray(as_vector(x)))


def inverse_of_cumulative_sum(c: tp.Any) -> jax.Array:
    """Recover ``x`` from its prefix sums.

    ``inverse_of_cumulative_sum(cumulative_sum(x)) == x`` and
    ``cumulative_sum(inverse_of_cumulative_sum(c)) == c``.

    Args:
        c: One-dimensional numeric sequence of prefix sums.

    Returns:
        Array with the same length as ``c``.
    """
    return _uncumsum(jnp.asarray(as_vector(c, name="c")))


def inverse_of_cumulative_product(
    p: tp.Any, method: InverseMethod = "divide"
) -> jax.Array:
    """Recover ``x`` from its prefix products.

    Args:
        p: One-dimensional numeric sequence of prefix products.
        method: ``"divide"`` computes ``p[i] / p[i-1]`` directly and requires
            every divisor ``p[0..n-2]`` to be nonzero (the last element may be
            zero). ``"log"`` computes ``exp(log p[i] - log p[i-1])`` and
            requires every element to be strictly positive.

    Returns:
        Floating point array with the same length as ``p``.

    Raises:
        DomainError: If ``p`` violates the precondition of ``method``.
        ValueError: If ``method`` is not recognised.
    """
    arr = as_vector(p, name="p")

    if method == "divide":
        zeros = np.flatnonzero(arr[:-1] == 0)
        if zeros.size:
            logger.debug(f"Zero prefix product at positions {zeros.tolist()}")
            raise DomainError(
                f"Prefix product is zero at position {int(zeros[0])}; "
                "the following element cannot be recovered."
            )
        return _uncumprod_divide(jnp.asarray(arr))

    if method == "log":
        if np.any(arr <= 0):
            logger.debug("Non-positive prefix product passed to log inverse")
            raise DomainError(
                "The log method requires all prefix products to be strictly positive."
            )
        return _uncumprod_log(jnp.asarray(arr))

    raise ValueError(f"Unknown method {method!r}; expected 'divide' or 'log'.")


def successive_differences(x: tp.Any) -> jax.Array:
    """Differences of neighbours, ``x[i+1] - x[i]``.

    Returns one element fewer than ``x`` (none for inputs shorter than two),
    so this is *not* an inverse of :func:`cumulative_sum`; use
    :func:`inverse_of_cumulative_sum` for that.
    """
    return _diff(jnp.asarray(as_vector(x)))
