"""Input coercion for sequence and mask arguments.

All public operations funnel their array-like arguments through
:func:`as_vector` or :func:`as_mask`. Both return a NumPy array so that
validation (which needs concrete values) happens outside of any ``jax.jit``
traced code; the numeric kernels convert to JAX afterwards.

Scalars are rejected rather than promoted to length-1 sequences: callers wrap
a single value themselves (``[x]``).
"""

import collections.abc
import typing as tp

import jax.numpy as jnp
import numpy as np

from seqops.core.errors import (
    LengthMismatchError,
    MaskValueError,
    SequenceTypeError,
    ShapeError,
)
from seqops.logger.logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "as_vector",
    "as_mask",
    "check_same_length",
]


def _is_real(dtype: np.dtype) -> bool:
    # jnp.issubdtype also recognises the ml_dtypes floats (bfloat16, float8_*)
    return jnp.issubdtype(dtype, jnp.integer) or jnp.issubdtype(dtype, jnp.floating)


def _as_1d(values: tp.Any, name: str) -> np.ndarray:
    if isinstance(values, collections.abc.Iterator):
        values = list(values)

    try:
        arr = np.asarray(values)
    except ValueError as err:
        # Ragged nested input
        raise ShapeError(f"{name} must be a one-dimensional sequence.") from err

    if arr.ndim == 0:
        if arr.dtype == object and isinstance(values, collections.abc.Iterable):
            raise ShapeError(
                f"{name} must be an ordered sequence, got {type(values).__name__}."
            )
        raise ShapeError(
            f"{name} must be a sequence, got a scalar; wrap it as [{name}]."
        )
    if arr.ndim > 1:
        raise ShapeError(
            f"{name} must be one-dimensional, got shape {arr.shape}."
        )
    return arr


def as_vector(values: tp.Any, name: str = "x") -> np.ndarray:
    """Coerce ``values`` to a 1-D array of real numbers.

    Booleans and integers narrower than the default integer are widened so
    that prefix sums, products and squares cannot wrap around. Floating point
    dtypes are kept. Iterators are materialised. Empty input yields an empty
    float array.

    Args:
        values: List, tuple, iterator, NumPy array or JAX array.
        name: Argument name used in error messages.

    Returns:
        A one-dimensional integer or floating point NumPy array.

    Raises:
        ShapeError: If ``values`` is a scalar, unordered, or not one-dimensional.
        SequenceTypeError: If the elements are not real numbers.
    """
    arr = _as_1d(values, name)

    if arr.dtype == np.bool_:
        return arr.astype(np.int_)
    if not _is_real(arr.dtype):
        raise SequenceTypeError(
            f"{name} must contain real numbers, got dtype {arr.dtype}."
        )
    if jnp.issubdtype(arr.dtype, jnp.integer):
        # uint64 has no wider signed integer and becomes float64
        return arr.astype(np.result_type(arr.dtype, np.int_))
    return arr


def as_mask(values: tp.Any, name: str = "mask") -> np.ndarray:
    """Coerce ``values`` to a 1-D boolean array.

    Accepts booleans or numbers restricted to {0, 1}.

    Raises:
        ShapeError: If ``values`` is a scalar or not one-dimensional.
        SequenceTypeError: If the elements are neither booleans nor numbers.
        MaskValueError: If a numeric element is not 0 or 1.
    """
    arr = _as_1d(values, name)

    if arr.dtype == np.bool_:
        return arr
    if not _is_real(arr.dtype):
        raise SequenceTypeError(
            f"{name} must contain booleans or 0/1 values, got dtype {arr.dtype}."
        )
    if not np.all((arr == 0) | (arr == 1)):
        raise MaskValueError(f"{name} may only contain 0/1 or False/True.")
    return arr.astype(bool)


def check_same_length(
    values: np.ndarray, mask: np.ndarray, names: tp.Tuple[str, str] = ("x", "mask")
) -> None:
    """Raise :class:`LengthMismatchError` unless both arrays have equal length."""
    if len(values) != len(mask):
        logger.debug(
            f"Length mismatch: len({names[0]})={len(values)}, "
            f"len({names[1]})={len(mask)}"
        )
        raise LengthMismatchError(
            f"{names[1]} has length {len(mask)} but {names[0]} has length "
            f"{len(values)}; sequences must be aligned position-wise."
        )
