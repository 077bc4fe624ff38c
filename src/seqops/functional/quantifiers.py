"""Existential and universal quantification over a sequence.

Both quantifiers scan left to right and stop at the first element that
decides the answer, so a predicate is called at most ``len(x)`` times.
Predicates receive plain Python scalars.
"""

import typing as tp

from seqops.core.validation import as_vector

__all__ = [
    "exists",
    "for_all",
]

Predicate = tp.Callable[[tp.Any], tp.Any]


def _require_callable(predicate: tp.Any) -> None:
    if not callable(predicate):
        raise TypeError(
            f"predicate must be callable, got {type(predicate).__name__}."
        )


def exists(x: tp.Any, predicate: Predicate) -> bool:
    """Return True if at least one element satisfies ``predicate``.

    Scanning stops at the first match. An empty sequence gives False.

    Args:
        x: One-dimensional numeric sequence.
        predicate: Callable applied to each element; its result is
            interpreted for truthiness.

    Returns:
        Whether some element satisfies ``predicate``.
    """
    _require_callable(predicate)
    return any(predicate(value) for value in as_vector(x).tolist())


def for_all(x: tp.Any, predicate: Predicate) -> bool:
    """Return True if every element satisfies ``predicate``.

    Evaluated as ``not exists(x, not predicate)``, so it stops at the first
    counterexample. An empty sequence gives True (vacuous truth).
    """
    _require_callable(predicate)
    return not exists(x, lambda value: not predicate(value))
