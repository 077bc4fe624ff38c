import jax.numpy as jnp
import numpy as np
import pytest
from seqops.functional.quantifiers import exists, for_all


class CountingPredicate:
    """Wraps a predicate and records every value it is called with."""

    def __init__(self, fn):
        self.fn = fn
        self.calls = []

    def __call__(self, value):
        self.calls.append(value)
        return self.fn(value)


SEQUENCES = [
    [],
    [0],
    [1, 2, 3, 4, 5],
    [-3, -2, -1, 0, 1, 2, 3],
    [2.5, -0.5, 7.0],
]

PREDICATES = [
    lambda v: v > 0,
    lambda v: v % 2 == 0,
    lambda v: v == 3,
    lambda v: True,
    lambda v: False,
]


def test_exists_empty_is_false():
    assert exists([], lambda v: True) is False


def test_for_all_empty_is_true():
    assert for_all([], lambda v: False) is True


def test_exists_basic():
    assert exists([1, 2, 3], lambda v: v > 2) is True
    assert exists([1, 2, 3], lambda v: v > 3) is False


def test_for_all_basic():
    assert for_all([1, 2, 3], lambda v: v > 0) is True
    assert for_all([1, 2, 3], lambda v: v > 1) is False


def test_exists_stops_at_first_match():
    predicate = CountingPredicate(lambda v: v > 2)
    assert exists([1, 2, 3, 4, 5], predicate)
    assert predicate.calls == [1, 2, 3]


def test_exists_scans_everything_without_match():
    predicate = CountingPredicate(lambda v: v > 10)
    assert not exists([1, 2, 3, 4, 5], predicate)
    assert predicate.calls == [1, 2, 3, 4, 5]


def test_for_all_stops_at_first_counterexample():
    predicate = CountingPredicate(lambda v: v < 3)
    assert not for_all([1, 2, 3, 4, 5], predicate)
    assert predicate.calls == [1, 2, 3]


def test_predicate_receives_python_scalars():
    predicate = CountingPredicate(lambda v: False)
    exists(jnp.array([1, 2]), predicate)
    exists(np.array([0.5]), predicate)
    assert [type(v) for v in predicate.calls] == [int, int, float]


@pytest.mark.parametrize("x", SEQUENCES)
@pytest.mark.parametrize("predicate", PREDICATES)
def test_de_morgan_equivalence(x, predicate):
    assert exists(x, predicate) == (not for_all(x, lambda v: not predicate(v)))
    assert for_all(x, predicate) == (not exists(x, lambda v: not predicate(v)))


def test_non_callable_predicate_rejected():
    with pytest.raises(TypeError, match="callable"):
        exists([1, 2], 3)
    with pytest.raises(TypeError, match="callable"):
        for_all([1, 2], None)


def test_predicate_errors_propagate():
    def explode(value):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        exists([1], explode)


def test_quantifiers_accept_generators():
    assert exists((v for v in [1, 2]), lambda v: v == 2)
    assert for_all(iter([1, 2]), lambda v: v > 0)
