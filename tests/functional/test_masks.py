import jax.numpy as jnp
import numpy as np
import pytest
from seqops.core.errors import LengthMismatchError, MaskValueError, ShapeError
from seqops.functional.masks import (
    apply_predicate_mask,
    count_true,
    select,
    true_indices,
)


@pytest.fixture
def symmetric_range():
    return [-3, -2, -1, 0, 1, 2, 3]


def test_apply_predicate_mask_example(symmetric_range):
    mask = apply_predicate_mask(symmetric_range, lambda v: v > 0)
    expected = jnp.array([False, False, False, False, True, True, True])
    assert mask.dtype == jnp.bool_
    assert jnp.array_equal(mask, expected)


def test_apply_predicate_mask_empty():
    mask = apply_predicate_mask([], lambda v: True)
    assert mask.shape == (0,)
    assert mask.dtype == jnp.bool_


def test_apply_predicate_mask_coerces_truthiness():
    mask = apply_predicate_mask([0, 1, 2, 3], lambda v: v % 2)
    assert jnp.array_equal(mask, jnp.array([False, True, False, True]))


def test_apply_predicate_mask_requires_callable():
    with pytest.raises(TypeError):
        apply_predicate_mask([1, 2], "v > 0")


def test_true_indices_example():
    x = [1, 2, 3, 4, 5]
    assert jnp.array_equal(
        true_indices(apply_predicate_mask(x, lambda v: v > 2)), jnp.array([2, 3, 4])
    )
    assert true_indices(apply_predicate_mask(x, lambda v: v > 10)).tolist() == []


def test_true_indices_empty_mask():
    result = true_indices([])
    assert result.shape == (0,)
    assert jnp.issubdtype(result.dtype, jnp.integer)


def test_true_indices_accepts_zero_one_integers():
    assert true_indices([0, 1, 1, 0, 1]).tolist() == [1, 2, 4]
    assert true_indices(np.array([1.0, 0.0])).tolist() == [0]


def test_true_indices_ascending():
    mask = np.random.default_rng(3).random(200) > 0.5
    indices = np.asarray(true_indices(mask))
    assert np.all(np.diff(indices) > 0)
    assert np.array_equal(indices, np.flatnonzero(mask))


def test_true_indices_rejects_non_binary_values():
    with pytest.raises(MaskValueError):
        true_indices([0, 2, 1])


def test_true_indices_rejects_scalar():
    with pytest.raises(ShapeError):
        true_indices(True)


def test_select_logical_indexing():
    x = [10, 20, 30, 40]
    assert select(x, [True, False, True, False]).tolist() == [10, 30]
    assert select(x, [0, 0, 0, 0]).tolist() == []
    assert select([], []).shape == (0,)


def test_select_length_mismatch():
    with pytest.raises(LengthMismatchError, match="length"):
        select([1, 2, 3], [True, False])
    with pytest.raises(ValueError):
        select([1, 2], [True, False, True])


def test_count_true():
    assert count_true([True, False, True]) == 2
    assert count_true([]) == 0
    assert count_true(apply_predicate_mask(range(10), lambda v: v >= 7)) == 3
