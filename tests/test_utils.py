"""Tests for validation and precision utilities."""

import warnings
import pytest
import numpy as np
import jax.numpy as jnp

from kernelkit.exceptions import DimensionMismatchError
from kernelkit.utils import validation
from kernelkit.utils.precision import (
    double_precision_enabled,
    enable_double_precision,
    get_precision_info,
)


def test_double_precision_enabled_for_tests():
    """conftest switches JAX to float64."""
    assert double_precision_enabled()
    assert jnp.zeros(2).dtype == jnp.float64


def test_enable_is_idempotent():
    assert enable_double_precision() is True
    assert double_precision_enabled()


def test_precision_info():
    info = get_precision_info()
    assert info['double_precision'] is True
    assert info['default_float_dtype'] == 'float64'
    assert info['eps'] == pytest.approx(np.finfo(np.float64).eps)
    assert 'default_device' in info


def test_integers_promoted_to_float():
    x = validation.as_float_array([1, 2, 3])
    assert jnp.issubdtype(x.dtype, jnp.floating)
    assert jnp.allclose(x, jnp.array([1.0, 2.0, 3.0]))


def test_float_dtype_preserved():
    x = validation.as_float_array(jnp.array([1.0], dtype=jnp.float32))
    assert x.dtype == jnp.float32


def test_float64_truncation_warns(monkeypatch):
    monkeypatch.setattr(validation, "double_precision_enabled", lambda: False)
    with pytest.warns(UserWarning, match="truncated to float32"):
        validation.as_float_array(np.array([1.0, 2.0]))


def test_no_warning_in_double_precision():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        validation.as_float_array(np.array([1.0, 2.0]))


def test_check_vector_pair_mismatch():
    with pytest.raises(DimensionMismatchError, match=r"\(2,\) and \(3,\)"):
        validation.check_vector_pair([1, 2], [1, 2, 3])


def test_check_vector_pair_shape_not_just_length():
    with pytest.raises(DimensionMismatchError):
        validation.check_vector_pair(np.zeros((2, 3)), np.zeros((3, 2)))


def test_check_point_sets():
    X, Y = validation.check_point_sets(np.zeros((4, 3)), np.ones((2, 3)))
    assert X.shape == (4, 3)
    assert Y.shape == (2, 3)
    with pytest.raises(DimensionMismatchError):
        validation.check_point_sets(np.zeros((4, 3)), np.ones((2, 2)))


def test_as_float64_is_double_for_any_input():
    assert validation.as_float64([1, 2]).dtype == np.float64
    assert validation.as_float64(np.array([0.5], dtype=np.float32)).dtype == np.float64
    assert validation.as_float64([2 ** 40])[0] == 2.0 ** 40


def test_check_vector_pair_returns_float64():
    a, b = validation.check_vector_pair([1, 2], jnp.array([3.0, 4.0], dtype=jnp.float32))
    assert a.dtype == np.float64
    assert b.dtype == np.float64


def test_large_integers_promoted_without_overflow():
    x = validation.as_float_array([2 ** 40, 0])
    assert float(x[0]) == 2.0 ** 40


def test_float_list_truncation_warns(single_precision):
    with pytest.warns(UserWarning, match="truncated to float32"):
        x = validation.as_float_array([0.1, 0.2])
    assert x.dtype == jnp.float32


def test_integer_list_does_not_warn(single_precision):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        x = validation.as_float_array([1, 2])
    assert x.dtype == jnp.float32
