"""Input validation helpers shared by metrics and kernels."""

from typing import Tuple
import warnings
import numpy as np
import jax
import jax.numpy as jnp
from jaxtyping import Array, Float, ArrayLike

from ..exceptions import DimensionMismatchError
from .precision import double_precision_enabled


def as_float64(x: ArrayLike) -> np.ndarray:
    """
    Convert an array-like to a float64 NumPy array.

    Used for single pair evaluations, which are always double precision
    whatever the JAX precision setting.
    """
    return np.asarray(x, dtype=np.float64)


def as_float_array(x: ArrayLike) -> Float[Array, "..."]:
    """
    Convert an array-like to a JAX array of the default floating dtype.

    Integer and boolean inputs are promoted; floating JAX arrays keep their
    dtype. The default dtype is float64 when double precision is enabled,
    float32 otherwise.
    """
    if isinstance(x, jax.Array):
        if jnp.issubdtype(x.dtype, jnp.floating):
            return x
        return x.astype(jnp.result_type(float))
    x = np.asarray(x)
    if not np.issubdtype(x.dtype, np.floating):
        # Promote on the host so large integers never pass through int32
        x = x.astype(jnp.result_type(float))
    elif x.dtype == np.float64 and not double_precision_enabled():
        warnings.warn(
            "float64 input truncated to float32; call "
            "kernelkit.enable_double_precision() for double precision results"
        )
    return jnp.asarray(x)


def check_vector_pair(
    a: ArrayLike,
    b: ArrayLike
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Convert two operands to float64 and check that their shapes match.

    Parameters:
        a: First operand
        b: Second operand

    Returns:
        Both operands as float64 NumPy arrays

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    a = as_float64(a)
    b = as_float64(b)
    if a.shape != b.shape:
        raise DimensionMismatchError(a.shape, b.shape)
    return a, b


def check_point_sets(
    X: ArrayLike,
    Y: ArrayLike
) -> Tuple[Float[Array, "n d"], Float[Array, "m d"]]:
    """
    Convert two point sets and check that they live in the same space.

    Parameters:
        X: First set of points, shape (n, d)
        Y: Second set of points, shape (m, d)

    Returns:
        Both point sets as floating JAX arrays

    Raises:
        ValueError: If either input is not 2D
        DimensionMismatchError: If the number of features differs
    """
    X = as_float_array(X)
    Y = as_float_array(Y)
    if X.ndim != 2 or Y.ndim != 2:
        raise ValueError("X and Y must be 2D arrays of shape (n_points, n_features)")
    if X.shape[1] != Y.shape[1]:
        raise DimensionMismatchError(X.shape[1:], Y.shape[1:])
    return X, Y
