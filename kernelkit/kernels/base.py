"""Base kernel protocols and trait-aware helpers."""

from typing import Any, Protocol, Sequence, runtime_checkable
import jax.numpy as jnp
from jaxtyping import Array, Float

from .traits import is_normalized


@runtime_checkable
class Kernel(Protocol):
    """Protocol for kernels and distances evaluated on a pair of points."""

    def evaluate(self, a: Any, b: Any) -> float:
        """
        Evaluate the kernel on two points.

        Parameters:
            a: First point
            b: Second point

        Returns:
            Kernel value
        """
        ...


def kernel_diagonal(kernel: Kernel, X: Sequence) -> Float[Array, "n"]:
    """
    Diagonal of K(X, X).

    For kernels registered as normalized this is all ones and the kernel is
    never evaluated, so points a kernel documents as an exception (the zero
    vector for ``CosineDistance``) also get 1.

    Parameters:
        kernel: Kernel instance
        X: Sequence of n input points

    Returns:
        Diagonal values, shape (n,)
    """
    if is_normalized(kernel):
        return jnp.ones(len(X))
    return jnp.array([kernel.evaluate(x, x) for x in X])
