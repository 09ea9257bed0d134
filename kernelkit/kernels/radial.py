"""Shift-invariant kernels that depend only on the distance between points."""

import math
import jax.numpy as jnp
from jax import jit
from functools import partial
from jaxtyping import Array, ArrayLike, Float

from .lmetric import EuclideanDistance, SquaredEuclideanDistance
from .traits import register_traits
from ..utils.validation import check_point_sets


class _BandwidthKernel:
    """Common bandwidth handling for radial kernels."""

    def __init__(self, bandwidth: float = 1.0):
        if bandwidth <= 0:
            raise ValueError("bandwidth must be positive")
        self._bandwidth = float(bandwidth)

    @property
    def bandwidth(self) -> float:
        """Kernel bandwidth parameter."""
        return self._bandwidth

    def __repr__(self):
        return f"{type(self).__name__}(bandwidth={self._bandwidth})"


@register_traits(is_normalized=True)
class GaussianKernel(_BandwidthKernel):
    """
    Gaussian (RBF) kernel.

    k(x, y) = exp(-||x - y||² / (2h²))

    Parameters:
        bandwidth: Bandwidth parameter h (length scale)
    """

    @property
    def gamma(self) -> float:
        """The exponent coefficient -1 / (2h²)."""
        return -0.5 / self._bandwidth ** 2

    def evaluate(self, a: ArrayLike, b: ArrayLike) -> float:
        """Kernel value for a single pair of points."""
        return math.exp(self.gamma * SquaredEuclideanDistance.evaluate(a, b))

    def __call__(
        self,
        X: Float[Array, "n d"],
        Y: Float[Array, "m d"]
    ) -> Float[Array, "n m"]:
        """
        Compute Gaussian kernel matrix.

        Parameters:
            X: First set of points, shape (n, d)
            Y: Second set of points, shape (m, d)

        Returns:
            Kernel matrix of shape (n, m)
        """
        X, Y = check_point_sets(X, Y)
        return self._kernel_matrix(X, Y)

    @partial(jit, static_argnums=(0,))
    def _kernel_matrix(
        self,
        X: Float[Array, "n d"],
        Y: Float[Array, "m d"]
    ) -> Float[Array, "n m"]:
        # ||x - y||² = ||x||² + ||y||² - 2<x, y>
        X_sqnorm = jnp.sum(X ** 2, axis=1, keepdims=True)  # (n, 1)
        Y_sqnorm = jnp.sum(Y ** 2, axis=1, keepdims=True)  # (m, 1)
        sq_distances = X_sqnorm + Y_sqnorm.T - 2 * jnp.dot(X, Y.T)  # (n, m)
        # Rounding can push exact matches slightly negative
        sq_distances = jnp.maximum(sq_distances, 0.0)
        return jnp.exp(self.gamma * sq_distances)

    def diagonal(self, X: Float[Array, "n d"]) -> Float[Array, "n"]:
        """
        Diagonal of K(X, X) - always 1 for the Gaussian kernel.

        Parameters:
            X: Input points, shape (n, d)

        Returns:
            Diagonal values, shape (n,)
        """
        return jnp.ones(jnp.shape(X)[0])


@register_traits(is_normalized=True)
class LaplacianKernel(_BandwidthKernel):
    """
    Laplacian kernel.

    k(x, y) = exp(-||x - y|| / h)
    """

    def evaluate(self, a: ArrayLike, b: ArrayLike) -> float:
        return math.exp(-EuclideanDistance.evaluate(a, b) / self._bandwidth)


@register_traits(is_normalized=True)
class EpanechnikovKernel(_BandwidthKernel):
    """
    Epanechnikov kernel.

    k(x, y) = max(0, 1 - ||x - y||² / h²)
    """

    def evaluate(self, a: ArrayLike, b: ArrayLike) -> float:
        sq_distance = SquaredEuclideanDistance.evaluate(a, b)
        return max(0.0, 1.0 - sq_distance / self._bandwidth ** 2)


@register_traits(is_normalized=True)
class TriangularKernel(_BandwidthKernel):
    """
    Triangular kernel.

    k(x, y) = max(0, 1 - ||x - y|| / h)
    """

    def evaluate(self, a: ArrayLike, b: ArrayLike) -> float:
        return max(0.0, 1.0 - EuclideanDistance.evaluate(a, b) / self._bandwidth)


@register_traits(is_normalized=True)
class SphericalKernel(_BandwidthKernel):
    """
    Spherical (uniform ball) kernel: 1 inside the ball of radius h, 0 outside.
    """

    def evaluate(self, a: ArrayLike, b: ArrayLike) -> float:
        # Squared form avoids the root
        sq_distance = SquaredEuclideanDistance.evaluate(a, b)
        return 1.0 if sq_distance <= self._bandwidth ** 2 else 0.0
