"""Kernels built on the inner product of two points."""

import math
import numpy as np
from jaxtyping import ArrayLike

from .traits import register_traits
from ..utils.validation import check_vector_pair


def _dot(a: ArrayLike, b: ArrayLike) -> float:
    a, b = check_vector_pair(a, b)
    return float(np.vdot(a, b))


@register_traits(is_normalized=False)
class LinearKernel:
    """
    Linear kernel, the plain inner product.

    k(x, y) = <x, y>
    """

    def evaluate(self, a: ArrayLike, b: ArrayLike) -> float:
        return _dot(a, b)

    def __repr__(self):
        return "LinearKernel()"


@register_traits(is_normalized=False)
class PolynomialKernel:
    """
    Polynomial kernel.

    k(x, y) = (<x, y> + offset)^degree

    A fractional degree applied to a negative base gives NaN.

    Parameters:
        degree: Degree of the polynomial
        offset: Constant added to the inner product
    """

    def __init__(self, degree: float = 2.0, offset: float = 0.0):
        self.degree = float(degree)
        self.offset = float(offset)

    def evaluate(self, a: ArrayLike, b: ArrayLike) -> float:
        with np.errstate(invalid="ignore"):
            return float(np.power(_dot(a, b) + self.offset, self.degree))

    def __repr__(self):
        return f"PolynomialKernel(degree={self.degree}, offset={self.offset})"


class HyperbolicTangentKernel:
    """
    Hyperbolic tangent (sigmoid) kernel.

    k(x, y) = tanh(scale * <x, y> + offset)

    Not registered with traits; it resolves to the defaults.
    """

    def __init__(self, scale: float = 1.0, offset: float = 0.0):
        self.scale = float(scale)
        self.offset = float(offset)

    def evaluate(self, a: ArrayLike, b: ArrayLike) -> float:
        return math.tanh(self.scale * _dot(a, b) + self.offset)

    def __repr__(self):
        return f"HyperbolicTangentKernel(scale={self.scale}, offset={self.offset})"


@register_traits(is_normalized=True)
class CosineDistance:
    """
    Cosine similarity, the inner product of the normalized points.

    k(x, y) = <x, y> / (||x|| ||y||)

    Returns 0 when either point is the zero vector, so K(0, 0) = 0. That is
    the one exception to the normalized trait: ``kernel_diagonal`` reports 1
    for every point, the zero vector included.
    """

    def evaluate(self, a: ArrayLike, b: ArrayLike) -> float:
        a, b = check_vector_pair(a, b)
        denominator = float(np.linalg.norm(a.ravel()) * np.linalg.norm(b.ravel()))
        if denominator == 0.0:
            return 0.0
        return float(np.vdot(a, b)) / denominator

    def __repr__(self):
        return "CosineDistance()"
