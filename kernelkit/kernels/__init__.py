"""Kernels, distances and kernel traits for kernelkit."""

from .base import Kernel, kernel_diagonal
from .traits import (
    KernelTraits,
    DEFAULT_TRAITS,
    register_traits,
    kernel_traits,
    is_normalized,
    registered_kernels,
)
from .lmetric import (
    LMetric,
    LMetricConfig,
    lmetric_distance,
    ManhattanDistance,
    SquaredEuclideanDistance,
    EuclideanDistance,
)
from .radial import (
    GaussianKernel,
    LaplacianKernel,
    EpanechnikovKernel,
    TriangularKernel,
    SphericalKernel,
)
from .dot_product import (
    LinearKernel,
    PolynomialKernel,
    HyperbolicTangentKernel,
    CosineDistance,
)
from .pspectrum import PSpectrumStringKernel

__all__ = [
    "Kernel",
    "kernel_diagonal",
    "KernelTraits",
    "DEFAULT_TRAITS",
    "register_traits",
    "kernel_traits",
    "is_normalized",
    "registered_kernels",
    "LMetric",
    "LMetricConfig",
    "lmetric_distance",
    "ManhattanDistance",
    "SquaredEuclideanDistance",
    "EuclideanDistance",
    "GaussianKernel",
    "LaplacianKernel",
    "EpanechnikovKernel",
    "TriangularKernel",
    "SphericalKernel",
    "LinearKernel",
    "PolynomialKernel",
    "HyperbolicTangentKernel",
    "CosineDistance",
    "PSpectrumStringKernel",
]
