"""
kernelkit - kernel traits and L_p metrics for kernel methods.

A Python/JAX implementation of the static kernel property table used to
select specialised algorithm paths, and of the parametric L_p distance family.
"""

__version__ = "0.1.0"

# Errors
from .exceptions import DimensionMismatchError

# Kernel traits
from .kernels.traits import (
    KernelTraits,
    DEFAULT_TRAITS,
    register_traits,
    kernel_traits,
    is_normalized,
)

# Metrics
from .kernels.lmetric import (
    LMetric,
    LMetricConfig,
    lmetric_distance,
    ManhattanDistance,
    SquaredEuclideanDistance,
    EuclideanDistance,
)

# Kernels
from .kernels.base import Kernel, kernel_diagonal
from .kernels.radial import (
    GaussianKernel,
    LaplacianKernel,
    EpanechnikovKernel,
    TriangularKernel,
    SphericalKernel,
)
from .kernels.dot_product import (
    LinearKernel,
    PolynomialKernel,
    HyperbolicTangentKernel,
    CosineDistance,
)
from .kernels.pspectrum import PSpectrumStringKernel

# Precision
from .utils.precision import enable_double_precision, double_precision_enabled

__all__ = [
    # Version
    "__version__",
    # Errors
    "DimensionMismatchError",
    # Kernel traits
    "KernelTraits",
    "DEFAULT_TRAITS",
    "register_traits",
    "kernel_traits",
    "is_normalized",
    # Metrics
    "LMetric",
    "LMetricConfig",
    "lmetric_distance",
    "ManhattanDistance",
    "SquaredEuclideanDistance",
    "EuclideanDistance",
    # Kernels
    "Kernel",
    "kernel_diagonal",
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
    # Precision
    "enable_double_precision",
    "double_precision_enabled",
]
