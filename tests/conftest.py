"""Shared fixtures for tests."""

import pytest
import jax.random as random

from kernelkit.utils.precision import enable_double_precision

# Metrics are compared against exact values; run everything in float64.
enable_double_precision()

from kernelkit.kernels.radial import (  # noqa: E402
    GaussianKernel,
    LaplacianKernel,
    EpanechnikovKernel,
    TriangularKernel,
    SphericalKernel,
)
from kernelkit.kernels.dot_product import (  # noqa: E402
    LinearKernel,
    PolynomialKernel,
    HyperbolicTangentKernel,
    CosineDistance,
)


@pytest.fixture
def rng_key():
    """Random number generator key."""
    return random.PRNGKey(42)


@pytest.fixture
def vector_pair(rng_key):
    """Two random vectors of the same length."""
    key1, key2 = random.split(rng_key)
    a = random.normal(key1, (7,))
    b = random.normal(key2, (7,))
    return a, b


@pytest.fixture
def sample_data_2d(rng_key):
    """Sample 2D data for testing."""
    key1, key2 = random.split(rng_key)
    X = random.normal(key1, (10, 5))
    Y = random.normal(key2, (8, 5))
    return X, Y


@pytest.fixture
def normalized_kernels():
    """One instance of every kernel registered as normalized."""
    return [
        CosineDistance(),
        EpanechnikovKernel(bandwidth=2.0),
        GaussianKernel(bandwidth=0.5),
        LaplacianKernel(bandwidth=1.5),
        SphericalKernel(bandwidth=1.0),
        TriangularKernel(bandwidth=3.0),
    ]


@pytest.fixture
def unnormalized_kernels():
    """Vector kernels that are not normalized."""
    return [
        LinearKernel(),
        PolynomialKernel(degree=3, offset=1.0),
        HyperbolicTangentKernel(scale=0.5, offset=0.1),
    ]


@pytest.fixture
def single_precision():
    """Run a test with JAX in its default float32 mode."""
    previous = enable_double_precision(False)
    yield
    enable_double_precision(previous)
