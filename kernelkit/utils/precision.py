"""Numeric precision configuration for JAX computations."""

import jax
import jax.numpy as jnp


def double_precision_enabled() -> bool:
    """
    Check if JAX computes in 64-bit floating point.

    Returns:
        True if ``jax_enable_x64`` is set
    """
    return jnp.result_type(float) == jnp.float64


def enable_double_precision(enabled: bool = True) -> bool:
    """
    Switch JAX between float64 and float32 default dtypes.

    This is process-wide. Call it before creating arrays; functions that
    were already compiled keep the precision they were traced with.

    Parameters:
        enabled: True for float64, False for float32

    Returns:
        The previous setting
    """
    previous = double_precision_enabled()
    if previous != enabled:
        jax.config.update("jax_enable_x64", enabled)
    return previous


def get_precision_info() -> dict:
    """
    Get information about the floating point configuration.

    Returns:
        Dictionary with precision information
    """
    dtype = jnp.result_type(float)
    finfo = jnp.finfo(dtype)
    return {
        'double_precision': double_precision_enabled(),
        'default_float_dtype': str(dtype),
        'eps': float(finfo.eps),
        'default_device': str(jax.devices()[0]),
    }
