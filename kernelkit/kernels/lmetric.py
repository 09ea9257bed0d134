"""
Generalized L_p metric, with or without the final root.

    d(x, y) = (Σ_i |x_i - y_i|^p)^(1/p)

Leaving out the root gives Σ_i |x_i - y_i|^p, which is cheaper and orders
points the same way, so it is all that nearest-neighbour style comparisons
need. Both the power and the root flag are part of the metric's type:
``LMetric[2, True]`` is the Euclidean distance class.

Single pairs are evaluated in float64 NumPy whatever the JAX precision
setting. Distance matrices go through a JAX function compiled once per
configuration, with both values static, in JAX's default float dtype.
"""

import operator
import numpy as np
import jax.numpy as jnp
from jax import jit
from dataclasses import dataclass
from functools import lru_cache, partial
from typing import Optional, Type
from jaxtyping import Array, ArrayLike, Float

from ..utils.validation import check_point_sets, check_vector_pair


@dataclass(frozen=True)
class LMetricConfig:
    """
    Configuration of an L_p metric.

    Attributes:
        power: Integer exponent p >= 1; p = 1 is the Manhattan distance
        take_root: If True, the p-th root of the power sum is returned
    """
    power: int
    take_root: bool = False

    def __post_init__(self):
        if isinstance(self.power, bool):
            raise TypeError(f"power must be an integer, got {self.power!r}")
        try:
            power = operator.index(self.power)
        except TypeError:
            raise TypeError(f"power must be an integer, got {self.power!r}") from None
        # Normalise numpy integers so equal configurations hash alike
        object.__setattr__(self, "power", power)
        if self.power < 1:
            raise ValueError(f"power must be >= 1, got {self.power}")
        if not isinstance(self.take_root, bool):
            raise TypeError(f"take_root must be a bool, got {self.take_root!r}")


def _reduce_power_sum(
    abs_diff: Float[Array, "..."],
    power: int,
    take_root: bool,
    xp=jnp
) -> Float[Array, "..."]:
    """
    Sum |diff|^p over the last axis and optionally take the p-th root.

    ``xp`` is the array module, ``numpy`` or ``jax.numpy``.
    """
    total = xp.sum(abs_diff ** power, axis=-1)
    if not take_root or power == 1:
        return total
    if power == 2:
        return xp.sqrt(total)
    return total ** (1.0 / power)


@partial(jit, static_argnames=("power", "take_root"))
def _pairwise_lmetric_jit(
    X: Float[Array, "n d"],
    Y: Float[Array, "m d"],
    power: int,
    take_root: bool
) -> Float[Array, "n m"]:
    """JIT-compiled L_p distances between all rows of X and Y."""
    abs_diff = jnp.abs(X[:, None, :] - Y[None, :, :])  # (n, m, d)
    return _reduce_power_sum(abs_diff, power, take_root)


class LMetric:
    """
    The L_p metric for integer p, with an option to take the root.

    ``LMetric`` itself is a family; subscript it to get a concrete metric:

        LMetric[1]           # Manhattan
        LMetric[2]           # squared Euclidean
        LMetric[2, True]     # Euclidean
        LMetric[3, True]     # L_3 distance

    Subscripting with the same parameters always returns the same class.
    Concrete metrics hold no state, so ``evaluate`` is a classmethod and
    instances exist only to satisfy code that expects a kernel object.
    """

    config: Optional[LMetricConfig] = None
    power: Optional[int] = None
    take_root: Optional[bool] = None

    def __class_getitem__(cls, params) -> Type["LMetric"]:
        if cls is not LMetric:
            raise TypeError(f"{cls.__name__} is already a specialised LMetric")
        if not isinstance(params, tuple):
            params = (params,)
        return _specialise(LMetricConfig(*params))

    def __init__(self):
        if type(self).config is None:
            raise TypeError("LMetric must be specialised before use, e.g. LMetric[2, True]()")

    @classmethod
    def evaluate(cls, a: ArrayLike, b: ArrayLike) -> float:
        """
        Compute the distance between two points.

        Parameters:
            a: First point
            b: Second point, same shape as ``a``

        Returns:
            The power sum, or its p-th root when ``take_root`` is set

        Raises:
            DimensionMismatchError: If ``a`` and ``b`` have different shapes
        """
        config = cls._require_config()
        a, b = check_vector_pair(a, b)
        abs_diff = np.abs(a - b).ravel()
        return float(_reduce_power_sum(abs_diff, config.power, config.take_root, xp=np))

    def __call__(
        self,
        X: Float[Array, "n d"],
        Y: Float[Array, "m d"]
    ) -> Float[Array, "n m"]:
        """
        Compute the distance matrix between two point sets.

        Parameters:
            X: First set of points, shape (n, d)
            Y: Second set of points, shape (m, d)

        Returns:
            Distance matrix of shape (n, m)
        """
        config = self._require_config()
        X, Y = check_point_sets(X, Y)
        return _pairwise_lmetric_jit(X, Y, power=config.power, take_root=config.take_root)

    @classmethod
    def _require_config(cls) -> LMetricConfig:
        if cls.config is None:
            raise TypeError("LMetric must be specialised before use, e.g. LMetric[2, True]")
        return cls.config

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f"{type(self).__name__}()"


@lru_cache(maxsize=None)
def _specialise(config: LMetricConfig) -> Type[LMetric]:
    name = f"LMetric[{config.power}, {config.take_root}]"
    return type(name, (LMetric,), {
        "config": config,
        "power": config.power,
        "take_root": config.take_root,
        "__module__": __name__,
        "__qualname__": name,
    })


def lmetric_distance(
    a: ArrayLike,
    b: ArrayLike,
    power: int,
    take_root: bool = False
) -> float:
    """Functional form of ``LMetric[power, take_root].evaluate(a, b)``."""
    return LMetric[power, take_root].evaluate(a, b)


# Convenience aliases.

# The Manhattan (L1) distance.
ManhattanDistance = LMetric[1, False]

# The squared Euclidean (L2) distance.
SquaredEuclideanDistance = LMetric[2, False]

# The Euclidean (L2) distance.
EuclideanDistance = LMetric[2, True]
