"""
Static properties of kernel types.

Algorithms consult this table to pick specialised code paths, e.g. a
normalized kernel has K(x, x) = 1 so its diagonal never has to be evaluated.

Traits are attached to a kernel class with the ``register_traits`` decorator
when the class is defined. Lookup is total: any object or type can be
queried, and anything that was never registered resolves to
``DEFAULT_TRAITS``, where every property takes its conservative value.
"""

from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, Tuple, Type, TypeVar
import warnings

T = TypeVar("T", bound=type)


@dataclass(frozen=True)
class KernelTraits:
    """
    Static properties of a kernel type.

    Every field must have a default; that default is what unregistered types
    resolve to, so it has to be the safe answer.

    Attributes:
        is_normalized: True if K(x, x) = 1 for every x
    """
    is_normalized: bool = False


DEFAULT_TRAITS = KernelTraits()

_TRAITS_REGISTRY: Dict[type, KernelTraits] = {}


def register_traits(**properties: Any) -> Callable[[T], T]:
    """
    Class decorator attaching traits to a kernel type.

    Properties that are not given keep their default value.

    Example:

        @register_traits(is_normalized=True)
        class GaussianKernel:
            ...

    Parameters:
        **properties: Field values of ``KernelTraits``

    Returns:
        Decorator that registers the class and returns it unchanged

    Raises:
        TypeError: If a property name is not a ``KernelTraits`` field
    """
    known = {f.name for f in fields(KernelTraits)}
    unknown = sorted(set(properties) - known)
    if unknown:
        raise TypeError(
            f"Unknown kernel traits {unknown}; available: {sorted(known)}"
        )
    traits = KernelTraits(**properties)

    def _register(cls: T) -> T:
        if not isinstance(cls, type):
            raise TypeError("register_traits must decorate a class")
        if cls in _TRAITS_REGISTRY:
            raise ValueError(f"Traits for {cls.__qualname__} are already registered")
        if not callable(getattr(cls, "evaluate", None)):
            warnings.warn(
                f"Registering kernel traits for {cls.__qualname__}, "
                "which has no evaluate() method"
            )
        _TRAITS_REGISTRY[cls] = traits
        return cls

    return _register


def kernel_traits(kernel: Any) -> KernelTraits:
    """
    Look up the traits of a kernel type or instance.

    Resolution is by exact type: a subclass of a registered kernel does not
    inherit its traits.

    Parameters:
        kernel: A type, or an object whose type is looked up

    Returns:
        The registered traits, or ``DEFAULT_TRAITS``
    """
    kernel_type = kernel if isinstance(kernel, type) else type(kernel)
    return _TRAITS_REGISTRY.get(kernel_type, DEFAULT_TRAITS)


def is_normalized(kernel: Any) -> bool:
    """True if ``kernel`` is registered as normalized (K(x, x) = 1)."""
    return kernel_traits(kernel).is_normalized


def registered_kernels() -> Tuple[Type, ...]:
    """Types with explicitly registered traits, in registration order."""
    return tuple(_TRAITS_REGISTRY)
