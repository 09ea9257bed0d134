"""Kernels on strings."""

from collections import Counter

from .traits import register_traits


@register_traits(is_normalized=False)
class PSpectrumStringKernel:
    """
    p-spectrum string kernel.

    Counts the substrings of length p that two strings share:

        k(s, t) = Σ_u count_s(u) * count_t(u)

    where u ranges over all strings of length p.

    Parameters:
        p: Length of the compared substrings
    """

    def __init__(self, p: int = 2):
        if isinstance(p, bool) or not isinstance(p, int):
            raise TypeError(f"p must be an integer, got {p!r}")
        if p < 1:
            raise ValueError("p must be positive")
        self.p = p

    def spectrum(self, s: str) -> Counter:
        """Occurrence counts of every length-p substring of ``s``."""
        return Counter(s[i:i + self.p] for i in range(len(s) - self.p + 1))

    def evaluate(self, a: str, b: str) -> float:
        spectrum_a = self.spectrum(a)
        spectrum_b = self.spectrum(b)
        if len(spectrum_b) < len(spectrum_a):
            spectrum_a, spectrum_b = spectrum_b, spectrum_a
        return float(sum(n * spectrum_b[u] for u, n in spectrum_a.items()))

    def __repr__(self):
        return f"PSpectrumStringKernel(p={self.p})"
