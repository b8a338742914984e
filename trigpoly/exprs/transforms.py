r"""@package trigpoly.exprs.transforms

Sampling and interpolation on the uniform grid of Fourier nodes.

A trigonometric polynomial with `n` coefficients is uniquely determined by
its values at the `n` Fourier nodes

\f[
    \theta_k = \frac{2\pi k}{n}, \qquad k = 0, \ldots, n-1.
\f]

interpolate() computes the canonically ordered coefficients from such
values and sample() computes the values from the coefficients. Both use
the FFT and cost `O(n log n)`.
"""

import logging

import numpy as np

from .ordering import to_canonical, from_canonical


__all__ = [
    "nodes",
    "interpolate",
    "sample",
]


logger = logging.getLogger(__name__)


def nodes(n):
    r"""Array of the `n` Fourier nodes `2 pi k / n` for `k = 0, ..., n-1`."""
    if n < 0:
        raise ValueError("Number of nodes must be non-negative.")
    return 2*np.pi * np.arange(n) / n if n else np.zeros(0)


def interpolate(values):
    r"""Coefficients of the trigonometric interpolant of sampled values.

    The `n` values are assumed to be taken at the `n` Fourier nodes, i.e. at
    ``nodes(n)``. The returned complex array holds the coefficients in
    canonical order (see trigpoly.exprs.ordering).
    """
    values = np.asarray(values, dtype=complex)
    n = len(values)
    if n == 0:
        return np.zeros(0, dtype=complex)
    logger.debug("Interpolating %d samples.", n)
    return to_canonical(np.fft.fft(values) / n)


def sample(coefficients):
    r"""Values of a trigonometric polynomial at its own Fourier nodes.

    Inverse of interpolate(): for `n` canonically ordered coefficients, the
    values at ``nodes(n)`` are returned.
    """
    coefficients = np.asarray(coefficients, dtype=complex)
    n = len(coefficients)
    if n == 0:
        return np.zeros(0, dtype=complex)
    return np.fft.ifft(from_canonical(n * coefficients))
