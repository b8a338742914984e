r"""@package trigpoly.exprs.ordering

Conversion between the FFT's natural frequency order and canonical order.

Coefficients of a trigpoly.exprs.trigpoly.TrigPoly are stored in
*canonical* order, i.e. for the frequencies

    0, -1, 1, -2, 2, -3, 3, ...

which makes adding two polynomials of different lengths a positional sum
and turns the lookup of the coefficient of a given frequency into a direct
index computation. The discrete Fourier transform instead produces
coefficients in *natural* order

    0, 1, 2, ..., -2, -1

with the negative frequencies wrapped around to the end. For `n` entries,
the natural order holds the non-negative frequencies `0, ..., n-1-n//2` at
the front and the negative ones `-n//2, ..., -1` at the back.

The functions here are pure permutations, i.e. they never change the
values, and to_canonical() and from_canonical() are inverse to each other
for any length (including zero).
"""

import numpy as np


__all__ = [
    "to_canonical",
    "from_canonical",
    "frequencies",
]


def to_canonical(v):
    r"""Reorder a sequence from natural FFT order to canonical order.

    @param v
        Sequence (list or array) of length `n` in natural FFT order.

    @return A new numpy array of the same length and dtype in canonical
        order.
    """
    v = np.asarray(v)
    n = len(v)
    h = n // 2
    out = np.empty_like(v)
    out[0::2] = v[:n-h]
    out[1::2] = v[::-1][:h]
    return out


def from_canonical(v):
    r"""Reorder a sequence from canonical order to natural FFT order.

    This is the inverse of to_canonical().
    """
    v = np.asarray(v)
    n = len(v)
    h = n // 2
    out = np.empty_like(v)
    out[:n-h] = v[0::2]
    out[n-h:] = v[1::2][::-1]
    return out


def frequencies(n):
    r"""Frequencies of the `n` canonical positions.

    @b Examples
    ```
        >>> frequencies(6)
        array([ 0, -1,  1, -2,  2, -3])
    ```
    """
    j = np.arange(n)
    return np.where(j % 2, -((j+1)//2), j//2)
