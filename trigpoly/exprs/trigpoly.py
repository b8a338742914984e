r"""@package trigpoly.exprs.trigpoly

Trigonometric polynomials, i.e. truncated complex Fourier series.

A TrigPoly with coefficients \f$c_0, c_1, \ldots, c_{n-1}\f$ represents
the \f$2\pi\f$-periodic function

\f[
    f(\theta) = c_0 + c_1 e^{-i\theta} + c_2 e^{i\theta}
                + c_3 e^{-2i\theta} + c_4 e^{2i\theta} + \ldots,
\f]

i.e. the coefficients are stored in the canonical order described in
trigpoly.exprs.ordering.


@b Examples

```
    # f(x) = sin(2x)
    f = TrigPoly([0, 0, 0, 0.5j, -0.5j])
    f(np.pi/8)          # approx. 0.7071

    # Interpolate a function on 16 Fourier nodes
    g = TrigPoly.from_function(lambda x: np.exp(np.sin(x)), 16)

    # Arithmetic creates new polynomials
    h = 2*f*g - g.diff() + 1
    norm(h), inner_product(f, g)
```

All operations leave their operands unchanged. The coefficient array of a
TrigPoly is read-only.
"""

import logging
import numbers

import numpy as np
from mpmath import mp

from .evaluators import EvaluatorBase
from .numexpr import NumericExpression
from .ordering import frequencies
from .transforms import nodes, interpolate, sample


__all__ = [
    "TrigPoly",
    "inner_product",
    "norm",
    "diff",
    "evaluate_trig_poly",
]


logger = logging.getLogger(__name__)


class TrigPoly(NumericExpression):
    r"""Trigonometric polynomial with canonically ordered coefficients.

    Objects of this class are immutable. Arithmetic operators (``+``, ``-``,
    ``*`` with other polynomials or scalars and ``/`` by scalars) create new
    polynomials. Calling a polynomial evaluates it, i.e. ``f(x)`` is the same
    as ``f.evaluate(x)``.
    """

    # Let numpy scalars defer to our reflected operators.
    __array_ufunc__ = None

    def __init__(self, coefficients=(), name=None):
        r"""Create a polynomial from coefficients in canonical order.

        @param coefficients
            Sequence of (complex) coefficients for the frequencies
            ``0, -1, 1, -2, 2, ...``. The values are copied.
        @param name
            Optional name of the polynomial, e.g. for labels in plots.
        """
        super(TrigPoly, self).__init__(domain=(0, 2*np.pi), name=name)
        self._coeffs = self._freeze(coefficients)

    @staticmethod
    def _freeze(coefficients):
        a = np.array(coefficients, dtype=complex)
        if a.ndim != 1:
            raise ValueError("Coefficients must be a one-dimensional sequence.")
        a.flags.writeable = False
        return a

    def __setstate__(self, state):
        self.__dict__.update(state)
        self._coeffs = self._freeze(self._coeffs)

    @classmethod
    def from_function(cls, f, num, name=None):
        r"""Interpolate a function on `num` Fourier nodes.

        The callable `f` is evaluated once at each of the points
        ``nodes(num)`` and the unique trigonometric polynomial with `num`
        coefficients taking these values is returned.

        @param f
            Callable taking a real scalar and returning a (complex) scalar.
        @param num
            Number of nodes and hence of coefficients. Must be non-negative.
        """
        if num < 0:
            raise ValueError("Number of samples must be non-negative.")
        return cls.from_values([f(x) for x in nodes(num)], name=name)

    @classmethod
    def from_values(cls, values, name=None):
        r"""Interpolate values taken at the Fourier nodes ``nodes(len(values))``."""
        return cls(interpolate(values), name=name)

    @property
    def coefficients(self):
        r"""Read-only array of the coefficients in canonical order."""
        return self._coeffs

    def get_dof(self):
        r"""Return the degrees of freedom, \ie the number of coefficients."""
        return len(self._coeffs)

    @property
    def N(self):
        r"""Degrees of freedom, \ie number of coefficients."""
        return self.get_dof()

    def frequencies(self):
        r"""Frequency of each stored coefficient."""
        return frequencies(self.N)

    def coefficient(self, k):
        r"""Coefficient of the frequency `k` term \f$e^{ik\theta}\f$.

        Frequencies not stored in this polynomial have a zero coefficient. A
        non-integer `k` raises a `ValueError`.
        """
        if int(k) != k:
            raise ValueError("Frequency must be an integer.")
        k = int(k)
        idx = 2*k if k >= 0 else -2*k-1
        if idx >= self.N:
            return 0j
        return self._coeffs[idx]

    def copy(self):
        r"""Create a copy of this polynomial (including its name)."""
        return type(self)(self._coeffs, name=self.name)

    def resample(self, num):
        r"""Return a polynomial with `num` coefficients.

        Increasing the number of coefficients pads with zeros and does not
        change the represented function. Reducing it drops the highest
        frequencies.
        """
        if num < 0:
            raise ValueError("Number of coefficients must be non-negative.")
        coeffs = np.zeros(num, dtype=complex)
        m = min(num, self.N)
        coeffs[:m] = self._coeffs[:m]
        return type(self)(coeffs, name=self.name)

    def evaluate(self, x=None):
        r"""Evaluate the polynomial.

        @param x
            Scalar or array of angles at which to evaluate. If not given,
            evaluate at the `N` Fourier nodes ``nodes(N)`` using the FFT.
        """
        if x is None:
            return sample(self._coeffs)
        return evaluate_trig_poly(self._coeffs, x)

    def __call__(self, x):
        r"""Evaluate the polynomial at the scalar or array `x`."""
        return self.evaluate(x)

    def diff(self, n=1):
        r"""Return the `n`'th derivative as a new polynomial.

        Each coefficient of the frequency `m` is multiplied by ``(i m)**n``.
        For ``n == 0``, the polynomial itself is returned.
        """
        if n < 0 or int(n) != n:
            raise ValueError("Derivative order must be a non-negative integer.")
        if n == 0:
            return self
        factor = 1j * self.frequencies()
        coeffs = self._coeffs
        for _ in range(int(n)):
            coeffs = factor * coeffs
        return type(self)(coeffs)

    def _expr_str(self):
        where = ", where c_k=%r" % (self._coeffs,)
        return "sum c_k exp(i m_k x)" + where

    def _evaluator(self, use_mp):
        return _TrigPolyEval(self, use_mp)

    def __add__(self, other):
        if isinstance(other, TrigPoly):
            coeffs = np.zeros(max(self.N, other.N), dtype=complex)
            coeffs[:self.N] += self._coeffs
            coeffs[:other.N] += other._coeffs
            return TrigPoly(coeffs)
        if isinstance(other, numbers.Number):
            coeffs = np.zeros(max(1, self.N), dtype=complex)
            coeffs[:self.N] = self._coeffs
            coeffs[0] += other
            return TrigPoly(coeffs)
        return NotImplemented

    __radd__ = __add__

    def __neg__(self):
        return TrigPoly(-self._coeffs)

    def __pos__(self):
        return self

    def __sub__(self, other):
        if isinstance(other, (TrigPoly, numbers.Number)):
            return self + (-other)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, numbers.Number):
            return (-self) + other
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, TrigPoly):
            return self._multiply(other)
        if isinstance(other, numbers.Number):
            return TrigPoly(self._coeffs * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, numbers.Number):
            return TrigPoly(self._coeffs / other)
        return NotImplemented

    def _multiply(self, other):
        r"""Product of two polynomials via their values on a common grid.

        Both factors are padded to the combined number of coefficients, which
        is enough to represent all frequencies of the product without
        aliasing.
        """
        num = self.N + other.N
        logger.debug("Multiplying polynomials of %d and %d coefficients "
                     "on %d nodes.", self.N, other.N, num)
        values = self.resample(num).evaluate() * other.resample(num).evaluate()
        return TrigPoly.from_values(values)


class _TrigPolyEval(EvaluatorBase):
    r"""Evaluator class for TrigPoly.

    This evaluator can evaluate the polynomial and its derivatives up to
    arbitrary order. Coefficients of derivatives are computed on demand and
    cached, as are the exponentials at the most recent point.

    In `mpmath` mode (``use_mp=True``), only scalar points are supported.
    """
    def __init__(self, expr, use_mp):
        super(_TrigPolyEval, self).__init__(expr, use_mp)
        ## Frequencies of the coefficients.
        self._jn = expr.frequencies()
        ## Coefficients of the function and any computed derivatives.
        self._deriv_coeffs = [self._vector(expr.coefficients)]
        ## exp(ix) and exp(-ix) at the current point.
        self._z = self._zc = None

    def _vector(self, elements):
        if self.use_mp:
            return [mp.mpc(c) for c in elements]
        return np.asarray(elements, dtype=complex)

    def _x_changed(self, x):
        if self.use_mp:
            self._z = mp.expj(self.converter(x))
            self._zc = mp.conj(self._z)
        else:
            self._z = np.exp(1j*np.asarray(x, dtype=float))
            self._zc = np.conj(self._z)

    def _get_deriv_coeffs(self, n=0):
        r"""Return the coefficients of the function or its derivatives."""
        while len(self._deriv_coeffs) <= n:
            prev = self._deriv_coeffs[-1]
            if self.use_mp:
                coeffs = [mp.mpc(0, int(j)) * c for j, c in zip(self._jn, prev)]
            else:
                coeffs = 1j * self._jn * prev
            self._deriv_coeffs.append(coeffs)
        return self._deriv_coeffs[n]

    def _eval(self, n=0):
        return _horner(self._get_deriv_coeffs(n), self._z, self._zc)


def _horner(coeffs, z, zc):
    r"""Sum the canonically ordered series given `exp(ix)` and `exp(-ix)`.

    The positive and negative frequency parts are each evaluated as a
    polynomial in `z` and `zc`, respectively, using Horner's scheme starting
    with the highest frequency.
    """
    out_plus = 0 * z
    out_minus = 0 * zc
    for c in reversed(coeffs[2::2]):
        out_plus = z * (out_plus + c)
    for c in reversed(coeffs[1::2]):
        out_minus = zc * (out_minus + c)
    const = coeffs[0] if len(coeffs) else 0
    return out_plus + out_minus + const


def evaluate_trig_poly(coefficients, x, use_mp=False):
    r"""Evaluate a canonically ordered trigonometric series at arbitrary points.

    The cost is `O(n)` per point for `n` coefficients and no table of all
    exponentials is created.

    @param coefficients
        Coefficients in canonical order. An empty sequence represents the
        zero function.
    @param x
        Scalar or array of angles. In case ``use_mp==True``, only scalars
        are allowed.
    @param use_mp
        Whether to evaluate using `mpmath` at the current `mp.dps`.
    """
    if use_mp:
        z = mp.expj(mp.mpf(x))
        return _horner([mp.mpc(c) for c in coefficients], z, mp.conj(z))
    z = np.exp(1j*np.asarray(x, dtype=float))
    return _horner(np.asarray(coefficients, dtype=complex), z, np.conj(z))


def inner_product(f, g):
    r"""L^2 inner product of two polynomials over one period.

    By orthogonality of the exponentials, this is \f$2\pi\sum_k f_k
    \overline{g_k}\f$, where only coefficients stored in both polynomials
    contribute.
    """
    m = min(f.N, g.N)
    return 2*np.pi * np.sum(f.coefficients[:m] * np.conj(g.coefficients[:m]))


def norm(f):
    r"""L^2 norm of a polynomial."""
    return np.sqrt(np.real(inner_product(f, f)))


def diff(f, n=1):
    r"""Return the `n`'th derivative of the polynomial `f`.

    See TrigPoly.diff().
    """
    return f.diff(n)
