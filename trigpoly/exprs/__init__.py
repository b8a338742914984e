r"""@package trigpoly.exprs

Trigonometric polynomials and the machinery to build and evaluate them.

The central object is trigpoly.TrigPoly, which stores the coefficients of a
truncated complex Fourier series. Its coefficients are ordered canonically
(frequencies `0, -1, 1, -2, 2, ...`, see ordering). Interpolation and
sampling on the uniform grid of Fourier nodes are done via the FFT in
transforms, while evaluation at arbitrary points uses Horner's scheme.

Like any numexpr.NumericExpression, a polynomial can create *evaluators*
(see evaluators), which evaluate the function and its derivatives using
either floating point or `mpmath` arbitrary precision arithmetic.
"""

from .ordering import to_canonical, from_canonical, frequencies
from .transforms import nodes, interpolate, sample
from .trigpoly import TrigPoly, inner_product, norm, diff, evaluate_trig_poly
