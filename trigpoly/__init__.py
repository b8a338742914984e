r"""@package trigpoly

Trigonometric polynomials (truncated complex Fourier series) in Python.

A polynomial is created either from its coefficients or by interpolating a
function on uniformly spaced Fourier nodes:

~~~.py
from trigpoly import TrigPoly, inner_product, norm

f = TrigPoly.from_function(lambda x: np.exp(1j*x), 3)
g = TrigPoly([1, 0.5, 0.5])   # 1 + cos(x)
h = f * g.diff() + 2
print(h(np.pi/3), norm(h))
~~~

The numerical core lives in the trigpoly.exprs package. Plotting helpers for
interactive sessions can be found in trigpoly.ipyutils.
"""

from .exprs import TrigPoly, inner_product, norm, diff, evaluate_trig_poly
from .exprs import nodes, interpolate, sample
from .exprs import to_canonical, from_canonical, frequencies
