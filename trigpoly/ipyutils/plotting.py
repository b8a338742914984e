r"""@package trigpoly.ipyutils.plotting

Plotting of trigonometric polynomials and other periodic functions.


@b Examples

```
    f = TrigPoly.from_function(lambda x: np.exp(np.sin(x)), 7)
    fig = plot_trig(f, lambda x: np.exp(np.sin(x)),
                    labels=["interpolant", "exact"], show=False)
    fig.savefig("interpolation.pdf")
```
"""

import numpy as np

from ..exprs.transforms import nodes
from ..exprs.trigpoly import TrigPoly
from ..utils import insert_missing
from .plotctx import plot_ctx


__all__ = [
    "curve_data",
    "plot_trig",
]


## Colors cycled through for successive curves.
_COLORS = "bgrcmyk"


def curve_data(f, points=2000, oversample=6, min_points=150):
    r"""Compute the `x` and `y` arrays for plotting `f` on `[0, 2pi]`.

    A TrigPoly with `N` coefficients is evaluated on
    ``max(min_points, oversample*N)`` Fourier nodes using the FFT (after
    padding its coefficients with zeros) and the closing point `2pi` is
    appended. Any other callable is evaluated at `points` equidistant points.

    @return Two numpy arrays `x` (real) and `y` (complex).
    """
    if isinstance(f, TrigPoly):
        num = max(min_points, oversample * f.N)
        x = np.append(nodes(num), 2*np.pi)
        y = f.resample(num).evaluate()
        return x, np.append(y, y[0])
    x = np.linspace(0, 2*np.pi, points)
    return x, np.array([f(xi) for xi in x], dtype=complex)


def _default_label(f, i):
    r"""Name given to a polynomial on creation, or ``"Curve i+1"``."""
    if isinstance(f, TrigPoly) and f.name != type(f).__name__:
        return f.name
    return "Curve %d" % (i+1)


def plot_trig(*curves, labels=None, points=2000, legendargs=None, **kw):
    r"""Plot real and imaginary parts of periodic functions side by side.

    @param *curves
        Any number of TrigPoly objects or callables. For polynomials, their
        values at their own Fourier nodes are additionally marked with dots.
    @param labels (list of strings, optional)
        Labels for the curves. Curves without label use the name given to
        the polynomial or are called ``"Curve 1"``, ``"Curve 2"``, etc.
    @param points (int, optional)
        Number of points to sample plain callables at. Default is `2000`.
    @param legendargs (dict, optional)
        Arguments for the `ax.legend()` calls.
    @param **kw
        Further arguments are passed to plot_ctx(), e.g. `save`, `show`,
        `close` or `figsize`.

    @return The Matplotlib figure.
    """
    labels = list(labels or [])
    labels += [_default_label(f, i) for i, f in enumerate(curves)][len(labels):]
    kw = insert_missing(kw, pi_xticks=True)
    with plot_ctx(ncols=2, sharey=True, titles=("Real part", "Imaginary part"),
                  **kw) as (fig, (ax_re, ax_im)):
        for i, (f, label) in enumerate(zip(curves, labels)):
            c = _COLORS[i % len(_COLORS)]
            x, y = curve_data(f, points=points)
            ax_re.plot(x, y.real, c + "-", label=label)
            ax_im.plot(x, y.imag, c + "-", label=label)
            if isinstance(f, TrigPoly):
                xn = nodes(f.N)
                yn = f.evaluate()
                ax_re.plot(xn, yn.real, c + ".")
                ax_im.plot(xn, yn.imag, c + ".")
        for ax in (ax_re, ax_im):
            ax.legend(**insert_missing(legendargs or dict(), labelspacing=0))
    return fig
