r"""@package trigpoly.exprs.evaluators

Base class for evaluators of numexpr.NumericExpression objects.
"""

from abc import ABCMeta, abstractmethod

import numpy as np
from mpmath import mp


__all__ = [
    "EvaluatorBase",
]


class EvaluatorBase(metaclass=ABCMeta):
    r"""Base class for evaluators caching work done at the last point.

    An evaluator is callable, with ``ev(x)`` returning the function value at
    `x`. The `n`'th derivative is computed by ``ev.diff(x, n)`` and
    ``ev.function(n)`` returns it as a plain callable.

    Subclasses implement _x_changed() and _eval(). Whenever the point `x`
    differs from the previous one, _x_changed() is called to compute the
    quantities shared by the function and all its derivatives at `x`, e.g.
    the exponentials of a trigonometric series. Afterwards, or immediately if
    `x` is unchanged, \ref _eval() "_eval(n)" computes the requested value.
    """
    def __init__(self, expr, use_mp):
        ## Domain of the expression this evaluator was created for.
        self.domain = expr.domain
        ## Whether to compute using `mpmath` instead of floats.
        self.use_mp = use_mp
        ## Either `mpmath.mp` or `mpmath.fp`, depending on `use_mp`.
        self.ctx = expr.mpmath_context(use_mp)
        ## Converts scalars to `float` or `mp.mpf`.
        self.converter = mp.mpf if use_mp else float
        ## Point of the most recent evaluation.
        self._x = None

    def __call__(self, x):
        return self.diff(x, 0)

    def diff(self, x, n=1):
        r"""Evaluate the n'th derivative at the point (or array) `x`."""
        self.set_x(x)
        return self._eval(n)

    def set_x(self, x):
        r"""Move to `x` and return whether it differs from the previous point."""
        if isinstance(x, np.ndarray) or isinstance(self._x, np.ndarray):
            if np.array_equal(x, self._x):
                return False
        elif self._x is not None and self._x == x:
            return False
        if isinstance(x, np.ndarray):
            x = x.copy()
        self._x = x
        self._x_changed(x)
        return True

    @abstractmethod
    def _x_changed(self, x):
        pass

    @abstractmethod
    def _eval(self, n=0):
        r"""Compute the n'th derivative at the current point."""
        pass

    def function(self, n=0):
        r"""Return a callable for the n'th derivative.

        The callable carries the `domain` of the expression.
        """
        fn = lambda x: self.diff(x, n)
        fn.domain = self.domain
        return fn
