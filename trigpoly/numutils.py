r"""@package trigpoly.numutils

Miscellaneous numerical utilities and helpers.


@b Examples

```
    >>> f = TrigPoly.from_function(lambda x: exp(sin(x)), 20)
    >>> x, delta = inf_norm1d(f, lambda x: exp(sin(x)))
    >>> delta < 1e-12
    True
```
"""

from scipy import optimize
import numpy as np


__all__ = [
    "inf_norm1d",
]


def inf_norm1d(f1, f2=None, domain=None, Ns=50, xatol=1e-12):
    r"""Compute the L^inf norm of f1-f2.

    The `scipy.optimize.brute` method is used to find a candidate close to the
    global maximum difference. This is then taken as starting point for a
    search for the local maximum difference. Setting the number of samples
    `Ns` high enough should lead to the global maximum difference being found.

    Both functions may return complex values, in which case the modulus of
    the difference is maximized.

    @param f1
        First function. May also be an expression with an `evaluator()`
        method.
    @param f2
        Second function. May also be an expression. If not given, simply
        finds the maximum absolute value of `f1`.
    @param domain
        Domain ``[a, b]`` inside which to search for the maximum difference.
        By default, `f1` is queried for the domain.
    @param Ns
        Number of initial samples for the `scipy.optimize.brute` call. In case
        ``Ns <= 2``, the `brute()` step is skipped an a local extremum is
        found inside the given `domain`. Default is `50`.

    @return A pair ``(x, delta)``, where `x` is the point at which the maximum
        difference was found and `delta` is the difference at that point.
    """
    if domain is None:
        domain = f1.domain
    if not callable(f1):
        f1 = f1.evaluator()
    if f2 is None:
        f2 = lambda x: 0.0
    if not callable(f2):
        f2 = f2.evaluator()
    a, b = map(float, domain)
    def func(x):
        # brute() passes 1-element arrays
        x = float(np.ravel(x)[0])
        if not a <= x <= b:
            return 0.
        return -float(abs(f1(x)-f2(x)))
    if Ns <= 2:
        bounds = [a, b]
    else:
        x0 = float(np.ravel(optimize.brute(func, [(a, b)], Ns=Ns, finish=None))[0])
        step = (b-a)/(Ns-1)
        bounds = [max(a, x0-step), min(b, x0+step)]
    res = optimize.minimize_scalar(
        func, bounds=bounds, method='bounded',
        options=dict(xatol=xatol),
    )
    return res.x, -res.fun
