r"""@package trigpoly.exprs.numexpr

Base class of the periodic function objects.

An expression stores the *definition* of a function, e.g. the coefficients
of a trigonometric polynomial. Pointwise evaluation of the function and its
derivatives is done by *evaluator* objects (see trigpoly.exprs.evaluators),
created either for floating point or for `mpmath` arithmetic:

~~~.py
f = TrigPoly([0, 0, 1])
with TrigPoly.context(use_mp=True, dps=30):
    print("f'(1) =", f.evaluator(use_mp=True).diff(1))
~~~

Expressions are persisted with NumericExpression.save() and restored with
NumericExpression.load().
"""

from contextlib import contextmanager
from abc import ABCMeta, abstractmethod

from mpmath import mp, fp

from ..utils import save_to_file, load_from_file


__all__ = [
    "NumericExpression",
]


@contextmanager
def _noop_context(*_args, **_kwargs):
    r"""Empty context manager used as placeholder."""
    yield


class NumericExpression(metaclass=ABCMeta):
    """Parent class for periodic function objects.

    Subclasses implement _expr_str() and _evaluator().
    """

    def __init__(self, domain=None, name=None):
        r"""Store the domain and an optional name (default: class name)."""
        self._domain = domain
        self.__name = name if name else self.__class__.__name__

    @property
    def domain(self):
        r"""Interval `(a, b)` of one period of the function."""
        return self._domain

    @property
    def name(self):
        r"""Label of this function, e.g. for plot legends."""
        return self.__name
    @name.setter
    def name(self, name):
        self.__name = name

    def save(self, filename, overwrite=False, verbose=True):
        r"""Store this object in a ``.npy`` file.

        See trigpoly.utils.save_to_file() for the meaning of the arguments.
        A `RuntimeError` is raised if the file exists and `overwrite` is
        `False`.
        """
        save_to_file(
            filename, self, overwrite=overwrite, verbose=verbose,
            showname="%s [%s]" % (self.name, type(self).__name__)
        )

    @classmethod
    def load(cls, filename):
        r"""Restore an object stored using save().

        A `TypeError` is raised if the file contains something other than an
        instance of this class.
        """
        obj = load_from_file(filename)
        if not isinstance(obj, cls):
            raise TypeError("File does not contain a %s object." % cls.__name__)
        return obj

    def __repr__(self):
        return "<%s%s>" % (self.__class__.__name__, self.str())

    def evaluator(self, use_mp=False):
        r"""Create an evaluator for the current state of this function.

        @param use_mp
            Whether the evaluator should compute using `mpmath` at the current
            `mp.dps` instead of floating point arithmetic.
        """
        return self._evaluator(use_mp=use_mp)

    def str(self):
        return "(%s)" % self._expr_str()

    @abstractmethod
    def _expr_str(self):
        """Formula of the function with its data, e.g. ``"a + b x, where a=1, b=2"``."""
        pass

    @abstractmethod
    def _evaluator(self, use_mp):
        pass

    @classmethod
    def mpmath_context(cls, use_mp):
        r"""Return `mpmath.mp` or `mpmath.fp`.

        The `fp` context is given no-op versions of `workdps()` and
        `extradps()` so both can be used interchangeably.
        """
        return mp if use_mp else cls.__ensure_mp_contexts(fp)

    @classmethod
    def __ensure_mp_contexts(cls, ctx):
        if not hasattr(ctx, 'extradps'):
            setattr(ctx, 'extradps', _noop_context)
        if not hasattr(ctx, 'workdps'):
            setattr(ctx, 'workdps', _noop_context)
        return ctx

    @classmethod
    @contextmanager
    def context(cls, use_mp, dps):
        r"""Context manager yielding `mp` (at `dps` decimal places) or `fp`.

        With ``use_mp=False`` or ``dps=None``, the global precision is left
        unchanged.
        """
        ctx = cls.mpmath_context(use_mp)
        if not use_mp or dps is None:
            dps = mp.dps
        with ctx.workdps(dps):
            yield ctx
