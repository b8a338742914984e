r"""@package testutils

Utilities to add more features to `unittest` classes.

This module provides a custom subclass of `unittest.TestCase`, namely
NumTestCase, which obeys the global configuration settings in TestSettings.
The latter can be configured by the script invoking the test run.

This module also introduces a new decorator slowtest, which, when applied,
leads to the test being skipped on normal runs. The script starting the test
must set `TestSettings.skipslow` to `False` for the slow tests to be run.
"""

import sys
import functools
import unittest
import time


__all__ = [
    "NumTestCase",
    "TestSettings",
    "slowtest",
]


def slowtest(func):
    """Decorator for skipping a test if TestSettings.skipslow is true."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if TestSettings.skipslow:
            raise unittest.SkipTest("skipping slow tests")
        return func(*args, **kwargs)
    return wrapper


class NumTestCase(unittest.TestCase):
    """Tweaked baseclass for unit tests of numerical code.

    Individual tests are timed (printed with `verbosity=2`) if
    TestSettings.timing is true, and sequences of real or complex numbers can
    be compared using assertListAlmostEqual().
    """
    def setUp(self):
        self.startTime = time.time()

    def tearDown(self):
        if TestSettings.timing and hasattr(self, "startTime"):
            duration = time.time() - self.startTime
            print("(%.4f seconds) ... " % (duration), file=sys.stderr, end='')

    def assertListAlmostEqual(self, a, b, places=None, delta=None):
        r"""Assert that two iterables contain (almost) the same values.

        Values may be real or complex. For complex values, the modulus of the
        difference is compared.
        """
        if places is not None and delta is not None:
            raise TypeError("Cannot use delta and places at the same time")
        if places is None and delta is None:
            places = 7
        if len(a) != len(b):
            raise self.failureException("Lists have different lengths (%d != %d)" % (len(a), len(b)))
        fails = []
        for i in range(len(a)):
            if a[i] == b[i]:
                continue
            if delta is not None:
                if abs(a[i]-b[i]) > delta:
                    fails.append(i)
            else:
                if round(abs(a[i]-b[i]), places) != 0:
                    fails.append(i)
        if fails:
            msg = "%d elements differ.\n" % len(fails)
            maxN = 9
            if len(fails) <= maxN:
                msg += "Differing elements:\n"
            else:
                msg += "First few differing elements:\n"
            msg += "\n".join(["  [{i}] {a} != {b}    (difference: {d})".format(i=i, a=a[i], b=b[i], d=(b[i]-a[i]))
                              for i in fails[:maxN]])
            raise self.failureException(msg)


class TestSettings():
    """Global settings for tests."""
    ## Stop test run on first fail/error.
    failfast = False
    ## Whether output is buffered.\ Just information, cannot be used to toggle output buffering.
    buffering = False
    ## Whether the timing for each test case should be printed.
    timing = False
    ## Control whether tests marked as slowtest should be skipped.
    skipslow = True
