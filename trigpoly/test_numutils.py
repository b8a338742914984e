#!/usr/bin/env python3
r"""@package trigpoly.test_numutils

Tests for the numerical utilities.
"""

import unittest
import math

import numpy as np

from testutils import NumTestCase
from .exprs.trigpoly import TrigPoly
from .numutils import inf_norm1d


class TestInfNorm(NumTestCase):
    def test_max_of_function(self):
        x, delta = inf_norm1d(np.sin, domain=(0, np.pi))
        self.assertAlmostEqual(x, np.pi/2, delta=1e-5)
        self.assertAlmostEqual(delta, 1.0, delta=1e-10)

    def test_without_brute(self):
        x, delta = inf_norm1d(np.sin, domain=(0, np.pi), Ns=0)
        self.assertAlmostEqual(x, np.pi/2, delta=1e-5)

    def test_polynomial(self):
        f = TrigPoly([0, 0, 0, 0.5j, -0.5j])
        x, delta = inf_norm1d(f)
        self.assertAlmostEqual(delta, 1.0, delta=1e-10)
        self.assertTrue(0 <= x <= 2*math.pi)
        x, delta = inf_norm1d(f, lambda x: np.sin(2*x))
        self.assertLess(delta, 1e-12)

    def test_difference(self):
        f = TrigPoly.from_function(np.cos, 5)
        g = TrigPoly.from_function(lambda x: np.cos(x) + 0.25*np.sin(x), 5)
        x, delta = inf_norm1d(f, g)
        self.assertAlmostEqual(delta, 0.25, delta=1e-10)


if __name__ == '__main__':
    unittest.main()
