#!/usr/bin/env python3
r"""@package trigpoly.exprs.test_transforms

Tests for FFT based interpolation and sampling.
"""

import unittest
import math

import numpy as np

from testutils import NumTestCase
from .transforms import nodes, interpolate, sample


class TestNodes(NumTestCase):
    def test_nodes(self):
        pi = math.pi
        self.assertListAlmostEqual(nodes(4), [0, pi/2, pi, 3*pi/2], delta=1e-15)
        self.assertListAlmostEqual(nodes(1), [0])
        self.assertEqual(len(nodes(0)), 0)
        with self.assertRaises(ValueError):
            nodes(-1)


class TestTransforms(NumTestCase):
    def test_known_coefficients(self):
        x = nodes(3)
        self.assertListAlmostEqual(interpolate(np.exp(1j*x)), [0, 0, 1], delta=1e-15)
        x = nodes(5)
        self.assertListAlmostEqual(interpolate(np.cos(2*x)), [0, 0, 0, .5, .5],
                                   delta=1e-15)
        self.assertListAlmostEqual(interpolate(2 + 0*x), [2, 0, 0, 0, 0],
                                   delta=1e-15)

    def test_nyquist_frequency(self):
        # On 4 nodes, exp(2ix) and exp(-2ix) coincide and only the latter is
        # representable.
        x = nodes(4)
        self.assertListAlmostEqual(interpolate(np.cos(2*x)), [0, 0, 0, 1],
                                   delta=1e-15)

    def test_sample(self):
        x = nodes(3)
        self.assertListAlmostEqual(sample([0, 0, 1]), np.exp(1j*x), delta=1e-15)
        x = nodes(5)
        self.assertListAlmostEqual(sample([0, 0, 0, .5j, -.5j]), np.sin(2*x),
                                   delta=1e-15)

    def test_round_trip(self):
        rng = np.random.RandomState(42)
        for n in (1, 2, 3, 8, 13):
            with self.subTest(n=n):
                v = rng.normal(size=n) + 1j*rng.normal(size=n)
                self.assertListAlmostEqual(sample(interpolate(v)), v, delta=1e-13)
                self.assertListAlmostEqual(interpolate(sample(v)), v, delta=1e-13)

    def test_empty(self):
        self.assertEqual(len(interpolate([])), 0)
        self.assertEqual(len(sample([])), 0)


if __name__ == '__main__':
    unittest.main()
