#!/usr/bin/env python3
r"""@package trigpoly.ipyutils.test_plotting

Tests for plotting periodic functions.
"""

import unittest
import tempfile
import os.path as op

import matplotlib
matplotlib.use("agg")
import matplotlib.pyplot as plt
import numpy as np

from testutils import NumTestCase
from ..exprs.trigpoly import TrigPoly
from .plotctx import plot_ctx
from .plotting import curve_data, plot_trig


class TestCurveData(NumTestCase):
    def test_polynomial(self):
        f = TrigPoly.from_function(lambda x: np.exp(1j*x), 3)
        x, y = curve_data(f)
        self.assertEqual(len(x), 151)
        self.assertEqual(len(y), 151)
        self.assertAlmostEqual(x[-1], 2*np.pi)
        self.assertAlmostEqual(y[-1], y[0])
        self.assertListAlmostEqual(y, np.exp(1j*x), delta=1e-13)
        x, y = curve_data(TrigPoly(np.ones(40)))
        self.assertEqual(len(x), 241)

    def test_callable(self):
        x, y = curve_data(np.sin)
        self.assertEqual(len(x), 2000)
        self.assertEqual(y.dtype, complex)
        self.assertListAlmostEqual(y, np.sin(x), delta=1e-15)
        x, y = curve_data(np.cos, points=11)
        self.assertEqual(len(x), 11)


class TestPlotTrig(NumTestCase):
    def tearDown(self):
        plt.close('all')
        super(TestPlotTrig, self).tearDown()

    def test_axes(self):
        f = TrigPoly.from_function(np.sin, 5)
        fig = plot_trig(f, np.sin, labels=["interpolant", "exact"], show=False)
        ax_re, ax_im = fig.axes
        self.assertEqual(ax_re.get_title(), "Real part")
        self.assertEqual(ax_im.get_title(), "Imaginary part")
        self.assertEqual(len(ax_re.get_lines()), 3)
        self.assertEqual(len(ax_im.get_lines()), 3)
        texts = [t.get_text() for t in ax_re.get_legend().get_texts()]
        self.assertListEqual(texts, ["interpolant", "exact"])

    def test_default_labels(self):
        fig = plot_trig(np.sin, np.cos, labels=["a"], show=False)
        texts = [t.get_text() for t in fig.axes[1].get_legend().get_texts()]
        self.assertListEqual(texts, ["a", "Curve 2"])

    def test_labels_from_names(self):
        curves = [TrigPoly([1], name="one"), np.sin, TrigPoly([1])]
        fig = plot_trig(*curves, show=False)
        texts = [t.get_text() for t in fig.axes[0].get_legend().get_texts()]
        self.assertListEqual(texts, ["one", "Curve 2", "Curve 3"])
        fig = plot_trig(*curves, labels=["first"], show=False)
        texts = [t.get_text() for t in fig.axes[0].get_legend().get_texts()]
        self.assertListEqual(texts, ["first", "Curve 2", "Curve 3"])

    def test_save(self):
        f = TrigPoly([1, 0.5j, 0.5j])
        with tempfile.TemporaryDirectory() as tmpdir:
            fname = op.join(tmpdir, "plots", "poly")
            plot_trig(f, save=fname, show=False, close=True)
            self.assertTrue(op.isfile(fname + ".pdf"))
            fname = op.join(tmpdir, "poly.png")
            plot_trig(f, save=fname, show=False, close=True)
            self.assertTrue(op.isfile(fname))

    def test_close_and_show(self):
        with self.assertRaises(ValueError):
            with plot_ctx(show=True, close=True):
                pass


if __name__ == '__main__':
    unittest.main()
