"""Tests membership function plotting."""
import os
import tempfile
import unittest

import matplotlib
matplotlib.use("Agg")

from fuzzmf.mfs import TriMF
from fuzzmf.visualize import plot_mfs


class TestPlotMFs(unittest.TestCase):
    def _make_mfs(self):
        return [
            TriMF(0.0, 0.0, 0.5, name="low"),
            TriMF(0.0, 0.5, 1.0, name="medium"),
            TriMF(0.5, 1.0, 1.0, name="high"),
        ]

    def test_validation(self):
        with self.assertRaises(ValueError):
            plot_mfs([], xmin=0.0, xmax=1.0, show=False)
        with self.assertRaises(ValueError):
            plot_mfs(self._make_mfs(), xmin=0.0, xmax=1.0, names=["a", "b"], show=False)
        with self.assertRaises(ValueError):
            plot_mfs(self._make_mfs(), xmin=1.0, xmax=1.0, show=False)

    def test_lines_and_labels(self):
        fig = plot_mfs(self._make_mfs(), xmin=-0.5, xmax=1.5, n_points=50, show=False)
        ax = fig.axes[0]

        self.assertEqual([line.get_label() for line in ax.get_lines()], ["low", "medium", "high"])
        self.assertEqual(len(ax.get_lines()[0].get_xdata()), 50)
        self.assertEqual(ax.get_ylim(), (0.0, 1.05))

    def test_custom_names(self):
        fig = plot_mfs(self._make_mfs(), xmin=0.0, xmax=1.0, names=["L", "M", "H"], show=False)
        self.assertEqual([line.get_label() for line in fig.axes[0].get_lines()], ["L", "M", "H"])

    def test_save(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "mfs.png")
            plot_mfs(self._make_mfs(), xmin=0.0, xmax=1.0, path=path, show=False)

            self.assertTrue(os.path.isfile(path))
