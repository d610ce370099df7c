"""
Tests for the run history summary used by the plots.
"""

import os
import sys
import tempfile
import unittest

import pandas as pd

# Add the parent directory to Python path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from configuration import BYTES_PER_MB
from visualizations.speed_plots import SpeedPlotter, summarize_runs


def history_frame():
    return pd.DataFrame({
        'run_id': ['r1', 'r1', 'r1', 'r1', 'r2', 'r2'],
        'phase_id': ['write', 'write', 'read', 'read', 'write', 'read'],
        'bytes': [BYTES_PER_MB, BYTES_PER_MB, BYTES_PER_MB, 0, BYTES_PER_MB, BYTES_PER_MB],
        'elapsed_seconds': [0.5, 0.5, 0.25, 0.0, 1.0, 0.5],
        'succeeded': [True, True, True, False, True, True],
    })


class TestSummarizeRuns(unittest.TestCase):

    def test_mbps_per_run_and_phase(self):
        summary = summarize_runs(history_frame()).set_index(['run_id', 'phase_id'])

        self.assertEqual(summary.loc[('r1', 'write'), 'mbps'], 16.0)
        self.assertEqual(summary.loc[('r1', 'read'), 'mbps'], 32.0)
        self.assertEqual(summary.loc[('r1', 'read'), 'failed_files'], 1)
        self.assertEqual(summary.loc[('r2', 'write'), 'mbps'], 8.0)

    def test_empty_history(self):
        summary = summarize_runs(pd.DataFrame())
        self.assertEqual(len(summary), 0)
        self.assertIn('mbps', summary.columns)


class TestSpeedPlotter(unittest.TestCase):

    def test_creates_plot_files(self):
        with tempfile.TemporaryDirectory() as tmp:
            plotter = SpeedPlotter(history_frame(), tmp)

            history_plot = plotter.create_mbps_history()
            duration_plot = plotter.create_duration_boxplot()

            self.assertTrue(os.path.exists(history_plot))
            self.assertTrue(os.path.exists(duration_plot))

    def test_no_data(self):
        plotter = SpeedPlotter(pd.DataFrame(), "unused")
        self.assertIsNone(plotter.create_mbps_history())
        self.assertIsNone(plotter.create_duration_boxplot())


if __name__ == '__main__':
    unittest.main()
