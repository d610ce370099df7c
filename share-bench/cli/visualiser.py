"""
Visualization orchestrator for saved speed test runs.
"""

import os
import logging

from persistence.parquet import load_history
from visualizations.speed_plots import SpeedPlotter

logger = logging.getLogger(__name__)


class SpeedTestVisualizer:
    """Creates plots from every run saved in a results directory."""

    def __init__(self, results_dir: str, output_dir: str = "plots"):
        self.results_dir = results_dir
        self.output_dir = output_dir

        os.makedirs(output_dir, exist_ok=True)

        self.data = self._load_data()
        self.plotter = SpeedPlotter(self.data, self.output_dir) if self.data is not None else None

    def _load_data(self):
        """Load run history from the results directory."""
        try:
            data = load_history(self.results_dir)
            logger.info(f"Loaded {len(data)} records from {self.results_dir}")
            return data
        except Exception as e:
            logger.error(f"Failed to load data: {e}")
            return None

    def create_all_plots(self):
        """Create every available plot and return the paths written."""
        if self.plotter is None:
            logger.warning("Speed plotter not available")
            return []

        plots = [
            self.plotter.create_mbps_history(),
            self.plotter.create_duration_boxplot(),
        ]
        return [p for p in plots if p]
