"""
Base classes for plot visualization.
"""

import pandas as pd
import logging

logger = logging.getLogger(__name__)


class BasePlotter:
    """Base class for all plotters with common functionality."""

    def __init__(self, data: pd.DataFrame, output_dir: str):
        self.data = data
        self.output_dir = output_dir

    def has_data(self) -> bool:
        return self.data is not None and len(self.data) > 0

    def filter_successful_copies(self):
        """Filter data to only include successful copies."""
        if not self.has_data():
            return None
        return self.data[self.data['succeeded']]

    def get_phase_colors(self):
        """Color map for the write and read phases."""
        import matplotlib.pyplot as plt
        phases = sorted(self.data['phase_id'].unique())
        phase_colors = plt.cm.Set1(range(len(phases)))
        return dict(zip(phases, phase_colors))
