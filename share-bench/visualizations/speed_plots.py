"""
Throughput and duration plots across saved runs.
"""

import os
import logging

import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns

from common.metrics_utils import calculate_throughput_mbps
from .base import BasePlotter

logger = logging.getLogger(__name__)


def summarize_runs(data: pd.DataFrame) -> pd.DataFrame:
    """Per-run, per-phase Mbps computed from the successful copies.

    Returns a DataFrame with columns run_id, phase_id, bytes,
    elapsed_seconds, failed_files and mbps, ordered by run.
    """
    if data is None or len(data) == 0:
        return pd.DataFrame(columns=['run_id', 'phase_id', 'bytes', 'elapsed_seconds', 'failed_files', 'mbps'])

    rows = []
    for (run_id, phase_id), group in data.groupby(['run_id', 'phase_id'], sort=True):
        ok = group[group['succeeded']]
        total_bytes = int(ok['bytes'].sum())
        elapsed = float(ok['elapsed_seconds'].sum())
        rows.append({
            'run_id': run_id,
            'phase_id': phase_id,
            'bytes': total_bytes,
            'elapsed_seconds': elapsed,
            'failed_files': int((~group['succeeded']).sum()),
            'mbps': calculate_throughput_mbps(total_bytes, elapsed),
        })
    return pd.DataFrame(rows)


class SpeedPlotter(BasePlotter):
    """Plotter for throughput history and per-file durations."""

    def create_mbps_history(self):
        """Line plot of write and read Mbps for every saved run."""
        if not self.has_data():
            logger.warning("No data available for throughput history plot")
            return None

        try:
            summary = summarize_runs(self.data)
            phase_color_map = self.get_phase_colors()

            plt.figure(figsize=(12, 6))
            for phase, phase_data in summary.groupby('phase_id'):
                plt.plot(phase_data['run_id'], phase_data['mbps'],
                         marker='o', linewidth=2, markersize=4,
                         color=phase_color_map[phase], label=f'Phase: {phase}')

            plt.title('Share Throughput per Run', fontsize=14)
            plt.xlabel('Run', fontsize=12)
            plt.ylabel('Throughput (Mbps)', fontsize=12)
            plt.grid(True, alpha=0.3)
            plt.xticks(rotation=45)
            plt.legend()
            plt.tight_layout()

            output_file = os.path.join(self.output_dir, 'mbps_history.png')
            plt.savefig(output_file, dpi=150, bbox_inches='tight')
            plt.close()

            logger.info(f"Created throughput history plot: {output_file}")
            return output_file

        except Exception as e:
            logger.error(f"Failed to create throughput history plot: {e}")
            return None

    def create_duration_boxplot(self):
        """Box plot of per-file copy durations by phase."""
        successful = self.filter_successful_copies()
        if successful is None or len(successful) == 0:
            logger.warning("No successful copies available for duration plot")
            return None

        try:
            sns.set_theme()
            plt.figure(figsize=(10, 6))
            sns.boxplot(data=successful, x='phase_id', y='elapsed_seconds')

            plt.title('Per-file Copy Duration by Phase', fontsize=14)
            plt.xlabel('Phase', fontsize=12)
            plt.ylabel('Duration (s)', fontsize=12)
            plt.tight_layout()

            output_file = os.path.join(self.output_dir, 'duration_boxplot.png')
            plt.savefig(output_file, dpi=150, bbox_inches='tight')
            plt.close()

            logger.info(f"Created duration box plot: {output_file}")
            return output_file

        except Exception as e:
            logger.error(f"Failed to create duration box plot: {e}")
            return None
