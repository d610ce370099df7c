"""
Plots for saved speed test history.
"""

from .speed_plots import SpeedPlotter, summarize_runs

__all__ = ['SpeedPlotter', 'summarize_runs']
