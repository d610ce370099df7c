"""
Persistence for speed test records and reports.
"""

from .record import CopyRecord
from .report import RunStatus, SpeedTestReport

__all__ = ['CopyRecord', 'RunStatus', 'SpeedTestReport']
