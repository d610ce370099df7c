"""
Per-phase accumulator of copy records and timing totals.
"""

import logging
from typing import List, Dict, Any

from configuration import DURATION_DECIMALS
from persistence.record import CopyRecord
from .metrics_utils import calculate_throughput_mbps

logger = logging.getLogger(__name__)


class PhaseResult:
    """Collects the records of one phase (write or read) in copy order.

    Every file contributes exactly one record, so the duration sequence has
    one entry per inventory file. Failed copies contribute 0.0 seconds and
    no bytes to the totals.
    """

    def __init__(self, phase_id: str):
        self.phase_id: str = phase_id
        self.records: List[CopyRecord] = []
        self.total_seconds: float = 0.0
        self.transferred_bytes: int = 0

    def add_record(self, record: CopyRecord) -> None:
        """Append a record and update the running totals."""
        self.records.append(record)
        if record.succeeded:
            self.total_seconds += record.elapsed_seconds
            self.transferred_bytes += record.bytes

    @property
    def durations(self) -> List[float]:
        """Per-file elapsed seconds in copy order (0.0 for failures)."""
        return [round(r.elapsed_seconds, DURATION_DECIMALS) for r in self.records]

    @property
    def errors(self) -> List[str]:
        return [r.error for r in self.records if not r.succeeded]

    @property
    def failed_count(self) -> int:
        return sum(1 for r in self.records if not r.succeeded)

    @property
    def mbps(self) -> float:
        return calculate_throughput_mbps(self.transferred_bytes, self.total_seconds)

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics for the phase."""
        return {
            'phase_id': self.phase_id,
            'files': len(self.records),
            'failed_files': self.failed_count,
            'total_seconds': self.total_seconds,
            'transferred_bytes': self.transferred_bytes,
            'mbps': self.mbps,
        }

    def __repr__(self) -> str:
        return (f"PhaseResult(phase_id='{self.phase_id}', files={len(self.records)}, "
                f"seconds={self.total_seconds:.3f}, bytes={self.transferred_bytes})")
