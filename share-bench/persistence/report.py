"""
Final result record of a speed test run.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Dict, Any


class RunStatus(str, Enum):
    """Aggregated outcome of a run."""

    OK = "OK"
    PARTIAL_FAILURE = "PartialFailure"
    FATAL = "Fatal"


@dataclass(frozen=True)
class SpeedTestReport:
    """Single output value of a run.

    Built once both phases are complete. The per-file duration lists hold
    one entry per inventory file, in copy order.
    """

    timestamp: datetime
    status: RunStatus
    write_time: List[float]
    write_mbps: float
    read_time: List[float]
    read_mbps: float
    file_count: int = 0
    total_bytes: int = 0
    write_bytes: int = 0
    read_bytes: int = 0
    write_failures: int = 0
    read_failures: int = 0
    errors: List[str] = field(default_factory=list)

    @classmethod
    def from_phases(cls, timestamp: datetime, inventory, write_result, read_result) -> "SpeedTestReport":
        """Aggregate an inventory and the two phase results into a report."""
        errors = write_result.errors + read_result.errors
        status = RunStatus.PARTIAL_FAILURE if errors else RunStatus.OK
        return cls(
            timestamp=timestamp,
            status=status,
            write_time=write_result.durations,
            write_mbps=write_result.mbps,
            read_time=read_result.durations,
            read_mbps=read_result.mbps,
            file_count=len(inventory),
            total_bytes=inventory.total_size,
            write_bytes=write_result.transferred_bytes,
            read_bytes=read_result.transferred_bytes,
            write_failures=write_result.failed_count,
            read_failures=read_result.failed_count,
            errors=errors,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Report fields under their published names."""
        return {
            'TimeStamp': self.timestamp.isoformat(timespec='seconds'),
            'Status': self.status.value,
            'WriteTime': list(self.write_time),
            'WriteMbps': self.write_mbps,
            'ReadTime': list(self.read_time),
            'ReadMbps': self.read_mbps,
            'FileCount': self.file_count,
            'TotalBytes': self.total_bytes,
            'WriteBytes': self.write_bytes,
            'ReadBytes': self.read_bytes,
            'WriteFailures': self.write_failures,
            'ReadFailures': self.read_failures,
            'Errors': list(self.errors),
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def to_table(self) -> str:
        """Human-readable summary."""
        lines = [
            f"TimeStamp : {self.timestamp.isoformat(timespec='seconds')}",
            f"Status    : {self.status.value}",
            f"Files     : {self.file_count} ({self.total_bytes} bytes)",
            f"WriteTime : {', '.join(f'{t:.3f}s' for t in self.write_time)}",
            f"WriteMbps : {self.write_mbps:.2f}",
            f"ReadTime  : {', '.join(f'{t:.3f}s' for t in self.read_time)}",
            f"ReadMbps  : {self.read_mbps:.2f}",
        ]
        for error in self.errors:
            lines.append(f"Error     : {error}")
        return "\n".join(lines)
