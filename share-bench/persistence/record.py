"""
Per-file copy record for the share speed test.
"""

import time
from typing import Optional


class CopyRecord:
    """Outcome of copying one file in one phase."""

    def __init__(self, phase_id: str, file_name: str, source: str, destination: str,
                 bytes_copied: int, elapsed_seconds: float, error: Optional[str] = None,
                 start_ts: float = None, end_ts: float = None):
        self.phase_id = phase_id
        self.file_name = file_name
        self.source = source
        self.destination = destination
        self.bytes = bytes_copied
        self.elapsed_seconds = elapsed_seconds
        self.error = error
        self.start_ts = start_ts or time.time()
        self.end_ts = end_ts or time.time()

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, phase_id: str, file_name: str, source: str, destination: str,
               error: str) -> "CopyRecord":
        """Record for a copy that did not complete; it carries no bytes or time."""
        return cls(phase_id, file_name, source, destination,
                   bytes_copied=0, elapsed_seconds=0.0, error=error)

    def __repr__(self) -> str:
        status = "ok" if self.succeeded else f"error={self.error!r}"
        return (f"CopyRecord(phase_id='{self.phase_id}', file='{self.file_name}', "
                f"bytes={self.bytes}, elapsed={self.elapsed_seconds:.6f}, {status})")
