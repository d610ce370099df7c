"""
Test doubles for the copy primitive and clock.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from common.errors import CopyError
from common.file_copier import FileCopier


class SteppingCopier(FileCopier):
    """Real file copier on a fake clock.

    Each successful copy advances the clock by the next value in durations,
    so phase timings are exact. Sources listed in fail_sources raise
    CopyError without touching the file system.
    """

    def __init__(self, durations, fail_sources=()):
        self.now = 0.0
        self.durations = list(durations)
        self.fail_sources = set(fail_sources)
        self.calls = []

    def clock(self) -> float:
        return self.now

    def copy(self, source: str, destination_dir: str) -> str:
        self.calls.append((source, destination_dir))
        if source in self.fail_sources:
            raise CopyError(source, destination_dir, PermissionError("Permission denied"))
        destination = super().copy(source, destination_dir)
        self.now += self.durations.pop(0)
        return destination


def make_files(directory: str, sizes) -> list:
    """Create files named file_0.bin, file_1.bin, ... with the given sizes."""
    paths = []
    for i, size in enumerate(sizes):
        path = os.path.join(directory, f"file_{i}.bin")
        with open(path, "wb") as f:
            f.write(b"x" * size)
        paths.append(path)
    return paths
