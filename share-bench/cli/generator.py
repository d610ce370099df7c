"""
Generates sample files for the speed test in the local directory.
"""

import os
import logging
from typing import List

from configuration import (
    SAMPLE_FILE_COUNT,
    SAMPLE_FILE_SIZE_MB,
    SAMPLE_FILE_PREFIX,
    SAMPLE_CHUNK_SIZE_MB,
    BYTES_PER_MB,
)

logger = logging.getLogger(__name__)


class SampleGenerator:
    """Writes fixed-size sample files to a local directory."""

    def __init__(self, local_path: str, prefix: str = SAMPLE_FILE_PREFIX):
        self.local_path = local_path
        self.prefix = prefix

    def generate_data(self, size_bytes: int):
        """Yield size_bytes of random data in chunks to avoid memory issues.

        Random content keeps compressing or deduplicating share backends
        from inflating the measurement.
        """
        chunk_size = SAMPLE_CHUNK_SIZE_MB * BYTES_PER_MB
        for offset in range(0, size_bytes, chunk_size):
            yield os.urandom(min(chunk_size, size_bytes - offset))

    def generate(self, count: int = SAMPLE_FILE_COUNT, size_mb: int = SAMPLE_FILE_SIZE_MB) -> List[str]:
        """Create count files of size_mb MiB each and return their paths."""
        if count <= 0 or size_mb <= 0:
            raise ValueError("count and size_mb must be positive")

        os.makedirs(self.local_path, exist_ok=True)
        size_bytes = size_mb * BYTES_PER_MB
        paths = []

        for i in range(count):
            path = os.path.join(self.local_path, f"{self.prefix}_{i:03d}.bin")
            with open(path, "wb") as f:
                for chunk in self.generate_data(size_bytes):
                    f.write(chunk)
            paths.append(path)
            logger.debug(f"Generated {path} ({size_mb} MB)")

        logger.info(f"Generated {count} sample files of {size_mb} MB in {self.local_path}")
        return paths
