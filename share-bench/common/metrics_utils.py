"""
Shared utilities for speed test calculations.
"""

import logging
from configuration import (
    BITS_PER_BYTE,
    BYTES_PER_MB,
    MBPS_DECIMALS,
)

logger = logging.getLogger(__name__)


def calculate_throughput_mbps(total_bytes: float, duration_seconds: float) -> float:
    """
    Calculate throughput in megabits per second (Mbps) from bytes and duration.

    Megabits here are binary (1,048,576 bits), so 1 MiB moved in one second
    is 8 Mbps. A phase whose copies all failed has no elapsed time; that
    case reports 0.0 instead of dividing by zero.

    Args:
        total_bytes: Total bytes transferred
        duration_seconds: Duration in seconds

    Returns:
        Throughput in Mbps rounded to MBPS_DECIMALS places
    """
    if duration_seconds <= 0:
        return 0.0
    return round((total_bytes * BITS_PER_BYTE) / duration_seconds / BYTES_PER_MB, MBPS_DECIMALS)

