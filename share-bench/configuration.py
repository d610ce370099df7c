"""
Configuration constants for the network share speed test.

This module contains all configuration parameters including:
- Default source and target paths (overridable through the environment)
- Sample file generation parameters
- File size constants and conversion factors
- Output and persistence defaults
"""

import os

# =============================================================================
# SHARE CONFIGURATION
# =============================================================================

# Target directory on the network share (e.g. a mounted SMB/NFS path)
REMOTE_PATH: str = os.getenv("SPEEDTEST_REMOTE_PATH", "")

# Local directory holding the sample files
LOCAL_PATH: str = os.getenv("SPEEDTEST_LOCAL_PATH", "")

# =============================================================================
# SAMPLE FILE GENERATION
# =============================================================================

SAMPLE_FILE_COUNT: int = 3
SAMPLE_FILE_SIZE_MB: int = 1
SAMPLE_FILE_PREFIX: str = "sample"
SAMPLE_CHUNK_SIZE_MB: int = 1  # Write chunk used while generating sample files

# =============================================================================
# FILE SIZE CONSTANTS
# =============================================================================

BYTES_PER_MB: int = 1024 * 1024
BITS_PER_BYTE: int = 8
MBPS_DECIMALS: int = 2  # Mbps values are reported with this precision
DURATION_DECIMALS: int = 6  # Per-file seconds precision in the report

# =============================================================================
# PHASE IDENTIFIERS
# =============================================================================

WRITE_PHASE: str = "write"
READ_PHASE: str = "read"

# =============================================================================
# CLI DEFAULTS
# =============================================================================

DEFAULT_RESULTS_DIR: str = os.getenv("SPEEDTEST_RESULTS_DIR", "results")
DEFAULT_PLOTS_DIR: str = "plots"
DEFAULT_OUTPUT_FORMAT: str = "json"
LOG_FORMAT: str = "%(asctime)s - %(levelname)s - %(message)s"

# Exit codes
EXIT_OK: int = 0
EXIT_FAILURE: int = 1
EXIT_USAGE: int = 2
