"""
Common utilities for the share speed test.
"""

from .errors import (
    SpeedTestError,
    FatalInputError,
    FatalInventoryError,
    TargetCreationError,
    CopyError,
)
from .file_copier import FileCopier
from .inventory import FileEntry, FileInventory, scan_inventory
from .phase_result import PhaseResult

__all__ = [
    'SpeedTestError', 'FatalInputError', 'FatalInventoryError',
    'TargetCreationError', 'CopyError', 'FileCopier', 'FileEntry',
    'FileInventory', 'scan_inventory', 'PhaseResult',
]
