"""
Inventory scanner for the sample files in the local directory.
"""

import os
import logging
from dataclasses import dataclass
from typing import Iterator, Tuple

from .errors import FatalInventoryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileEntry:
    """A single sample file."""

    name: str
    path: str
    size: int


@dataclass(frozen=True)
class FileInventory:
    """Ordered, immutable set of sample files used for one run."""

    directory: str
    files: Tuple[FileEntry, ...]

    @property
    def total_size(self) -> int:
        return sum(entry.size for entry in self.files)

    def __len__(self) -> int:
        return len(self.files)

    def __iter__(self) -> Iterator[FileEntry]:
        return iter(self.files)


def scan_inventory(local_path: str) -> FileInventory:
    """List the regular files directly inside local_path.

    Subdirectories are ignored. Files are ordered by name so that both
    phases, and repeated runs, walk them in the same order.

    Args:
        local_path: Directory holding the sample files

    Returns:
        FileInventory of the files found

    Raises:
        FatalInventoryError: If the directory is missing, unreadable or empty
    """
    try:
        with os.scandir(local_path) as it:
            entries = [
                FileEntry(name=e.name, path=e.path, size=e.stat().st_size)
                for e in it
                if e.is_file()
            ]
    except OSError as e:
        raise FatalInventoryError(local_path, str(e)) from e

    if not entries:
        raise FatalInventoryError(local_path, "directory contains no files")

    entries.sort(key=lambda entry: entry.name)
    inventory = FileInventory(directory=local_path, files=tuple(entries))

    logger.info(f"Found {len(inventory)} files ({inventory.total_size} bytes) in {local_path}")
    return inventory
