"""
Host copy primitive used by both phases.
"""

import os
import shutil
import logging

from .errors import CopyError

logger = logging.getLogger(__name__)


class FileCopier:
    """Whole-file copy into a destination directory."""

    def copy(self, source: str, destination_dir: str) -> str:
        """Copy source into destination_dir, keeping the file name.

        Returns:
            Path of the written file

        Raises:
            CopyError: If the copy fails for any OS-level reason
        """
        destination = os.path.join(destination_dir, os.path.basename(source))
        try:
            shutil.copyfile(source, destination)
        except OSError as e:
            raise CopyError(source, destination, e) from e
        logger.debug(f"Copied {source} -> {destination}")
        return destination

    def remove(self, path: str) -> bool:
        """Remove a copied file. Returns False if it could not be removed."""
        try:
            os.remove(path)
            return True
        except OSError as e:
            logger.warning(f"Failed to remove {path}: {e}")
            return False
