"""
Exception hierarchy for the share speed test.

Only FatalInputError and FatalInventoryError abort a run. TargetCreationError
and CopyError are scoped to a single file and end up recorded in the report.
"""


class SpeedTestError(Exception):
    """Base class for all speed test errors."""


class FatalInputError(SpeedTestError):
    """A required parameter (remote or local path) was not supplied."""


class FatalInventoryError(SpeedTestError):
    """The local directory is missing, unreadable or holds no files."""

    def __init__(self, path: str, cause: str):
        self.path = path
        self.cause = cause
        super().__init__(f"No files found in {path}: {cause}")


class TargetCreationError(SpeedTestError):
    """The remote target directory could not be created."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to create target directory {path}: {cause}")


class CopyError(SpeedTestError):
    """A single file copy failed in either direction."""

    def __init__(self, source: str, destination: str, cause: Exception):
        self.source = source
        self.destination = destination
        self.cause = cause
        super().__init__(f"Failed to copy {source} to {destination}: {cause}")
