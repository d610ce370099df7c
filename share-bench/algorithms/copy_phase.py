"""
Write and read phases of the share speed test.
"""

import os
import time
import logging
from typing import Callable, Optional

from configuration import WRITE_PHASE, READ_PHASE
from common.errors import CopyError, TargetCreationError
from common.file_copier import FileCopier
from common.inventory import FileEntry, FileInventory
from common.phase_result import PhaseResult
from persistence.record import CopyRecord

logger = logging.getLogger(__name__)


class CopyPhase:
    """Sequential, timed copy of every inventory file in one direction.

    Subclasses decide where each file is copied from and to. A failed copy
    is recorded and the phase moves on to the next file.
    """

    phase_id: str = ""

    def __init__(
        self,
        inventory: FileInventory,
        copier: Optional[FileCopier] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.inventory = inventory
        self.copier = copier or FileCopier()
        self.clock = clock

    def source_for(self, entry: FileEntry) -> str:
        raise NotImplementedError

    def destination_dir(self) -> str:
        raise NotImplementedError

    def prepare(self, entry: FileEntry) -> None:
        """Hook run before each copy; raise to fail this file only."""

    def execute(self) -> PhaseResult:
        """Copy every file in inventory order and return the phase result."""
        result = PhaseResult(self.phase_id)
        total = len(self.inventory)
        logger.info(f"Starting {self.phase_id} phase: {total} files -> {self.destination_dir()}")

        for index, entry in enumerate(self.inventory, start=1):
            record = self._copy_file(entry)
            result.add_record(record)
            if record.succeeded:
                logger.debug(
                    f"[{self.phase_id} {index}/{total}] {entry.name}: "
                    f"{record.bytes} bytes in {record.elapsed_seconds:.3f}s"
                )
            else:
                logger.warning(f"[{self.phase_id} {index}/{total}] {entry.name}: {record.error}")

        logger.info(
            f"{self.phase_id.capitalize()} phase completed: {result.mbps:.2f} Mbps, "
            f"{total - result.failed_count}/{total} files in {result.total_seconds:.3f}s"
        )
        logger.debug(f"{self.phase_id.capitalize()} phase summary: {result.get_summary()}")
        return result

    def _copy_file(self, entry: FileEntry) -> CopyRecord:
        source = self.source_for(entry)
        destination_dir = self.destination_dir()
        destination = os.path.join(destination_dir, entry.name)

        try:
            self.prepare(entry)
        except TargetCreationError as e:
            return CopyRecord.failed(self.phase_id, entry.name, source, destination, str(e))

        start_ts = time.time()
        started = self.clock()
        try:
            self.copier.copy(source, destination_dir)
        except CopyError as e:
            return CopyRecord.failed(self.phase_id, entry.name, source, destination, str(e))
        elapsed = self.clock() - started

        return CopyRecord(
            phase_id=self.phase_id,
            file_name=entry.name,
            source=source,
            destination=destination,
            bytes_copied=entry.size,
            elapsed_seconds=elapsed,
            start_ts=start_ts,
            end_ts=time.time(),
        )


class WritePhase(CopyPhase):
    """Copies the local sample files onto the remote target directory."""

    phase_id = WRITE_PHASE

    def __init__(self, inventory: FileInventory, remote_path: str,
                 copier: Optional[FileCopier] = None,
                 clock: Callable[[], float] = time.perf_counter):
        super().__init__(inventory, copier, clock)
        self.remote_path = remote_path
        self._target_ready = False

    def source_for(self, entry: FileEntry) -> str:
        return entry.path

    def destination_dir(self) -> str:
        return self.remote_path

    def prepare(self, entry: FileEntry) -> None:
        """Create the target directory the first time it is needed."""
        if self._target_ready:
            return
        if not os.path.isdir(self.remote_path):
            logger.info(f"Creating target directory {self.remote_path}")
            try:
                os.makedirs(self.remote_path, exist_ok=True)
            except OSError as e:
                raise TargetCreationError(self.remote_path, e) from e
        self._target_ready = True


class ReadPhase(CopyPhase):
    """Copies the files back from the remote target to a local directory."""

    phase_id = READ_PHASE

    def __init__(self, inventory: FileInventory, remote_path: str, readback_dir: str,
                 copier: Optional[FileCopier] = None,
                 clock: Callable[[], float] = time.perf_counter):
        super().__init__(inventory, copier, clock)
        self.remote_path = remote_path
        self.readback_dir = readback_dir

    def source_for(self, entry: FileEntry) -> str:
        return os.path.join(self.remote_path, entry.name)

    def destination_dir(self) -> str:
        return self.readback_dir
