"""
Runs the speed test: scan the inventory, write phase, read phase, report.
"""

import os
import time
import logging
from datetime import datetime
from typing import Callable, Optional

from configuration import DEFAULT_RESULTS_DIR
from algorithms.copy_phase import WritePhase, ReadPhase
from common.file_copier import FileCopier
from common.inventory import scan_inventory
from persistence.parquet import ParquetPersistence
from persistence.prom import SpeedTestPrometheusExporter
from persistence.report import SpeedTestReport

logger = logging.getLogger(__name__)


class SpeedTestRunner:
    """Measures write and read throughput of a network share."""

    def __init__(
        self,
        remote_path: str,
        local_path: str,
        readback_dir: str = None,
        results_dir: Optional[str] = DEFAULT_RESULTS_DIR,
        prom_textfile: Optional[str] = None,
        cleanup: bool = False,
        copier: Optional[FileCopier] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.remote_path = remote_path
        self.local_path = local_path
        self.readback_dir = readback_dir or local_path
        self.results_dir = results_dir
        self.prom_textfile = prom_textfile
        self.cleanup = cleanup
        self.copier = copier or FileCopier()
        self.clock = clock

        logger.info(f"Initialized speed test: {local_path} <-> {remote_path}")

    def run(self) -> SpeedTestReport:
        """Execute both phases and build the report.

        Raises:
            FatalInventoryError: If the local directory holds no files; no
                copy is attempted in that case.
        """
        started_at = datetime.now()
        inventory = scan_inventory(self.local_path)

        write_result = WritePhase(
            inventory, self.remote_path, copier=self.copier, clock=self.clock
        ).execute()
        read_result = ReadPhase(
            inventory, self.remote_path, self.readback_dir, copier=self.copier, clock=self.clock
        ).execute()

        report = SpeedTestReport.from_phases(started_at, inventory, write_result, read_result)
        logger.info(
            f"Speed test completed: status={report.status.value}, "
            f"write={report.write_mbps:.2f} Mbps, read={report.read_mbps:.2f} Mbps"
        )

        if self.cleanup:
            self._remove_remote_copies(write_result.records)
        self._persist(report, write_result.records + read_result.records)
        return report

    def _remove_remote_copies(self, write_records) -> None:
        """Delete the files this run wrote to the target directory."""
        removed = sum(
            1 for record in write_records
            if record.succeeded and self.copier.remove(record.destination)
        )
        logger.info(f"Removed {removed} files from {self.remote_path}")

    def _persist(self, report: SpeedTestReport, records) -> None:
        if self.results_dir:
            try:
                persistence = ParquetPersistence(self.results_dir)
                persistence.store_records(records)
                path = persistence.save_to_file(
                    run_id=report.timestamp.isoformat(timespec='seconds'),
                    status=report.status.value,
                    remote_path=os.path.abspath(self.remote_path),
                )
                if path:
                    logger.info(f"Saved run records to {path}")
            except Exception as e:
                logger.error(f"Failed to save run records: {e}")

        if self.prom_textfile:
            SpeedTestPrometheusExporter(self.prom_textfile).write(report)
