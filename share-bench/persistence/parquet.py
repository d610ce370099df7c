"""
Parquet persistence for speed test run history.
"""

import os
import logging
from typing import List, Optional
from datetime import datetime

import pandas as pd

from persistence.record import CopyRecord

logger = logging.getLogger(__name__)


class ParquetPersistence:
    """Parquet file persistence for per-file copy records.

    Every run is saved to its own file so that the history directory can be
    loaded back as one DataFrame for plotting.

    Attributes:
        output_dir: Directory where Parquet files will be saved
        records: List of copy records accumulated during the run
    """

    def __init__(self, output_dir: str = "results"):
        """Initialize Parquet persistence.

        Args:
            output_dir: Directory for saving Parquet files (default: 'results')
        """
        self.output_dir: str = output_dir
        self.records: List[CopyRecord] = []

    def store_records(self, records: List[CopyRecord]) -> None:
        """Store copy records in memory."""
        self.records.extend(records)

    def to_dataframe(self, run_id: str, status: str, remote_path: str) -> pd.DataFrame:
        """Convert the stored records to a DataFrame tagged with run metadata."""
        data = []
        for record in self.records:
            data.append({
                'run_id': run_id,
                'status': status,
                'remote_path': remote_path,
                'phase_id': record.phase_id,
                'file_name': record.file_name,
                'bytes': record.bytes,
                'elapsed_seconds': record.elapsed_seconds,
                'succeeded': record.succeeded,
                'error': record.error or "",
                'start_ts': record.start_ts,
                'end_ts': record.end_ts,
            })
        return pd.DataFrame(data)

    def save_to_file(self, run_id: str, status: str, remote_path: str,
                     filename_prefix: str = "speedtest") -> Optional[str]:
        """Save all records to a Parquet file.

        Args:
            run_id: Identifier of the run (its start timestamp)
            status: Run status value
            remote_path: Target directory the run measured
            filename_prefix: Prefix for the generated filename (default: 'speedtest')

        Returns:
            Path to the saved file, or None if no records to save
        """
        if not self.records:
            return None

        os.makedirs(self.output_dir, exist_ok=True)

        logger.info(f"Saving {len(self.records)} records to file")
        df = self.to_dataframe(run_id, status, remote_path)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        filename = f"{filename_prefix}_{timestamp}.parquet"
        filepath = os.path.join(self.output_dir, filename)
        suffix = 1
        while os.path.exists(filepath):
            filepath = os.path.join(self.output_dir, f"{filename_prefix}_{timestamp}_{suffix}.parquet")
            suffix += 1

        df.to_parquet(filepath, index=False)

        return filepath


def load_history(results_dir: str) -> pd.DataFrame:
    """Load every saved run in results_dir into one DataFrame."""
    files = sorted(
        os.path.join(results_dir, name)
        for name in os.listdir(results_dir)
        if name.endswith(".parquet")
    )
    if not files:
        return pd.DataFrame()
    logger.info(f"Loading {len(files)} result files from {results_dir}")
    return pd.concat([pd.read_parquet(f) for f in files], ignore_index=True)
