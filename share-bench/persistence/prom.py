"""
Prometheus textfile exporter for speed test results.
"""

import logging
from prometheus_client import CollectorRegistry, Gauge, write_to_textfile

from persistence.report import SpeedTestReport

logger = logging.getLogger(__name__)


class SpeedTestPrometheusExporter:
    """Writes the last run's results for a node_exporter textfile collector."""

    def __init__(self, textfile_path: str):
        self.textfile_path = textfile_path
        self.registry = CollectorRegistry()

        # Define metrics
        self.mbps = Gauge('share_speedtest_mbps', 'Throughput of the last run in Mbps',
                          ['phase'], registry=self.registry)
        self.bytes_copied = Gauge('share_speedtest_bytes', 'Bytes copied in the last run',
                                  ['phase'], registry=self.registry)
        self.failed_files = Gauge('share_speedtest_failed_files', 'Files that failed to copy in the last run',
                                  ['phase'], registry=self.registry)
        self.last_run = Gauge('share_speedtest_last_run_timestamp_seconds', 'Start time of the last run',
                              registry=self.registry)
        self.success = Gauge('share_speedtest_success', '1 if every copy of the last run succeeded',
                             registry=self.registry)

    def record_report(self, report: SpeedTestReport) -> None:
        """Populate the metrics from a report."""
        self.mbps.labels(phase='write').set(report.write_mbps)
        self.mbps.labels(phase='read').set(report.read_mbps)
        self.bytes_copied.labels(phase='write').set(report.write_bytes)
        self.bytes_copied.labels(phase='read').set(report.read_bytes)
        self.failed_files.labels(phase='write').set(report.write_failures)
        self.failed_files.labels(phase='read').set(report.read_failures)
        self.last_run.set(report.timestamp.timestamp())
        self.success.set(0 if report.errors else 1)

    def write(self, report: SpeedTestReport) -> bool:
        """Record the report and write the textfile."""
        try:
            self.record_report(report)
            write_to_textfile(self.textfile_path, self.registry)
            logger.info(f"Wrote Prometheus metrics to {self.textfile_path}")
            return True
        except Exception as e:
            logger.error(f"Failed to write Prometheus metrics: {e}")
            return False
