"""
Tests for Parquet history and Prometheus textfile export.
"""

import os
import sys
import tempfile
import unittest
from datetime import datetime

# Add the parent directory to Python path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from configuration import BYTES_PER_MB
from cli.runner import SpeedTestRunner
from persistence.parquet import ParquetPersistence, load_history
from persistence.prom import SpeedTestPrometheusExporter
from persistence.record import CopyRecord
from persistence.report import RunStatus, SpeedTestReport
from fakes import SteppingCopier, make_files


class TestParquetPersistence(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.results = os.path.join(self.tmp.name, "results")

    def tearDown(self):
        self.tmp.cleanup()

    def test_no_records_writes_nothing(self):
        persistence = ParquetPersistence(self.results)
        self.assertIsNone(persistence.save_to_file("run", "OK", "/mnt/share"))
        self.assertFalse(os.path.exists(self.results))

    def test_saved_records_load_back(self):
        persistence = ParquetPersistence(self.results)
        persistence.store_records([
            CopyRecord("write", "a.bin", "local/a.bin", "remote/a.bin", 100, 0.5),
            CopyRecord.failed("read", "a.bin", "remote/a.bin", "local/a.bin", "boom"),
        ])

        path = persistence.save_to_file("2024-05-01T12:00:00", "PartialFailure", "/mnt/share")
        history = load_history(self.results)

        self.assertTrue(os.path.exists(path))
        self.assertEqual(len(history), 2)
        self.assertEqual(list(history['phase_id']), ["write", "read"])
        self.assertEqual(list(history['succeeded']), [True, False])
        self.assertEqual(history['error'].iloc[1], "boom")
        self.assertEqual(history['run_id'].iloc[0], "2024-05-01T12:00:00")

    def test_runs_in_the_same_second_keep_separate_files(self):
        record = CopyRecord("write", "a.bin", "local/a.bin", "remote/a.bin", 100, 0.5)
        paths = []
        for run_id in ("run-1", "run-2"):
            persistence = ParquetPersistence(self.results)
            persistence.store_records([record])
            paths.append(persistence.save_to_file(run_id, "OK", "/mnt/share"))

        self.assertNotEqual(paths[0], paths[1])
        history = load_history(self.results)
        self.assertEqual(sorted(history['run_id']), ["run-1", "run-2"])

    def test_runner_saves_history(self):
        local = os.path.join(self.tmp.name, "local")
        os.mkdir(local)
        make_files(local, [10, 20])
        copier = SteppingCopier([0.1] * 4)

        SpeedTestRunner(os.path.join(self.tmp.name, "remote"), local,
                        readback_dir=self.tmp.name, results_dir=self.results,
                        copier=copier, clock=copier.clock).run()

        history = load_history(self.results)
        self.assertEqual(len(history), 4)
        self.assertEqual(set(history['status']), {"OK"})


class TestPrometheusExporter(unittest.TestCase):

    def test_writes_textfile(self):
        report = SpeedTestReport(
            timestamp=datetime(2024, 5, 1, 12, 0, 0),
            status=RunStatus.OK,
            write_time=[1.0, 1.0],
            write_mbps=12.0,
            read_time=[0.5, 0.5],
            read_mbps=24.0,
            file_count=2,
            total_bytes=3 * BYTES_PER_MB,
            write_bytes=3 * BYTES_PER_MB,
            read_bytes=3 * BYTES_PER_MB,
        )

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "speedtest.prom")
            self.assertTrue(SpeedTestPrometheusExporter(path).write(report))
            with open(path) as f:
                content = f.read()

        self.assertIn('share_speedtest_mbps{phase="write"} 12.0', content)
        self.assertIn('share_speedtest_mbps{phase="read"} 24.0', content)
        self.assertIn('share_speedtest_success 1.0', content)
        self.assertIn('share_speedtest_bytes{phase="write"} 3145728.0', content)
        self.assertNotIn('_created', content)

    def test_failed_file_counted_once_per_phase(self):
        """A file that fails to write is also missing for the read phase."""
        with tempfile.TemporaryDirectory() as tmp:
            local = os.path.join(tmp, "local")
            os.mkdir(local)
            paths = make_files(local, [BYTES_PER_MB] * 3)
            copier = SteppingCopier([0.5, 0.5, 0.25, 0.25], fail_sources=[paths[1]])
            textfile = os.path.join(tmp, "speedtest.prom")

            SpeedTestRunner(os.path.join(tmp, "remote"), local,
                            readback_dir=tmp, results_dir=None,
                            prom_textfile=textfile, copier=copier, clock=copier.clock).run()

            with open(textfile) as f:
                content = f.read()

        self.assertIn('share_speedtest_failed_files{phase="write"} 1.0', content)
        self.assertIn('share_speedtest_failed_files{phase="read"} 1.0', content)
        self.assertIn('share_speedtest_success 0.0', content)

    def test_unwritable_path_returns_false(self):
        report = SpeedTestReport(datetime.now(), RunStatus.OK, [1.0], 8.0, [1.0], 8.0)
        exporter = SpeedTestPrometheusExporter("/nonexistent-dir/speedtest.prom")
        with self.assertLogs('persistence.prom', level='ERROR'):
            self.assertFalse(exporter.write(report))


if __name__ == '__main__':
    unittest.main()
