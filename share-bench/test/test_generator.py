"""
Tests for sample file generation.
"""

import os
import sys
import tempfile
import unittest

# Add the parent directory to Python path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from configuration import BYTES_PER_MB
from cli.generator import SampleGenerator


class TestSampleGenerator(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.local = os.path.join(self.tmp.name, "samples")

    def tearDown(self):
        self.tmp.cleanup()

    def test_generate_data_is_a_generator(self):
        generator = SampleGenerator(self.local).generate_data(3 * BYTES_PER_MB + 10)

        chunks = list(generator)

        self.assertEqual(len(chunks), 4)
        self.assertEqual(sum(len(c) for c in chunks), 3 * BYTES_PER_MB + 10)
        self.assertTrue(all(isinstance(c, bytes) for c in chunks))

    def test_generate_files(self):
        paths = SampleGenerator(self.local, prefix="probe").generate(count=3, size_mb=2)

        self.assertEqual([os.path.basename(p) for p in paths],
                         ["probe_000.bin", "probe_001.bin", "probe_002.bin"])
        for path in paths:
            self.assertEqual(os.path.getsize(path), 2 * BYTES_PER_MB)

    def test_rejects_non_positive_sizes(self):
        generator = SampleGenerator(self.local)
        with self.assertRaises(ValueError):
            generator.generate(count=0, size_mb=1)
        with self.assertRaises(ValueError):
            generator.generate(count=1, size_mb=0)


if __name__ == '__main__':
    unittest.main()
