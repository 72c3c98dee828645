#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Test script for the file_io.py module of mafkit.

This script tests:
- gzip suffix detection
- Opening plain and gzip files
- Line terminator handling
- LineSource line numbering and handle ownership
"""

import io
import os
import gzip
import shutil
import tempfile
import unittest
from unittest import mock

from mafkit.utils.file_io import LineSource, open_text, is_gzip_path, strip_line_terminator
from mafkit.config import Config
from mafkit.config.exceptions import FileError


class TestFileHelpers(unittest.TestCase):
    """Test case for the module-level helpers."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)
        Config.reset()

    def test_is_gzip_path(self):
        self.assertTrue(is_gzip_path("chr1.maf.gz"))
        self.assertTrue(is_gzip_path("CHR1.MAF.GZ"))
        self.assertTrue(is_gzip_path("chr1.maf.gzip"))
        self.assertFalse(is_gzip_path("chr1.maf"))

        Config.GZIP_SUFFIXES = [".bgz"]
        self.assertTrue(is_gzip_path("chr1.maf.bgz"))
        self.assertFalse(is_gzip_path("chr1.maf.gz"))

    def test_strip_line_terminator(self):
        self.assertEqual(strip_line_terminator("a score=0\n"), "a score=0")
        # A carriage return is line content
        self.assertEqual(strip_line_terminator("a score=0\r\n"), "a score=0\r")
        self.assertEqual(strip_line_terminator("a score=0\r"), "a score=0\r")
        self.assertEqual(strip_line_terminator("a score=0"), "a score=0")
        # Only one terminator is removed
        self.assertEqual(strip_line_terminator("\n\n"), "\n")

    def test_open_text_gzip(self):
        path = os.path.join(self.test_dir, "blocks.maf.gz")
        with open_text(path, "w") as f:
            f.write("##maf version=1\n")

        with gzip.open(path, "rt") as f:
            self.assertEqual(f.read(), "##maf version=1\n")

    def test_open_text_missing_file(self):
        with self.assertRaises(FileError):
            open_text(os.path.join(self.test_dir, "missing.maf"))


class TestLineSource(unittest.TestCase):
    """Test case for LineSource."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.test_dir, "lines.maf")
        with open(self.path, "w", newline="") as f:
            f.write("##maf version=1\r\n\na score=0")

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_read_lines_from_path(self):
        with LineSource(self.path) as source:
            self.assertEqual(source.filename, self.path)
            self.assertEqual(source.read_line(), "##maf version=1\r")
            self.assertEqual(source.read_line(), "")
            self.assertEqual(source.read_line(), "a score=0")
            self.assertEqual(source.line_number, 3)
            self.assertIsNone(source.read_line())
            self.assertIsNone(source.read_line())
            # End of stream does not advance the counter
            self.assertEqual(source.line_number, 3)
        self.assertTrue(source.closed)

    def test_long_line(self):
        sequence = "ACGT" * 100000
        source = LineSource(io.StringIO(f"s hg18 0 {len(sequence)} + 1000000 {sequence}\n"))
        self.assertTrue(source.read_line().endswith(sequence))

    def test_caller_handle_not_closed(self):
        handle = io.StringIO("track name=x\n")
        source = LineSource(handle)
        self.assertEqual(source.filename, "<stream>")
        source.close()

        self.assertTrue(source.closed)
        self.assertFalse(handle.closed)
        self.assertIsNone(source.read_line())

    def test_read_error(self):
        handle = mock.MagicMock()
        handle.readline.side_effect = OSError("device not ready")
        source = LineSource(handle)

        with self.assertRaises(FileError):
            source.read_line()


if __name__ == '__main__':
    unittest.main()
