#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Unit tests for the MAF writer of mafkit.

These tests verify block delimiters, the trailing blank line, closing
behaviour and the read/write round trip.
"""

import io
import gzip
import os
import shutil
import tempfile
import unittest

from mafkit.core.maf_reader import MafReader, read_maf
from mafkit.core.maf_writer import MafWriter, write_maf
from mafkit.config.exceptions import FileError, WriterClosedError
from mafkit.tests.conftest import SCENARIO_MAF


class TestMafWriter(unittest.TestCase):
    """Test case for MafWriter."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.example_maf = os.path.join(os.path.dirname(__file__), "..", "data", "example.maf")

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_write_block(self):
        """Each line is written verbatim and the block ends with one blank line."""
        blocks = MafReader(io.StringIO(SCENARIO_MAF)).read_all()
        out = io.StringIO()
        MafWriter(out).write_block(blocks[1])

        self.assertEqual(out.getvalue(), (
            "a score=0\n"
            "s hg18.chr7 27578828 38 + 158545518 AAA-GGG\n"
            "s panTro1.chr6 28741140 38 + 161576975 AAA-GGG\n"
            "\n"
        ))

    def test_write_all_scenario(self):
        """write_all separates blocks by one blank line and adds a trailing one."""
        blocks = MafReader(io.StringIO(SCENARIO_MAF)).read_all()
        out = io.StringIO()
        writer = MafWriter(out)
        writer.write_all(blocks)

        self.assertEqual(out.getvalue(), (
            "##maf version=1\n"
            "\n"
            "a score=0\n"
            "s hg18.chr7 27578828 38 + 158545518 AAA-GGG\n"
            "s panTro1.chr6 28741140 38 + 161576975 AAA-GGG\n"
            "\n"
            "\n"
        ))
        self.assertEqual(writer.line_number, 7)
        self.assertTrue(writer.closed)
        # Caller-supplied handles are not closed
        self.assertFalse(out.closed)

    def test_write_after_write_all(self):
        """The writer refuses further output once write_all has run."""
        blocks = MafReader(io.StringIO(SCENARIO_MAF)).read_all()
        writer = MafWriter(io.StringIO())
        writer.write_all(blocks)

        with self.assertRaises(WriterClosedError):
            writer.write_block(blocks[0])
        with self.assertRaises(WriterClosedError):
            writer.write_all(blocks)

    def test_round_trip_file(self):
        """Every captured line survives a read/write/read cycle unchanged."""
        out_path = os.path.join(self.test_dir, "copy.maf")
        original = read_maf(self.example_maf)
        write_maf(out_path, original)
        copy = read_maf(out_path)

        self.assertEqual(
            [[line.raw_text for line in block] for block in copy],
            [[line.raw_text for line in block] for block in original],
        )

    def test_round_trip_text(self):
        """Output differs from the input only by the extra trailing blank line."""
        with open(self.example_maf) as f:
            text = f.read()

        out = io.StringIO()
        MafWriter(out).write_all(read_maf(io.StringIO(text)))
        self.assertEqual(out.getvalue(), text + "\n")

    def test_blank_runs_normalized(self):
        text = "##maf version=1\n\n\n\na score=1\ns hg18 1 2 + 10 AC\n\n\n\n"
        out = io.StringIO()
        MafWriter(out).write_all(read_maf(io.StringIO(text)))
        self.assertEqual(out.getvalue(), "##maf version=1\n\na score=1\ns hg18 1 2 + 10 AC\n\n\n")

    def test_crlf_round_trip_bytes(self):
        """CRLF input is written back byte for byte, plus the trailing blank line."""
        data = b"##maf version=1\r\n\r\na score=1\r\ns hg18 1 2 + 10 AC\r\n\r\n"
        in_path = os.path.join(self.test_dir, "crlf.maf")
        out_path = os.path.join(self.test_dir, "crlf_copy.maf")
        with open(in_path, "wb") as f:
            f.write(data)

        write_maf(out_path, read_maf(in_path))

        with open(out_path, "rb") as f:
            self.assertEqual(f.read(), data + b"\r\n")

    def test_closed_caller_handle(self):
        """Writing to a handle the caller already closed raises FileError."""
        blocks = MafReader(io.StringIO(SCENARIO_MAF)).read_all()
        out = io.StringIO()
        out.close()
        writer = MafWriter(out)

        with self.assertRaises(FileError):
            writer.write_block(blocks[0])
        with self.assertRaises(FileError):
            writer.write_all(blocks)
        self.assertTrue(writer.closed)

    def test_gzip_output(self):
        out_path = os.path.join(self.test_dir, "copy.maf.gz")
        write_maf(out_path, read_maf(self.example_maf))

        with gzip.open(out_path, "rt") as f:
            self.assertTrue(f.readline().startswith("track name=euArc"))
        self.assertEqual(len(read_maf(out_path)), 5)

    def test_context_manager_closes_file(self):
        out_path = os.path.join(self.test_dir, "blocks.maf")
        blocks = read_maf(self.example_maf)
        with MafWriter(out_path) as writer:
            writer.write_block(blocks[0])
        self.assertTrue(writer.closed)

        with open(out_path) as f:
            self.assertEqual(f.read().count("\n"), blocks[0].line_count + 1)

    def test_append_mode(self):
        out_path = os.path.join(self.test_dir, "append.maf")
        header, first, second = read_maf(self.example_maf)[:3]
        MafWriter(out_path).write_all([header, first])
        MafWriter(out_path, mode="a").write_all([second])

        blocks = read_maf(out_path)
        self.assertEqual([b.sequence_count for b in blocks], [0, 5, 5])


if __name__ == '__main__':
    unittest.main()
