#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shared pytest fixtures for mafkit tests.

This file contains fixtures that can be reused across multiple test modules.
"""

import os
import io
import logging
import warnings

import pytest

from ..config import Config


# ============== Suppress logging ===============
class NullHandler(logging.Handler):
    def emit(self, record):
        pass


def silence_logger(logger_name):
    """Completely silence a logger by name."""
    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.CRITICAL)
    logger.propagate = False
    logger.handlers = []
    logger.addHandler(NullHandler())


# Silence potentially noisy third-party loggers
silence_logger("tqdm")
silence_logger("numexpr")

# Set root logger to only show errors or higher
logging.getLogger().setLevel(logging.ERROR)

warnings.filterwarnings("ignore")


def pytest_configure(config):
    """Disable all logging messages during testing."""
    logging.disable(logging.CRITICAL)
    warnings.simplefilter("ignore")


def pytest_runtest_setup(item):
    """Reset log levels before each test to ensure consistency."""
    logging.disable(logging.CRITICAL)


@pytest.fixture(autouse=True)
def reset_config():
    """Restore Config defaults around every test."""
    Config.reset()
    yield
    Config.reset()


# ============== Test data ===============

@pytest.fixture(scope="session")
def test_data_dir():
    """Return the path to the test data directory."""
    return os.path.join(os.path.dirname(__file__), "data")


@pytest.fixture(scope="session")
def example_maf(test_data_dir):
    """Path to a five-species MAF file with a track line and four blocks."""
    return os.path.join(test_data_dir, "example.maf")


# Header immediately followed by an alignment block, no blank line between
SCENARIO_MAF = (
    "##maf version=1\n"
    "a score=0\n"
    "s hg18.chr7 27578828 38 + 158545518 AAA-GGG\n"
    "s panTro1.chr6 28741140 38 + 161576975 AAA-GGG\n"
    "\n"
)

MINUS_STRAND_MAF = (
    "##maf version=1\n"
    "\n"
    "a score=12.0\n"
    "s hg18.chr1 1000 10 + 247249719 ACGTAC-GTAC\n"
    "s mm9.chr2 200 10 - 181748087 ACGTACGTAC-\n"
    "s rn4.chr5 0 4 - 100 AC-GT\n"
    "\n"
)


@pytest.fixture
def scenario_maf_text():
    return SCENARIO_MAF


@pytest.fixture
def scenario_stream():
    """In-memory stream for the two-species scenario."""
    return io.StringIO(SCENARIO_MAF)


@pytest.fixture
def minus_strand_stream():
    return io.StringIO(MINUS_STRAND_MAF)


@pytest.fixture
def maf_file_factory(tmp_path):
    """Write MAF text to a temporary file and return its path."""
    def _make(text, name="test.maf"):
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return _make
