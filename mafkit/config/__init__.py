#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration package for mafkit.
"""

from .config import Config
from .logging_config import setup_logging, reset_logging, LoggingConfigError
from .config_display import display_config
from .exceptions import (
    MAFError, FileError, FileFormatError, HeaderFormatError,
    IncompleteStreamError, WriterClosedError, SequenceFieldError,
    InvalidStrandError, BlockStructureError, BlockViewError, ConfigError
)

__all__ = [
    'Config',
    'setup_logging',
    'reset_logging',
    'LoggingConfigError',
    'display_config',
    'MAFError',
    'FileError',
    'FileFormatError',
    'HeaderFormatError',
    'IncompleteStreamError',
    'WriterClosedError',
    'SequenceFieldError',
    'InvalidStrandError',
    'BlockStructureError',
    'BlockViewError',
    'ConfigError',
]
