#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Logging configuration module for mafkit.

Every mafkit module logs through a logger under the "mafkit" namespace.
An application that wants those messages on the console and in a log file
calls setup_logging() once. Handlers are attached to the "mafkit" logger
only; the root logger and its handlers belong to the application and are
not touched.
"""

import os
import logging
from datetime import datetime
from typing import List, Optional, Union

from colorama import Fore, Style

from .exceptions import ConfigError

PACKAGE_LOGGER = "mafkit"

# Short names accepted by setup_logging(debug=...)
MODULE_LOGGERS = {
    'maf_block': 'mafkit.core.maf_block',
    'line_parser': 'mafkit.core.line_parser',
    'maf_reader': 'mafkit.core.maf_reader',
    'maf_writer': 'mafkit.core.maf_writer',
    'block_views': 'mafkit.core.block_views',
    'file_io': 'mafkit.utils.file_io',
    'exporters': 'mafkit.utils.exporters',
    'config': 'mafkit.config.config',
}

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
DEBUG_CONSOLE_FORMAT = '%(levelname)-8s [%(name)s] %(message)s'


class LoggingConfigError(ConfigError):
    """Error during logging configuration setup."""
    pass


class ColorFormatter(logging.Formatter):
    """Console formatter coloring each record by its level."""

    COLORS = {
        logging.DEBUG: Fore.WHITE,
        logging.INFO: Style.BRIGHT + Fore.WHITE,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.MAGENTA,
    }

    def format(self, record):
        message = super().format(record)
        color = self.COLORS.get(record.levelno)
        if color is None:
            return message
        return f"{color}{message}{Style.RESET_ALL}"


def resolve_debug_loggers(debug: Union[bool, str, List[str], None]) -> List[str]:
    """
    Turn a debug selection into the logger names that should log at DEBUG.

    Args:
        debug: False/None for none, True for all of mafkit, or one or more
               short module names from MODULE_LOGGERS (full logger names
               are accepted too)

    Returns:
        List of logger names

    Raises:
        LoggingConfigError: If a module name is not a mafkit module

    Example:
        >>> resolve_debug_loggers(['maf_reader'])
        ['mafkit.core.maf_reader']
    """
    if debug is True:
        return [PACKAGE_LOGGER]
    if not debug:
        return []

    names = [debug] if isinstance(debug, str) else list(debug)
    loggers = []
    for name in names:
        full_name = MODULE_LOGGERS.get(name, name)
        if full_name not in MODULE_LOGGERS.values():
            raise LoggingConfigError(f"Unknown mafkit module for debug logging: {name}")
        loggers.append(full_name)
    return loggers


def setup_logging(debug: Union[bool, str, List[str]] = False,
                  log_dir: Optional[str] = None) -> str:
    """
    Send mafkit's log records to a log file and the console.

    Calling it again replaces the handlers installed by the previous call.
    The "mafkit" logger stops propagating, so records are not printed twice
    by handlers the application has on the root logger.

    Args:
        debug: Debug selection, see resolve_debug_loggers
        log_dir: Directory for the log file (defaults to ~/.mafkit/logs)

    Returns:
        str: Path to the created log file

    Raises:
        LoggingConfigError: If the debug selection is invalid or the log
            file cannot be created

    Example:
        >>> log_file = setup_logging(debug=['maf_reader', 'line_parser'])
    """
    debug_loggers = resolve_debug_loggers(debug)

    if log_dir is None:
        log_dir = os.path.join(os.path.expanduser("~"), ".mafkit", "logs")
    log_file = os.path.join(log_dir, f"mafkit_{datetime.now():%Y%m%d_%H%M%S}.log")

    try:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
    except OSError as e:
        raise LoggingConfigError(f"Cannot create log file in {log_dir}") from e

    reset_logging()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.INFO)
    package_logger.propagate = False
    for name in debug_loggers:
        logging.getLogger(name).setLevel(logging.DEBUG)

    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(ColorFormatter(DEBUG_CONSOLE_FORMAT if debug_loggers else '%(message)s'))

    package_logger.addHandler(file_handler)
    package_logger.addHandler(console_handler)

    if debug_loggers:
        package_logger.debug(f"Debug logging enabled for {', '.join(debug_loggers)}, log file: {log_file}")
    return log_file


def reset_logging() -> None:
    """Remove the handlers installed by setup_logging and restore propagation."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    for name in MODULE_LOGGERS.values():
        logging.getLogger(name).setLevel(logging.NOTSET)
