#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration module for mafkit.

Contains functionality for:
1. Central configuration settings shared by all modules
2. JSON configuration file loading/saving
3. Reader, writer and block view defaults

This module provides centralized configuration management for mafkit,
supporting simple parameter overrides from JSON files.
"""

import os
import json
import logging
from typing import Dict, Any

from .exceptions import ConfigError

logger = logging.getLogger(__name__)


class Config:
    """
    Central configuration settings for mafkit.

    Settings are class attributes read directly by the reader, writer and
    view modules, so a change is seen everywhere at once.

    Attributes:
        SHOW_PROGRESS: Show a progress bar while reading whole files
        SKIP_MALFORMED_BLOCKS: Skip blocks with bad sequence lines in read_all
        MATRIX_PAD_CHAR: Fill character for short rows in sequence matrices

    Example:
        >>> Config.SKIP_MALFORMED_BLOCKS = True
        >>> Config.load_from_file("my_config.json")
    """

    #############################################################################
    #                           General Options
    #############################################################################
    SHOW_PROGRESS = False                # tqdm progress bar in MafReader.read_all

    #############################################################################
    #                           Reader / Writer Settings
    #############################################################################
    SKIP_MALFORMED_BLOCKS = False        # Default policy for MafReader.read_all
    FILE_ENCODING = "utf-8"
    LINE_TERMINATOR = "\n"
    GZIP_SUFFIXES = [".gz", ".gzip"]

    #############################################################################
    #                           Block View Settings
    #############################################################################
    GAP_CHAR = "-"
    MATRIX_PAD_CHAR = "-"

    # Settings that must hold exactly one character
    _SINGLE_CHAR_SETTINGS = ("GAP_CHAR", "MATRIX_PAD_CHAR")

    # Snapshot of the defaults, filled in at import time below
    _DEFAULTS: Dict[str, Any] = {}

    @classmethod
    def load_from_file(cls, filepath: str) -> bool:
        """
        Load settings from a JSON configuration file.

        Keys that do not name a known setting are ignored with a warning.

        Args:
            filepath: Path to the settings file

        Returns:
            bool: True if settings were loaded successfully

        Raises:
            ConfigError: If the file is missing or is not valid JSON,
                or a setting has the wrong type

        Example:
            >>> Config.load_from_file("my_config.json")
            True
        """
        logger.debug(f"Loading configuration from {filepath}")
        if not os.path.exists(filepath):
            error_msg = f"Configuration file not found: {filepath}"
            logger.error(error_msg)
            raise ConfigError(error_msg)

        try:
            with open(filepath, 'r') as f:
                settings = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            error_msg = f"Failed to load settings from {filepath}"
            logger.error(error_msg)
            logger.debug(f"Error details: {str(e)}", exc_info=True)
            raise ConfigError(error_msg) from e

        if not isinstance(settings, dict):
            error_msg = f"Configuration file {filepath} must contain a JSON object"
            logger.error(error_msg)
            raise ConfigError(error_msg)

        logger.debug(f"Loaded {len(settings)} settings from JSON")

        updates = {}
        for key, value in settings.items():
            if key in cls._DEFAULTS:
                cls._check_value(key, value)
                updates[key] = value
            else:
                logger.warning(f"Ignoring unknown configuration key: {key}")

        # Nothing is applied unless every value is valid
        for key, value in updates.items():
            setattr(cls, key, value)
            logger.debug(f"Updated {key} = {value}")

        return True

    @classmethod
    def _check_value(cls, key: str, value: Any) -> None:
        """Raise ConfigError unless value has the same type as the default."""
        default = cls._DEFAULTS[key]

        if isinstance(default, bool):
            valid = isinstance(value, bool)
        elif isinstance(default, list):
            valid = isinstance(value, list) and all(isinstance(item, str) for item in value)
        else:
            valid = isinstance(value, str) and value != ""

        if valid and key in cls._SINGLE_CHAR_SETTINGS:
            valid = len(value) == 1
        if valid and key == "LINE_TERMINATOR":
            valid = value in ("\n", "\r\n")

        if not valid:
            error_msg = f"Invalid value for {key}: {value!r}"
            logger.error(error_msg)
            raise ConfigError(error_msg)

    @classmethod
    def save_to_file(cls, filepath: str) -> bool:
        """
        Save current settings to a JSON file.

        Args:
            filepath: Path to save the settings

        Returns:
            bool: True if settings were saved successfully

        Raises:
            ConfigError: If saving fails
        """
        logger.debug(f"Saving configuration to {filepath}")

        try:
            with open(filepath, 'w') as f:
                json.dump(cls.get_all_settings(), f, indent=4)
            logger.debug(f"Saved JSON format settings to {filepath}")
            return True
        except (OSError, TypeError) as e:
            error_msg = f"Failed to save settings to {filepath}"
            logger.error(error_msg)
            logger.debug(f"Error details: {str(e)}", exc_info=True)
            raise ConfigError(error_msg) from e

    @classmethod
    def get_all_settings(cls) -> Dict[str, Any]:
        """
        Get all settings as a dictionary.

        Returns:
            dict: Dictionary of all configuration settings

        Example:
            >>> settings = Config.get_all_settings()
            >>> print(settings['GAP_CHAR'])
            -
        """
        settings = {key: getattr(cls, key) for key in cls._DEFAULTS}
        logger.debug(f"Retrieved {len(settings)} configuration settings")
        return settings

    @classmethod
    def reset(cls) -> None:
        """Restore every setting to its default value."""
        for key, value in cls._DEFAULTS.items():
            setattr(cls, key, list(value) if isinstance(value, list) else value)
        logger.debug("Configuration reset to defaults")


Config._DEFAULTS = {
    key: (list(value) if isinstance(value, list) else value)
    for key, value in vars(Config).items()
    if key.isupper() and not key.startswith('_')
}
