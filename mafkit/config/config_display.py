#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration display module for mafkit.
"""

import textwrap
import colorama
from colorama import Fore, Style


def display_config(config_cls):
    """
    Display all configuration settings in a structured, easy-to-read format.

    Args:
        config_cls: The Config class
    """
    # Initialize colorama for cross-platform colored output
    colorama.init()

    settings = config_cls.get_all_settings()

    # Print header
    print(f"\n{Fore.CYAN}{'='*80}{Style.RESET_ALL}")
    print(f"{Fore.CYAN}{'mafkit Configuration Settings':^80}{Style.RESET_ALL}")
    print(f"{Fore.CYAN}{'='*80}{Style.RESET_ALL}\n")

    categories = {
        "General Options": [
            "SHOW_PROGRESS"
        ],
        "Reader / Writer Settings": [
            "SKIP_MALFORMED_BLOCKS", "FILE_ENCODING", "LINE_TERMINATOR", "GZIP_SUFFIXES"
        ],
        "Block View Settings": [
            "GAP_CHAR", "MATRIX_PAD_CHAR"
        ],
    }

    # Create "Other" category for any settings not explicitly categorized
    categorized_keys = []
    for keys in categories.values():
        categorized_keys.extend(keys)

    other_keys = [key for key in settings.keys() if key not in categorized_keys]

    if other_keys:
        categories["Other"] = other_keys

    for category, keys in categories.items():
        print(f"{Fore.GREEN}{category}{Style.RESET_ALL}")
        print(f"{Fore.GREEN}{'-' * len(category)}{Style.RESET_ALL}")

        for key in keys:
            if key in settings:
                value = settings[key]
                if isinstance(value, list) and len(str(value)) > 60:
                    formatted_value = "\n" + textwrap.indent(str(value), " " * 4)
                else:
                    # repr keeps control characters such as "\n" visible
                    formatted_value = repr(value) if isinstance(value, str) else str(value)

                print(f"{Fore.YELLOW}{key}{Style.RESET_ALL}: {formatted_value}")
        print()

    print(f"{Fore.CYAN}{'='*80}{Style.RESET_ALL}")
    print(f"\nExample config file format:")
    print(f"{Fore.BLUE}{{")
    print(f'    "SKIP_MALFORMED_BLOCKS": true,')
    print(f'    "MATRIX_PAD_CHAR": "."')
    print(f"}}{Style.RESET_ALL}\n")
