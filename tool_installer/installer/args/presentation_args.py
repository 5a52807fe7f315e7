#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""
Presentation arguments for the tool installer.

Defines interface mode flags (TUI/DUI) and non-interactive mode.
"""


def add_presentation_args(parser):
    """
    Add interface mode arguments to the parser

    Args:
        parser: ArgumentParser to add arguments to
    """
    mode_group = parser.add_argument_group(title="Interface Mode (mutually exclusive)")

    mode_exclusive_group = mode_group.add_mutually_exclusive_group()
    mode_exclusive_group.add_argument(
        "--tui",
        action="store_true",
        help="Run in command-line text-based interface mode (default)",
    )
    mode_exclusive_group.add_argument(
        "--dui",
        action="store_true",
        help="Run in python dialogs text-based user interface mode (requires the dialog program)",
    )
    mode_exclusive_group.add_argument(
        "--non-interactive",
        dest="non_interactive",
        action="store_true",
        default=False,
        help="Accept defaults for every prompt; the source must be given with --url or --file",
    )
