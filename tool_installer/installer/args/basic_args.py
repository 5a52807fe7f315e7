#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""
Basic ungrouped arguments for the tool installer
"""

from tool_installer.tool_constants import DEFAULT_FAIL_MARKER, DEFAULT_LOG_FILE
from tool_installer.tool_utils import str2bool


def add_basic_args(parser):
    """
    Add basic installer arguments to the parser

    Args:
        parser: ArgumentParser to add arguments to
    """
    basicArgGroup = parser.add_argument_group("Installer Options")

    basicArgGroup.add_argument(
        "--debug",
        "--verbose",
        dest="debug",
        type=str2bool,
        nargs="?",
        metavar="true|false",
        const=True,
        default=False,
        help="Enable debug output including tracebacks and command output",
    )
    basicArgGroup.add_argument(
        "--quiet",
        "--silent",
        action="store_true",
        dest="quiet",
        default=False,
        help="Suppress console logging output (the log file is still written)",
    )
    basicArgGroup.add_argument(
        "--log-file",
        dest="log_file",
        metavar="<string>",
        type=str,
        default=DEFAULT_LOG_FILE,
        help=f"Append-only installer log (default: {DEFAULT_LOG_FILE})",
    )
    basicArgGroup.add_argument(
        "--fail-marker",
        dest="fail_marker",
        metavar="<string>",
        type=str,
        default=DEFAULT_FAIL_MARKER,
        help=f"File written when a run aborts and removed on success (default: {DEFAULT_FAIL_MARKER})",
    )
