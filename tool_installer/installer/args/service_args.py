#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""
Post-install arguments (run once, systemd service) for the tool installer
"""

from tool_installer.tool_constants import DEFAULT_UNIT_DIR
from tool_installer.tool_utils import str2bool


def add_service_args(parser):
    """
    Add post-install arguments to the parser

    Args:
        parser: ArgumentParser to add arguments to
    """
    serviceArgGroup = parser.add_argument_group("Post-Install Actions")

    serviceArgGroup.add_argument(
        "--run",
        dest="run_now",
        type=str2bool,
        nargs="?",
        metavar="true|false",
        const=True,
        default=None,
        help="Launch the installed executable once in the background (prompted if omitted)",
    )
    serviceArgGroup.add_argument(
        "--service",
        dest="create_service",
        type=str2bool,
        nargs="?",
        metavar="true|false",
        const=True,
        default=None,
        help="Create and start a systemd service for the tool (prompted if omitted)",
    )
    serviceArgGroup.add_argument(
        "--service-name",
        dest="service_name",
        metavar="<string>",
        type=str,
        default="",
        help="systemd service name (default: tool name)",
    )
    serviceArgGroup.add_argument(
        "--unit-dir",
        dest="unit_dir",
        metavar="<string>",
        type=str,
        default=DEFAULT_UNIT_DIR,
        help=f"Directory for generated unit files (default: {DEFAULT_UNIT_DIR})",
    )
