#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""
Source artifact and destination arguments for the tool installer
"""

from tool_installer.tool_constants import DEFAULT_BIN_DIR


def add_install_files_args(parser):
    """
    Add source and destination arguments to the parser

    Args:
        parser: ArgumentParser to add arguments to
    """
    installFilesArgGroup = parser.add_argument_group("Installation Files")

    source_group = installFilesArgGroup.add_mutually_exclusive_group()
    source_group.add_argument(
        "--url",
        "-u",
        required=False,
        dest="url",
        metavar="<string>",
        type=str,
        default="",
        help="Direct download URL (http(s):// or ftp://) of the archive, package or binary",
    )
    source_group.add_argument(
        "--file",
        "-f",
        required=False,
        dest="local_file",
        metavar="<string>",
        type=str,
        default="",
        help="Existing local archive, package or binary to install",
    )
    installFilesArgGroup.add_argument(
        "--tool-name",
        "-n",
        required=False,
        dest="tool_name",
        metavar="<string>",
        type=str,
        default="",
        help="Tool name used for the install folder, symlink and service (default: source file name)",
    )
    installFilesArgGroup.add_argument(
        "--sha256",
        required=False,
        dest="sha256",
        metavar="<hex>",
        type=str,
        default="",
        help="Expected SHA256 digest of the source artifact",
    )
    installFilesArgGroup.add_argument(
        "--install-base",
        "-b",
        required=False,
        dest="install_base",
        metavar="<string>",
        type=str,
        default="",
        help=f"Installation base directory (e.g. {DEFAULT_BIN_DIR}, /opt, or another absolute path)",
    )
    installFilesArgGroup.add_argument(
        "--bin-dir",
        required=False,
        dest="bin_dir",
        metavar="<string>",
        type=str,
        default=DEFAULT_BIN_DIR,
        help=f"Directory receiving the tool symlink (default: {DEFAULT_BIN_DIR})",
    )
