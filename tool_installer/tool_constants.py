#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

from enum import Enum, auto


###################################################################################################
TOOL_INSTALLER_NAME = "0x TOOL INSTALLER"
TOOL_INSTALLER_VERSION = "1.0.0"

# every console and log line starts with this marker
LOG_PREFIX = "0x:"
FAIL_TOKEN = f"{LOG_PREFIX} FAIL"

###################################################################################################
DEFAULT_LOG_FILE = "/var/log/tool_installer.log"
DEFAULT_FAIL_MARKER = "/var/log/tool_installer_fail.marker"
DEFAULT_BIN_DIR = "/usr/local/bin"
DEFAULT_OPT_DIR = "/opt"
DEFAULT_UNIT_DIR = "/etc/systemd/system"

DOWNLOAD_TEMP_PREFIX = "tool_installer_"
DOWNLOAD_DEFAULT_NAME = "download"
DOWNLOAD_CHUNK_SIZE = 64 * 1024
DOWNLOAD_TIMEOUT_SEC = 60

# mode applied to a freshly created log file (world-readable)
LOG_FILE_MODE = 0o644

###################################################################################################
PLATFORM_WINDOWS = "Windows"
PLATFORM_LINUX = "Linux"


###################################################################################################
# Constants for run modes
class PresentationMode(Enum):
    MODE_TUI = auto()  # Text-based User Interface
    MODE_DUI = auto()  # Dialogs
    MODE_SILENT = auto()  # Non-interactive
