#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Process lifecycle: owns the append-only log file and the fail marker.

The fail marker is part of the installer's external contract: monitors poll for
its presence to learn that the previous run aborted. It is written by fail() and
removed by succeed().
"""

import os
from typing import Optional

from tool_installer.tool_constants import (
    DEFAULT_FAIL_MARKER,
    DEFAULT_LOG_FILE,
    FAIL_TOKEN,
    LOG_FILE_MODE,
    LOG_PREFIX,
    TOOL_INSTALLER_NAME,
)
from tool_installer.tool_utils import touch
from tool_installer.installer.utils.exceptions import FatalEnvironmentError
from tool_installer.installer.utils.logger_utils import InstallerLogger

BANNER_RULE = "=" * 40


class InstallLifecycle:
    """Explicit begin/record/fail/succeed state for a single installer run."""

    def __init__(
        self,
        log_file: str = DEFAULT_LOG_FILE,
        fail_marker: str = DEFAULT_FAIL_MARKER,
        show_banners: bool = True,
    ):
        self.log_file = log_file
        self.fail_marker = fail_marker
        self.show_banners = show_banners
        self.started = False
        self.finished = False
        self.exit_code: Optional[int] = None

    def begin(self) -> None:
        """Ensure the log file exists and is writable, then route the logger to it."""
        existed = os.path.isfile(self.log_file)
        try:
            touch(self.log_file)
        except OSError as e:
            raise FatalEnvironmentError(
                f"Cannot create log at {self.log_file}. Run as root. ({e})"
            ) from e
        if not existed:
            try:
                os.chmod(self.log_file, LOG_FILE_MODE)
            except OSError:
                pass

        InstallerLogger.set_log_file(self.log_file)
        self.started = True
        self._print_header()

    def record_event(self, message: str) -> None:
        """Append one event line to the console and the log."""
        InstallerLogger.info(message)

    def fail(self, code: int, message: Optional[str] = None) -> int:
        """Log the failure, write the fail marker, and return the exit code to use."""
        code = code if code else 1
        if message:
            InstallerLogger.error(message)
        InstallerLogger.error(
            f"Installer failed (exit code {code}). Marker: {self.fail_marker}"
        )
        try:
            with open(self.fail_marker, "w", encoding="utf-8") as f:
                f.write(f"{FAIL_TOKEN}\n")
        except OSError as e:
            InstallerLogger.warning(f"Could not write fail marker {self.fail_marker}: {e}")
        if self.started:
            InstallerLogger.error(f"See {self.log_file} for details.")
        self.finished = True
        self.exit_code = code
        return code

    def succeed(self) -> int:
        """Print the footer, log success, and clear any stale fail marker."""
        self._print_footer()
        InstallerLogger.success("Installer finished.")
        if os.path.isfile(self.fail_marker):
            try:
                os.remove(self.fail_marker)
            except OSError as e:
                InstallerLogger.warning(f"Could not remove fail marker {self.fail_marker}: {e}")
        self.finished = True
        self.exit_code = 0
        return 0

    def last_run_failed(self) -> bool:
        return os.path.isfile(self.fail_marker)

    def _print_header(self) -> None:
        if not self.show_banners:
            return
        print(BANNER_RULE)
        print(TOOL_INSTALLER_NAME)
        print(BANNER_RULE)
        print("")
        print(f"{LOG_PREFIX} Starting installer...")
        print("")
        print(f"{LOG_PREFIX} Logging -> {self.log_file}")
        print("")

    def _print_footer(self) -> None:
        if not self.show_banners:
            return
        print("")
        print(BANNER_RULE)
        print(f"{TOOL_INSTALLER_NAME} (END)")
        print(BANNER_RULE)
        print("")
