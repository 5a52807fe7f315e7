#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

import sys
from datetime import datetime
from typing import Optional

from colorama import init as ColoramaInit, Fore, Style

from tool_installer.tool_constants import LOG_PREFIX
from tool_installer.installer.configs.constants.enums import InstallerResult

ColoramaInit()


class InstallerLogger:
    """A static logger for installer steps with color-coded console output mirrored to a log file.

    Every line, on the console and in the file, starts with LOG_PREFIX. File lines
    carry the timestamp after the message.
    """

    _console_output_enabled = True
    _main_log_file: Optional[str] = None
    _debug_enabled = False

    def __init__(self):
        """Constructor disabled - use static methods only."""
        raise NotImplementedError(
            "InstallerLogger is entirely static. Use static methods directly."
        )

    @classmethod
    def set_console_output(cls, enabled: bool):
        cls._console_output_enabled = enabled

    @classmethod
    def set_log_file(cls, main_log_file: Optional[str]):
        """Set the main log file for all logging operations."""
        cls._main_log_file = main_log_file

    @classmethod
    def get_log_file(cls) -> Optional[str]:
        return cls._main_log_file

    @classmethod
    def set_debug_enabled(cls, enabled: bool):
        """Enable or disable debug-level logging."""
        cls._debug_enabled = enabled

    @classmethod
    def reset(cls):
        """Restore default settings (console on, no file, no debug)."""
        cls._console_output_enabled = True
        cls._main_log_file = None
        cls._debug_enabled = False

    @staticmethod
    def format_line(label: Optional[str], message: str) -> str:
        """Build the uncolored text of a log line."""
        if label:
            return f"{LOG_PREFIX} {label} - {message}"
        return f"{LOG_PREFIX} {message}"

    @staticmethod
    def _log(label: Optional[str], color: str, message: str, file: object = None):
        """Write a message to the log file (if set) and to the console (if enabled)."""
        line = InstallerLogger.format_line(label, message)

        if InstallerLogger._main_log_file:
            try:
                with open(InstallerLogger._main_log_file, "a", encoding="utf-8") as f:
                    f.write(f"{line} [{InstallerLogger._timestamp()}]\n")
            except OSError:
                # the log file was checked when the run began; losing a line must not abort the run
                pass

        if InstallerLogger._console_output_enabled:
            if label and color:
                print(
                    f"{LOG_PREFIX} {color}{label}{Style.RESET_ALL} - {message}",
                    file=file or sys.stdout,
                )
            else:
                print(line, file=file or sys.stdout)

    @staticmethod
    def start(label: str):
        """Log the start of a given action."""
        InstallerLogger._log("START", Fore.BLUE, f"[{label}]")

    @staticmethod
    def end(
        label: str,
        status: InstallerResult,
        message: Optional[str] = None,
    ):
        """Log the end of a given action."""
        log_message = f"[{label}]"
        if message:
            log_message += f": {message}"

        if status == InstallerResult.SUCCESS:
            InstallerLogger._log("SUCCESS", Fore.GREEN, log_message)
        elif status == InstallerResult.SKIPPED:
            InstallerLogger._log("SKIP", Fore.MAGENTA, log_message)
        else:  # FAILURE
            InstallerLogger._log("FAIL", Fore.RED, log_message, file=sys.stderr)

    @staticmethod
    def _timestamp() -> str:
        return datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    @staticmethod
    def info(message: str):
        """Log a simple info message."""
        InstallerLogger._log(None, "", message)

    @staticmethod
    def success(message: str):
        """Log a success message."""
        InstallerLogger._log("SUCCESS", Fore.GREEN, message)

    @staticmethod
    def warning(message: str):
        """Log a simple warning message."""
        InstallerLogger._log("WARNING", Fore.YELLOW, message, file=sys.stderr)

    @staticmethod
    def error(message: str):
        """Log a simple error message."""
        InstallerLogger._log("ERROR", Fore.RED, message, file=sys.stderr)

    @staticmethod
    def debug(message: str):
        """Log a debug message - only shown when debug is enabled."""
        if InstallerLogger._debug_enabled:
            InstallerLogger._log("DEBUG", Fore.CYAN, message)
