#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Custom exceptions for the tool installer.

Each fatal error carries the process exit code the installer terminates with.
"""

from typing import List, Optional


class ToolInstallerError(Exception):
    """Base class for errors that abort an installer run."""

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code if exit_code else 1


class FatalEnvironmentError(ToolInstallerError):
    """Raised when the host cannot run the installer (privileges, log location)."""

    pass


class FatalInputError(ToolInstallerError):
    """Raised when user-provided input is unusable (missing file, checksum mismatch)."""

    pass


class FatalExecutionError(ToolInstallerError):
    """Raised when an underlying command or file operation fails."""

    def __init__(
        self,
        message: str,
        exit_code: int = 1,
        command: Optional[List[str]] = None,
        output: Optional[List[str]] = None,
    ):
        super().__init__(message, exit_code)
        self.command = command
        self.output = output or []
