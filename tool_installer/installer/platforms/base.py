#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Base installer class for platform-specific tool installers."""

import abc
import os
import platform
import subprocess
from typing import List, Optional, Tuple

from tool_installer.tool_utils import flatten, get_iterable
from tool_installer.installer.utils.exceptions import FatalExecutionError
from tool_installer.installer.utils.logger_utils import InstallerLogger


class BaseInstaller(abc.ABC):
    """Abstract base class for the OS collaborators the installer drives.

    Subclasses wrap the package manager, the download tools, and the service
    manager. Everything else (classification, extraction, file placement) is
    platform independent and lives in the actions package.
    """

    def __init__(self, ui=None, debug: bool = False):
        """Initialize the base installer.

        Args:
            ui: User interface implementation for user interactions
            debug: Enable debug output
        """
        self.ui = ui
        self.debug = debug
        self.platform = platform.system().lower()

    def run_process(self, command: List[str], stderr: bool = True) -> Tuple[int, List[str]]:
        """Run a system process and return (return code, output lines).

        stderr lines are appended after stdout unless stderr is False. A
        missing program reads as return code 127.
        """
        flat_command = list(flatten(get_iterable(command)))
        try:
            process = subprocess.run(
                flat_command,
                capture_output=True,
                check=False,
                text=True,
                errors="ignore",
            )
        except FileNotFoundError:
            retcode, output = 127, [f"Command {' '.join(flat_command)} not found or unable to execute"]
        except OSError as e:
            retcode, output = 1, [f"Error executing command {' '.join(flat_command)}: {e}"]
        else:
            retcode = process.returncode
            output = process.stdout.splitlines() if process.stdout else []
            if stderr and process.stderr:
                output.extend(process.stderr.splitlines())

        if self.debug:
            InstallerLogger.debug(
                f"Command {' '.join(flat_command)} returned {retcode}: {output}"
            )

        return retcode, output

    def run_checked(self, command: List[str], description: Optional[str] = None) -> List[str]:
        """Run a command and raise FatalExecutionError carrying its exit code on failure."""
        err, out = self.run_process(command)
        if err != 0:
            what = description or " ".join(command)
            if out:
                InstallerLogger.error("\n".join(out))
            raise FatalExecutionError(
                f"{what} failed (exit code {err})",
                exit_code=err,
                command=command,
                output=out,
            )
        return out

    @abc.abstractmethod
    def install_package_file(self, package_file: str) -> None:
        """Install a local package file with the system package manager.

        Must attempt one repair pass before treating a failure as fatal.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def package_name(self, package_file: str) -> Optional[str]:
        """Return the name a package file registers itself under, if readable."""
        raise NotImplementedError

    @abc.abstractmethod
    def download_with_tool(self, url: str, out_file: str) -> None:
        """Download url to out_file with an external tool (curl, wget, ...)."""
        raise NotImplementedError

    @abc.abstractmethod
    def enable_service(self, service_name: str) -> None:
        """Reload unit definitions, then enable and start service_name immediately."""
        raise NotImplementedError

    def is_privileged(self) -> bool:
        return os.geteuid() == 0
