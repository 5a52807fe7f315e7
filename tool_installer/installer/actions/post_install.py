#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Optional steps after installation: a one-shot background launch and systemd
service registration.
"""

import os
import subprocess
import time
from typing import Optional

from tool_installer.installer.configs.constants.constants import (
    RUN_ONCE_OUTPUT_SUFFIX,
    RUN_ONCE_SETTLE_SEC,
    SERVICE_DESCRIPTION_DEFAULT,
    SERVICE_FILE_SUFFIX,
    SERVICE_UNIT_TEMPLATE,
)
from tool_installer.installer.core.install_context import InstallResult
from tool_installer.installer.utils.exceptions import FatalExecutionError
from tool_installer.installer.utils.file_utils import ensure_directory
from tool_installer.installer.utils.logger_utils import InstallerLogger


def run_once(executable: str, tool_name: str, output_dir: str, lifecycle) -> Optional[str]:
    """Launch executable detached from this process (nohup-style).

    stdout and stderr go to output_dir/<tool_name>.out. The child is never
    waited on.

    Returns:
        The output file path, or None if the launch failed
    """
    output_file = os.path.join(output_dir, f"{tool_name}{RUN_ONCE_OUTPUT_SUFFIX}")
    lifecycle.record_event(f"Launching {executable} in background (nohup)...")
    try:
        with open(output_file, "ab") as out:
            subprocess.Popen(
                [executable],
                stdin=subprocess.DEVNULL,
                stdout=out,
                stderr=subprocess.STDOUT,
                start_new_session=True,
                close_fds=True,
            )
    except OSError as e:
        InstallerLogger.warning(f"Could not launch {executable}: {e}")
        return None
    time.sleep(RUN_ONCE_SETTLE_SEC)
    lifecycle.record_event(f"Process launched; stdout/stderr -> {output_file}")
    return output_file


def resolve_service_exec_path(result: InstallResult, bin_dir: str, ui=None) -> str:
    """Pick ExecStart: the installed executable, else the bin_dir link, else ask."""
    if result.has_executable():
        return result.installed_executable

    linked = os.path.join(bin_dir, result.tool_name)
    if os.path.isfile(linked) and os.access(linked, os.X_OK):
        return linked

    exec_path = ui.ask_service_exec_path() if (ui is not None) and not ui.non_interactive else ""
    if not exec_path or not os.path.isabs(exec_path):
        raise FatalExecutionError(
            f"No executable available for the service (got '{exec_path}'); an absolute path is required."
        )
    return exec_path


def render_service_unit(exec_path: str, description: str = SERVICE_DESCRIPTION_DEFAULT) -> str:
    return SERVICE_UNIT_TEMPLATE.format(description=description, exec_path=exec_path)


def create_systemd_service(
    service_name: str,
    exec_path: str,
    unit_dir: str,
    platform,
    lifecycle,
    description: str = SERVICE_DESCRIPTION_DEFAULT,
) -> str:
    """Write <unit_dir>/<service_name>.service, reload, and enable+start it.

    Returns:
        The unit file path
    """
    ensure_directory(unit_dir)
    unit_file = os.path.join(unit_dir, f"{service_name}{SERVICE_FILE_SUFFIX}")
    lifecycle.record_event(f"Creating systemd service {service_name} -> ExecStart={exec_path}")
    try:
        with open(unit_file, "w", encoding="utf-8") as f:
            f.write(render_service_unit(exec_path, description))
    except OSError as e:
        raise FatalExecutionError(f"Failed to write {unit_file}: {e}") from e

    platform.enable_service(service_name)
    lifecycle.record_event(f"Service {service_name} enabled and started.")
    return unit_file
