#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Linux (Debian/Kali) installer implementation."""

import os
from typing import Optional

from tool_installer.tool_utils import which
from tool_installer.installer.configs.constants.constants import (
    APT_FIX_BROKEN_CMD,
    APT_UPDATE_CMD,
    CURL_DOWNLOAD_CMD,
    DPKG_DEB_FIELD_CMD,
    DPKG_INSTALL_CMD,
    SERVICE_FILE_SUFFIX,
    SYSTEMCTL_BIN,
    WGET_DOWNLOAD_CMD,
)
from tool_installer.installer.utils.exceptions import FatalExecutionError
from tool_installer.installer.utils.logger_utils import InstallerLogger

from .base import BaseInstaller


class LinuxInstaller(BaseInstaller):
    """dpkg/apt, curl/wget and systemd backed installer."""

    def __init__(self, ui=None, debug: bool = False):
        super().__init__(ui, debug)
        if which("dpkg"):
            os.environ["DEBIAN_FRONTEND"] = "noninteractive"

    def install_package_file(self, package_file: str) -> None:
        """dpkg -i, falling back to a single apt-get -f install repair pass."""
        InstallerLogger.info(f"Installing .deb package: {package_file}")
        err, out = self.run_process(DPKG_INSTALL_CMD + [package_file])
        if err != 0:
            if self.debug and out:
                InstallerLogger.debug("\n".join(out))
            InstallerLogger.info("dpkg reported issues, attempting apt-get -f install -y")
            self.run_checked(APT_UPDATE_CMD, "apt-get update")
            self.run_checked(APT_FIX_BROKEN_CMD, "apt-get -f install")
        InstallerLogger.info(".deb install complete.")

    def package_name(self, package_file: str) -> Optional[str]:
        err, out = self.run_process(DPKG_DEB_FIELD_CMD + [package_file, "Package"], stderr=False)
        if err == 0 and out and out[0].strip():
            return out[0].strip()
        return None

    def download_with_tool(self, url: str, out_file: str) -> None:
        if which("curl"):
            InstallerLogger.info(f"Downloading (curl): {url} -> {out_file}")
            self.run_checked(CURL_DOWNLOAD_CMD + [out_file, url], f"Download of {url}")
        elif which("wget"):
            InstallerLogger.info(f"Downloading (wget): {url} -> {out_file}")
            self.run_checked(WGET_DOWNLOAD_CMD + [out_file, url], f"Download of {url}")
        else:
            raise FatalExecutionError("Neither curl nor wget is installed.")

    def enable_service(self, service_name: str) -> None:
        self.run_checked([SYSTEMCTL_BIN, "daemon-reload"])
        self.run_checked([SYSTEMCTL_BIN, "enable", "--now", f"{service_name}{SERVICE_FILE_SUFFIX}"])
