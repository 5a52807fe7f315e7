#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Test framework infrastructure for the tool installer."""

import io
import os
import stat
import sys
import tarfile
import tempfile
import unittest
import zipfile
from typing import Any, Dict, List, Optional

# Add the project root directory to the Python path
sys.path.insert(
    0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "..", ".."))
)

from tool_installer.tool_common import UserInterfaceMode
from tool_installer.installer.configs.constants.enums import SourceMode
from tool_installer.installer.core.install_context import Artifact
from tool_installer.installer.core.lifecycle import InstallLifecycle
from tool_installer.installer.platforms.linux import LinuxInstaller
from tool_installer.installer.ui.shared.installer_ui import InstallerUI
from tool_installer.installer.utils.logger_utils import InstallerLogger


class MockUI(InstallerUI):
    """Scripted UI: answers come from a prompt -> reply map, else the default."""

    def __init__(self, responses: Dict[str, Any] = None, non_interactive: bool = False):
        super().__init__(UserInterfaceMode.InteractionInput, non_interactive)
        self.responses = responses or {}
        self.called_methods = []

    def ask_yes_no(self, message: str, default: bool = False) -> bool:
        self.called_methods.append(("ask_yes_no", message, default))
        return self.responses.get(message, default)

    def ask_string(self, prompt: str, default: Optional[str] = None) -> str:
        self.called_methods.append(("ask_string", prompt, default))
        return self.responses.get(prompt, default if default is not None else "")

    def choose_one(self, prompt: str, choices) -> str:
        self.called_methods.append(("choose_one", prompt, choices))
        if prompt in self.responses:
            return self.responses[prompt]
        return next((tag for tag, _desc, is_default in choices if is_default), choices[0][0])

    def display_message(self, message: str):
        self.called_methods.append(("display_message", message))

    def prompts_asked(self) -> List[str]:
        return [call[1] for call in self.called_methods if call[0] != "display_message"]


class MockPlatform(LinuxInstaller):
    """LinuxInstaller whose commands are recorded instead of run.

    Package, package-name and service sequences are the real LinuxInstaller
    ones; only run_process and the download tool are replaced.
    """

    def __init__(self, ui: MockUI = None, debug: bool = False):
        super().__init__(ui or MockUI(), debug)
        self.run_process_results = {}
        self.executed_commands = []
        self.enabled_services = []
        self.downloads = []
        self.privileged = True

    def run_process(self, command, stderr=True):
        cmd_str = " ".join(command) if isinstance(command, list) else command
        self.executed_commands.append(cmd_str)
        if cmd_str in self.run_process_results:
            return self.run_process_results[cmd_str]
        return (0, [])

    def set_command_result(self, command: str, return_code: int, output: list):
        """Set expected result for a specific command."""
        self.run_process_results[command] = (return_code, output)

    def download_with_tool(self, url: str, out_file: str) -> None:
        self.downloads.append((url, out_file))
        with open(out_file, "wb") as f:
            f.write(b"downloaded")

    def enable_service(self, service_name: str) -> None:
        super().enable_service(service_name)
        self.enabled_services.append(service_name)

    def is_privileged(self) -> bool:
        return self.privileged


class BaseInstallerTest(unittest.TestCase):
    """Temp directory layout plus a lifecycle logging into it."""

    def setUp(self):
        InstallerLogger.reset()
        InstallerLogger.set_console_output(False)
        self.temp_dir = tempfile.TemporaryDirectory()
        self.root = self.temp_dir.name
        self.bin_dir = self.make_dir("bin")
        self.opt_dir = self.make_dir("opt")
        self.src_dir = self.make_dir("src")
        self.unit_dir = os.path.join(self.root, "systemd")
        self.log_file = os.path.join(self.root, "tool_installer.log")
        self.fail_marker = os.path.join(self.root, "tool_installer_fail.marker")
        self.mock_ui = MockUI()
        self.mock_platform = MockPlatform(self.mock_ui)
        self.lifecycle = InstallLifecycle(self.log_file, self.fail_marker, show_banners=False)
        self.lifecycle.begin()

    def tearDown(self):
        InstallerLogger.reset()
        self.temp_dir.cleanup()

    def make_dir(self, name: str) -> str:
        path = os.path.join(self.root, name)
        os.makedirs(path, exist_ok=True)
        return path

    def make_file(self, name: str, content: bytes = b"#!/bin/sh\necho hi\n", mode: int = 0o644) -> str:
        path = os.path.join(self.src_dir, name)
        with open(path, "wb") as f:
            f.write(content)
        os.chmod(path, mode)
        return path

    def make_tarball(self, name: str, members: Dict[str, int]) -> str:
        """members maps archive path -> file mode."""
        path = os.path.join(self.src_dir, name)
        with tarfile.open(path, "w:gz") as tar:
            for member, mode in members.items():
                data = b"#!/bin/sh\necho hi\n"
                info = tarfile.TarInfo(member)
                info.size = len(data)
                info.mode = mode
                tar.addfile(info, io.BytesIO(data))
        return path

    def make_zip(self, name: str, members: Dict[str, int]) -> str:
        path = os.path.join(self.src_dir, name)
        with zipfile.ZipFile(path, "w") as zf:
            for member, mode in members.items():
                info = zipfile.ZipInfo(member)
                info.external_attr = (stat.S_IFREG | mode) << 16
                zf.writestr(info, b"#!/bin/sh\necho hi\n")
        return path

    def artifact(self, path: str) -> Artifact:
        return Artifact(path=path, source_mode=SourceMode.LOCAL)

    def log_text(self) -> str:
        with open(self.log_file, encoding="utf-8") as f:
            return f.read()
