#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Mock tests for run-once launches and systemd service creation."""

import os
import sys
import unittest
from unittest.mock import patch

# Add the project root directory to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "..", "..")))

from tool_installer.installer.actions.post_install import (
    create_systemd_service,
    render_service_unit,
    resolve_service_exec_path,
    run_once,
)
from tool_installer.installer.configs.constants.enums import ArtifactKind
from tool_installer.installer.core.install_context import InstallResult
from tool_installer.installer.utils.exceptions import FatalExecutionError
from tool_installer.installer.tests.mock.test_framework import BaseInstallerTest, MockUI


class TestServiceUnit(unittest.TestCase):
    def test_unit_contents(self):
        unit = render_service_unit("/opt/tool/bin/run")
        self.assertIn("ExecStart=/opt/tool/bin/run\n", unit)
        self.assertIn("After=network.target", unit)
        self.assertIn("Restart=on-failure", unit)
        self.assertIn("User=root", unit)
        self.assertIn("WantedBy=multi-user.target", unit)
        self.assertTrue(unit.startswith("[Unit]\n"))


class TestCreateService(BaseInstallerTest):
    def test_unit_written_and_enabled(self):
        unit_file = create_systemd_service(
            "mytool", "/usr/local/bin/mytool", self.unit_dir, self.mock_platform, self.lifecycle
        )
        self.assertEqual(unit_file, os.path.join(self.unit_dir, "mytool.service"))
        with open(unit_file, encoding="utf-8") as f:
            self.assertIn("ExecStart=/usr/local/bin/mytool", f.read())
        self.assertEqual(
            self.mock_platform.executed_commands,
            ["systemctl daemon-reload", "systemctl enable --now mytool.service"],
        )
        self.assertEqual(self.mock_platform.enabled_services, ["mytool"])

    def test_enable_failure_is_fatal(self):
        self.mock_platform.set_command_result("systemctl enable --now bad.service", 1, ["Failed"])
        with self.assertRaises(FatalExecutionError):
            create_systemd_service("bad", "/usr/bin/true", self.unit_dir, self.mock_platform, self.lifecycle)
        self.assertTrue(os.path.isfile(os.path.join(self.unit_dir, "bad.service")))


class TestResolveServiceExecPath(BaseInstallerTest):
    def _result(self, executable=None):
        return InstallResult(self.opt_dir, "mytool", ArtifactKind.TARBALL, installed_executable=executable)

    def test_prefers_installed_executable(self):
        exe = self.make_file("run", mode=0o755)
        self.assertEqual(resolve_service_exec_path(self._result(exe), self.bin_dir, self.mock_ui), exe)

    def test_falls_back_to_bin_dir_entry(self):
        exe = self.make_file("mytool", mode=0o755)
        os.symlink(exe, os.path.join(self.bin_dir, "mytool"))
        self.assertEqual(
            resolve_service_exec_path(self._result(), self.bin_dir, self.mock_ui),
            os.path.join(self.bin_dir, "mytool"),
        )

    def test_prompts_when_nothing_known(self):
        ui = MockUI({"Enter full path to executable for service (absolute)": "/usr/bin/mytool"})
        self.assertEqual(resolve_service_exec_path(self._result(), self.bin_dir, ui), "/usr/bin/mytool")

    def test_relative_answer_is_fatal(self):
        ui = MockUI({"Enter full path to executable for service (absolute)": "mytool"})
        with self.assertRaises(FatalExecutionError):
            resolve_service_exec_path(self._result(), self.bin_dir, ui)

    def test_non_interactive_without_executable_is_fatal(self):
        with self.assertRaises(FatalExecutionError):
            resolve_service_exec_path(self._result(), self.bin_dir, MockUI(non_interactive=True))


class TestRunOnce(BaseInstallerTest):
    def test_detached_launch_writes_output_file(self):
        exe = self.make_file("mytool", mode=0o755)
        with patch("tool_installer.installer.actions.post_install.subprocess.Popen") as popen, patch(
            "tool_installer.installer.actions.post_install.time.sleep"
        ):
            out = run_once(exe, "mytool", self.root, self.lifecycle)
        self.assertEqual(out, os.path.join(self.root, "mytool.out"))
        self.assertTrue(os.path.isfile(out))
        args, kwargs = popen.call_args
        self.assertEqual(args[0], [exe])
        self.assertTrue(kwargs["start_new_session"])

    def test_launch_failure_is_not_fatal(self):
        with patch(
            "tool_installer.installer.actions.post_install.subprocess.Popen",
            side_effect=OSError("exec format error"),
        ):
            self.assertIsNone(run_once("/nonexistent", "ghost", self.root, self.lifecycle))
        self.assertIn("Could not launch", self.log_text())


if __name__ == "__main__":
    unittest.main()
