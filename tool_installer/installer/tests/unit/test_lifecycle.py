#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Unit tests for the begin/record/fail/succeed lifecycle."""

import io
import os
import stat
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

# Add the project root directory to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "..", "..")))

from tool_installer.tool_constants import FAIL_TOKEN
from tool_installer.installer.core.lifecycle import InstallLifecycle
from tool_installer.installer.utils.exceptions import FatalEnvironmentError
from tool_installer.installer.utils.logger_utils import InstallerLogger


class TestInstallLifecycle(unittest.TestCase):
    def setUp(self):
        InstallerLogger.reset()
        InstallerLogger.set_console_output(False)
        self.temp_dir = tempfile.TemporaryDirectory()
        self.log_file = os.path.join(self.temp_dir.name, "tool_installer.log")
        self.fail_marker = os.path.join(self.temp_dir.name, "tool_installer_fail.marker")
        self.lifecycle = InstallLifecycle(self.log_file, self.fail_marker, show_banners=False)

    def tearDown(self):
        InstallerLogger.reset()
        self.temp_dir.cleanup()

    def _log(self) -> str:
        with open(self.log_file, encoding="utf-8") as f:
            return f.read()

    def test_begin_creates_world_readable_log(self):
        self.lifecycle.begin()
        self.assertTrue(os.path.isfile(self.log_file))
        self.assertEqual(stat.S_IMODE(os.stat(self.log_file).st_mode), 0o644)
        self.assertEqual(InstallerLogger.get_log_file(), self.log_file)

    def test_begin_keeps_existing_log_mode(self):
        with open(self.log_file, "w") as f:
            f.write("old\n")
        os.chmod(self.log_file, 0o600)
        self.lifecycle.begin()
        self.assertEqual(stat.S_IMODE(os.stat(self.log_file).st_mode), 0o600)
        self.assertTrue(self._log().startswith("old\n"))

    def test_unwritable_log_location_is_fatal(self):
        lifecycle = InstallLifecycle(
            os.path.join(self.temp_dir.name, "missing", "dir", "x.log"), self.fail_marker, show_banners=False
        )
        with self.assertRaises(FatalEnvironmentError):
            lifecycle.begin()

    def test_record_event_reaches_log(self):
        self.lifecycle.begin()
        self.lifecycle.record_event("Checksum OK.")
        self.assertIn("0x: Checksum OK.", self._log())

    def test_fail_writes_marker_and_returns_code(self):
        self.lifecycle.begin()
        code = self.lifecycle.fail(3, "boom")
        self.assertEqual(code, 3)
        with open(self.fail_marker) as f:
            self.assertIn(FAIL_TOKEN, f.read())
        self.assertIn("0x: ERROR - boom", self._log())
        self.assertTrue(self.lifecycle.last_run_failed())

    def test_fail_with_zero_code_still_fails(self):
        self.assertEqual(self.lifecycle.fail(0), 1)
        self.assertTrue(os.path.isfile(self.fail_marker))

    def test_fail_tolerates_unwritable_marker(self):
        lifecycle = InstallLifecycle(
            self.log_file, os.path.join(self.temp_dir.name, "nope", "marker"), show_banners=False
        )
        lifecycle.begin()
        self.assertEqual(lifecycle.fail(2, "boom"), 2)
        self.assertIn("Could not write fail marker", self._log())

    def test_succeed_removes_marker(self):
        with open(self.fail_marker, "w") as f:
            f.write(FAIL_TOKEN)
        self.lifecycle.begin()
        self.assertEqual(self.lifecycle.succeed(), 0)
        self.assertFalse(os.path.exists(self.fail_marker))
        self.assertIn("0x: SUCCESS - Installer finished.", self._log())

    def test_succeed_tolerates_unremovable_marker(self):
        with open(self.fail_marker, "w") as f:
            f.write(FAIL_TOKEN)
        self.lifecycle.begin()
        with patch("tool_installer.installer.core.lifecycle.os.remove", side_effect=PermissionError("read-only")):
            self.assertEqual(self.lifecycle.succeed(), 0)
        self.assertIn("Could not remove fail marker", self._log())

    def test_succeed_without_marker(self):
        self.lifecycle.begin()
        self.assertEqual(self.lifecycle.succeed(), 0)
        self.assertFalse(self.lifecycle.last_run_failed())

    def test_banners(self):
        lifecycle = InstallLifecycle(self.log_file, self.fail_marker)
        out = io.StringIO()
        with redirect_stdout(out):
            lifecycle.begin()
            lifecycle.succeed()
        text = out.getvalue()
        self.assertIn("0x TOOL INSTALLER\n", text)
        self.assertIn(f"0x: Logging -> {self.log_file}", text)
        self.assertIn("0x TOOL INSTALLER (END)", text)


if __name__ == "__main__":
    unittest.main()
