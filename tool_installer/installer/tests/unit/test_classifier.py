#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Unit tests for artifact classification."""

import os
import sys
import unittest
from unittest.mock import MagicMock, patch

# Add the project root directory to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "..", "..")))

import magic

from tool_installer.installer.configs.constants.enums import ArtifactKind
from tool_installer.installer.core.classifier import (
    classify_artifact,
    detect_mime_type,
    kind_from_extension,
    kind_from_mime,
)


class TestKindFromExtension(unittest.TestCase):
    def test_known_extensions(self):
        self.assertEqual(kind_from_extension("/tmp/tool_1.0_amd64.deb"), ArtifactKind.PACKAGE)
        self.assertEqual(kind_from_extension("/tmp/tool.tar.gz"), ArtifactKind.TARBALL)
        self.assertEqual(kind_from_extension("/tmp/tool.tgz"), ArtifactKind.TARBALL)
        self.assertEqual(kind_from_extension("/tmp/tool.zip"), ArtifactKind.ZIP)

    def test_unknown_extension(self):
        self.assertIsNone(kind_from_extension("/tmp/tool.tar.xz"))
        self.assertIsNone(kind_from_extension("/tmp/tool"))


class TestKindFromMime(unittest.TestCase):
    def test_known_types(self):
        self.assertEqual(kind_from_mime("application/x-debian-package"), ArtifactKind.PACKAGE)
        self.assertEqual(kind_from_mime("application/gzip"), ArtifactKind.TARBALL)
        self.assertEqual(kind_from_mime("application/x-gzip"), ArtifactKind.TARBALL)
        self.assertEqual(kind_from_mime("application/zip"), ArtifactKind.ZIP)

    def test_unknown_type_is_single_file(self):
        self.assertEqual(kind_from_mime("application/x-executable"), ArtifactKind.SINGLE_FILE)
        self.assertEqual(kind_from_mime(""), ArtifactKind.SINGLE_FILE)


class TestClassifyArtifact(unittest.TestCase):
    def test_extension_wins_over_mime(self):
        detector = MagicMock(return_value="application/zip")
        self.assertEqual(classify_artifact("/tmp/tool.deb", mime_detector=detector), ArtifactKind.PACKAGE)
        detector.assert_not_called()

    def test_mime_fallback_without_extension(self):
        detector = MagicMock(return_value="application/zip")
        self.assertEqual(classify_artifact("/tmp/download", mime_detector=detector), ArtifactKind.ZIP)
        detector.assert_called_once_with("/tmp/download")

    def test_unrecognized_is_single_file(self):
        kind = classify_artifact("/tmp/tool.bin", mime_detector=lambda _p: "application/x-elf")
        self.assertEqual(kind, ArtifactKind.SINGLE_FILE)

    def test_decision_recorded_on_lifecycle(self):
        lifecycle = MagicMock()
        classify_artifact("/tmp/blob", lifecycle, mime_detector=lambda _p: "application/gzip")
        events = [c.args[0] for c in lifecycle.record_event.call_args_list]
        self.assertEqual(events, ["Detected MIME type: application/gzip", "Interpreting as: tar"])


class TestDetectMimeType(unittest.TestCase):
    def test_libmagic_result_returned(self):
        with patch("tool_installer.installer.core.classifier.magic.from_file", return_value="application/zip") as ff:
            self.assertEqual(detect_mime_type("/tmp/x"), "application/zip")
        ff.assert_called_once_with("/tmp/x", mime=True)

    def test_failure_reports_octet_stream(self):
        with patch(
            "tool_installer.installer.core.classifier.magic.from_file",
            side_effect=magic.MagicException("no magic"),
        ):
            self.assertEqual(detect_mime_type("/tmp/x"), "application/octet-stream")
        with patch("tool_installer.installer.core.classifier.magic.from_file", side_effect=OSError("gone")):
            self.assertEqual(detect_mime_type("/tmp/x"), "application/octet-stream")


if __name__ == "__main__":
    unittest.main()
