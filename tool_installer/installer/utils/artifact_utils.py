#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Obtain the source artifact (download or local path) and verify its checksum."""

import hashlib
import os
import tempfile
from typing import Optional
from urllib.parse import unquote, urlparse

import requests

from tool_installer.tool_common import DownloadToFile
from tool_installer.tool_constants import DOWNLOAD_DEFAULT_NAME, DOWNLOAD_TEMP_PREFIX
from tool_installer.tool_utils import sanitize_name, sha256sum
from tool_installer.installer.configs.constants.constants import REQUESTS_URL_SCHEMES
from tool_installer.installer.configs.constants.enums import SourceMode
from tool_installer.installer.core.install_context import Artifact
from tool_installer.installer.utils.exceptions import FatalExecutionError, FatalInputError
from tool_installer.installer.utils.logger_utils import InstallerLogger


def download_basename(url: str) -> str:
    """File name for a download: the last URL path segment, made filesystem safe."""
    name = sanitize_name(os.path.basename(unquote(urlparse(url).path)))
    return name if name.strip(".") else DOWNLOAD_DEFAULT_NAME


def make_download_target(url: str, temp_dir: Optional[str] = None) -> str:
    """Path named after the URL's file name inside a fresh private temp directory."""
    download_dir = tempfile.mkdtemp(prefix=DOWNLOAD_TEMP_PREFIX, dir=temp_dir)
    return os.path.join(download_dir, download_basename(url))


def download_file(url: str, out_file: str, platform) -> str:
    """Download url into out_file.

    http(s) goes through requests; anything else (ftp://...) is handed to the
    platform's command-line download tool.
    """
    scheme = urlparse(url).scheme.lower()
    if scheme in REQUESTS_URL_SCHEMES:
        InstallerLogger.info(f"Downloading (requests): {url} -> {out_file}")
        try:
            DownloadToFile(url, out_file)
        except requests.RequestException as e:
            raise FatalExecutionError(f"Download of {url} failed: {e}") from e
        except OSError as e:
            raise FatalExecutionError(f"Could not write {out_file}: {e}") from e
    else:
        platform.download_with_tool(url, out_file)
    InstallerLogger.info(f"Downloaded -> {out_file}")
    return out_file


def fetch_artifact(
    source_mode: SourceMode,
    location: str,
    platform,
    lifecycle=None,
    temp_dir: Optional[str] = None,
) -> Artifact:
    """Return an Artifact for a URL (downloaded to a temp file) or a local path.

    Raises:
        FatalInputError: the local path is not an existing file
        FatalExecutionError: the download failed
    """
    if source_mode == SourceMode.URL:
        if not location:
            raise FatalInputError("No download URL provided.")
        out_file = make_download_target(location, temp_dir)
        if lifecycle is not None:
            lifecycle.record_event(f"Temporary download target: {out_file}")
        download_file(location, out_file, platform)
        return Artifact(path=out_file, source_mode=source_mode, url=location, downloaded=True)

    if not location or not os.path.isfile(location):
        raise FatalInputError(f"Local file not found: {location}")
    return Artifact(path=location, source_mode=SourceMode.LOCAL)


def digest_available() -> bool:
    """False on restricted interpreters whose hashlib does not offer sha256."""
    return "sha256" in hashlib.algorithms_available


def normalize_digest(value: Optional[str]) -> str:
    """Lowercase hex with whitespace trimmed; accepts 'digest  filename' as sha256sum prints it."""
    parts = (value or "").strip().split()
    return parts[0].lower() if parts else ""


def verify_checksum(artifact: Artifact, expected: Optional[str], lifecycle=None) -> bool:
    """Compare the artifact's SHA-256 digest to expected.

    Returns:
        True if verified, False if verification was skipped (no digest given,
        or no sha256 implementation on this host)

    Raises:
        FatalInputError: the digests differ
    """
    expected_digest = normalize_digest(expected)
    if not expected_digest:
        return False

    if not digest_available():
        InstallerLogger.warning("sha256 is not available to verify. Skipping verification.")
        return False

    if lifecycle is not None:
        lifecycle.record_event("Verifying checksum...")
    actual = sha256sum(artifact.path)
    if actual != expected_digest:
        raise FatalInputError(
            f"Checksum mismatch for {artifact.path} (expected {expected_digest}, got {actual})."
        )
    if lifecycle is not None:
        lifecycle.record_event("Checksum OK.")
    return True
