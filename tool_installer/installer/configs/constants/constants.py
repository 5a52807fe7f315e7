#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Centralized constants for artifact classification and service generation.

These constants replace magic strings embedded in helper code to keep the
classifier, strategies and post-install actions consistent.
"""

from tool_installer.installer.configs.constants.enums import ArtifactKind

# Extension rules, checked in order against the end of the artifact path
EXTENSION_KIND_RULES = (
    (".deb", ArtifactKind.PACKAGE),
    (".tar.gz", ArtifactKind.TARBALL),
    (".tgz", ArtifactKind.TARBALL),
    (".zip", ArtifactKind.ZIP),
)

# MIME rules consulted only when no extension matched
MIME_KIND_RULES = (
    ("application/x-debian-package", ArtifactKind.PACKAGE),
    ("application/gzip", ArtifactKind.TARBALL),
    ("application/x-gzip", ArtifactKind.TARBALL),
    ("application/zip", ArtifactKind.ZIP),
)

# Reported when the MIME sniffer cannot identify the file
MIME_TYPE_UNKNOWN = "application/octet-stream"

# Package manager commands
DPKG_INSTALL_CMD = ["dpkg", "-i"]
DPKG_DEB_FIELD_CMD = ["dpkg-deb", "-f"]
APT_UPDATE_CMD = ["apt-get", "update"]
APT_FIX_BROKEN_CMD = ["apt-get", "-f", "install", "-y"]

# Download tools for schemes requests does not handle
CURL_DOWNLOAD_CMD = ["curl", "-L", "--fail", "-o"]
WGET_DOWNLOAD_CMD = ["wget", "-O"]
REQUESTS_URL_SCHEMES = ("http", "https")

# Service manager
SYSTEMCTL_BIN = "systemctl"
SERVICE_FILE_SUFFIX = ".service"
SERVICE_DESCRIPTION_DEFAULT = "Managed by tool_installer"
SERVICE_UNIT_TEMPLATE = """[Unit]
Description={description}
After=network.target

[Service]
Type=simple
ExecStart={exec_path}
Restart=on-failure
User=root

[Install]
WantedBy=multi-user.target
"""

# Background launch of a freshly installed tool
RUN_ONCE_OUTPUT_SUFFIX = ".out"
RUN_ONCE_SETTLE_SEC = 1
