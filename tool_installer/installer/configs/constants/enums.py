#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.


from enum import Enum, auto


# Used primarily for getting status from discrete steps during the installer and subsequently logging
class InstallerResult(Enum):
    """Return status for an installation step."""

    SUCCESS = auto()
    FAILURE = auto()
    SKIPPED = auto()


# Closed set of artifact kinds; each one selects exactly one installation strategy
class ArtifactKind(Enum):
    PACKAGE = "deb"
    TARBALL = "tar"
    ZIP = "zip"
    SINGLE_FILE = "single"


# Where the artifact comes from
class SourceMode(Enum):
    URL = "1"
    LOCAL = "2"


# Installation location menu choices
class InstallBaseChoice(Enum):
    BIN_DIR = "1"
    OPT = "2"
    CUSTOM = "3"
