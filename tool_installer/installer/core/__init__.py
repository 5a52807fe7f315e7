#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Core installer state: run context, artifact classification, and process lifecycle."""

from .classifier import classify_artifact, detect_mime_type
from .install_context import Artifact, InstallContext, InstallResult
from .lifecycle import InstallLifecycle

__all__ = [
    "Artifact",
    "InstallContext",
    "InstallLifecycle",
    "InstallResult",
    "classify_artifact",
    "detect_mime_type",
]
