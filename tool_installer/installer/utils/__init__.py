#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""
Utility helpers in roughly three categories:

1. Logging and the error taxonomy shared by every installer step
2. Fetching and verifying source artifacts
3. Archive extraction and executable discovery
"""

from .logger_utils import InstallerLogger

from .exceptions import (
    FatalEnvironmentError,
    FatalExecutionError,
    FatalInputError,
    ToolInstallerError,
)

__all__ = [
    "InstallerLogger",
    "FatalEnvironmentError",
    "FatalExecutionError",
    "FatalInputError",
    "ToolInstallerError",
]
