#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Platform-specific installer implementations."""

import platform

from tool_installer.tool_constants import PLATFORM_LINUX

from .base import BaseInstaller
from .linux import LinuxInstaller


def get_platform_installer(ui=None, debug: bool = False) -> BaseInstaller:
    """Determine the current host platform and return the matching installer."""

    platform_name = platform.system()

    if platform_name == PLATFORM_LINUX:
        return LinuxInstaller(ui, debug)
    else:
        raise NotImplementedError(f"Platform '{platform_name}' is not supported")


__all__ = [
    "BaseInstaller",
    "LinuxInstaller",
    "get_platform_installer",
]
