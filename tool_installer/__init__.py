#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Interactive installer for standalone tools distributed as packages, archives or single binaries."""

from tool_installer.tool_constants import TOOL_INSTALLER_VERSION

__version__ = TOOL_INSTALLER_VERSION
