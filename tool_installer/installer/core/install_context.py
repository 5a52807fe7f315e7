#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

import os
from dataclasses import dataclass
from typing import Optional

from tool_installer.tool_constants import DEFAULT_BIN_DIR, DEFAULT_UNIT_DIR
from tool_installer.installer.configs.constants.enums import ArtifactKind, SourceMode


@dataclass(frozen=True)
class Artifact:
    """A fetched source file. Immutable once fetched."""

    path: str
    source_mode: SourceMode = SourceMode.LOCAL
    url: Optional[str] = None
    downloaded: bool = False

    @property
    def basename(self) -> str:
        return os.path.basename(self.path)


@dataclass
class InstallResult:
    """Outcome of one installation strategy. Produced once per run, never persisted."""

    install_base: str
    tool_name: str
    kind: ArtifactKind
    installed_executable: Optional[str] = None
    install_dir: Optional[str] = None
    package_name: Optional[str] = None

    def has_executable(self) -> bool:
        return bool(self.installed_executable) and os.access(self.installed_executable, os.X_OK)


@dataclass
class InstallContext:
    """Installation store for user choices gathered from arguments and prompts."""

    source_mode: Optional[SourceMode] = None
    url: Optional[str] = None
    local_path: Optional[str] = None

    tool_name: Optional[str] = None
    sha256: Optional[str] = None
    install_base: Optional[str] = None

    bin_dir: str = DEFAULT_BIN_DIR
    unit_dir: str = DEFAULT_UNIT_DIR
    log_dir: Optional[str] = None

    # None means "ask"
    run_now: Optional[bool] = None
    create_service: Optional[bool] = None
    service_name: Optional[str] = None

    non_interactive: bool = False

    @classmethod
    def from_args(cls, parsed_args) -> "InstallContext":
        """Seed the context from parsed command-line arguments."""
        source_mode = None
        if parsed_args.url:
            source_mode = SourceMode.URL
        elif parsed_args.local_file:
            source_mode = SourceMode.LOCAL

        return cls(
            source_mode=source_mode,
            url=parsed_args.url or None,
            local_path=parsed_args.local_file or None,
            tool_name=parsed_args.tool_name or None,
            sha256=parsed_args.sha256 or None,
            install_base=parsed_args.install_base or None,
            bin_dir=parsed_args.bin_dir,
            unit_dir=parsed_args.unit_dir,
            log_dir=os.path.dirname(os.path.abspath(parsed_args.log_file)),
            run_now=parsed_args.run_now,
            create_service=parsed_args.create_service,
            service_name=parsed_args.service_name or None,
            non_interactive=parsed_args.non_interactive,
        )
