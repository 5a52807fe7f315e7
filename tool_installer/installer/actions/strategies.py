#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Installation strategies, one per ArtifactKind, and the dispatch between them.

Each strategy turns a fetched artifact into an InstallResult. Failures raise
FatalExecutionError and nothing already written is rolled back.
"""

import os
from typing import Callable, Dict

from tool_installer.installer.configs.constants.enums import ArtifactKind
from tool_installer.installer.core.install_context import Artifact, InstallResult
from tool_installer.installer.utils.file_utils import (
    copy_file,
    extract_tarball,
    extract_zip,
    find_first_executable,
    link_into_bin_dir,
    make_executable,
)
from tool_installer.installer.utils.logger_utils import InstallerLogger


def _same_dir(a: str, b: str) -> bool:
    return os.path.realpath(a) == os.path.realpath(b)


def install_package(artifact, install_base, tool_name, lifecycle, platform, bin_dir) -> InstallResult:
    """Hand a .deb to the system package manager.

    The package's main executable is not discovered; the result's executable
    path stays empty and the tool is expected to be invoked by its package name.
    """
    platform.install_package_file(artifact.path)
    lifecycle.record_event(f".deb install finished for {artifact.path}")

    package_name = platform.package_name(artifact.path)
    if package_name:
        lifecycle.record_event(
            f"Package registered as '{package_name}'; run it by its installed command name."
        )
    else:
        InstallerLogger.warning(f"Could not read the package name from {artifact.path}")

    return InstallResult(
        install_base=install_base,
        tool_name=tool_name,
        kind=ArtifactKind.PACKAGE,
        package_name=package_name,
    )


def _install_archive(
    extractor: Callable[[str, str], str],
    kind: ArtifactKind,
    artifact,
    install_base,
    tool_name,
    lifecycle,
    bin_dir,
) -> InstallResult:
    dest = os.path.join(install_base, tool_name)
    extractor(artifact.path, dest)

    found_exec = find_first_executable(dest)
    if found_exec:
        lifecycle.record_event(f"Detected executable inside archive: {found_exec}")
        if _same_dir(os.path.join(bin_dir, tool_name), dest):
            # bin_dir/tool_name is the extracted tree itself
            InstallerLogger.warning(
                f"Not linking {found_exec}: {dest} already occupies {bin_dir}/{tool_name}. Run it by its full path."
            )
        else:
            link_into_bin_dir(found_exec, bin_dir, tool_name)
    else:
        InstallerLogger.warning(
            f"No executable detected automatically inside archive. Inspect {dest} and run/install manually."
        )

    return InstallResult(
        install_base=install_base,
        tool_name=tool_name,
        kind=kind,
        installed_executable=found_exec,
        install_dir=dest,
    )


def install_tarball(artifact, install_base, tool_name, lifecycle, platform, bin_dir) -> InstallResult:
    return _install_archive(
        extract_tarball, ArtifactKind.TARBALL, artifact, install_base, tool_name, lifecycle, bin_dir
    )


def install_zip(artifact, install_base, tool_name, lifecycle, platform, bin_dir) -> InstallResult:
    return _install_archive(
        extract_zip, ArtifactKind.ZIP, artifact, install_base, tool_name, lifecycle, bin_dir
    )


def install_single_file(artifact, install_base, tool_name, lifecycle, platform, bin_dir) -> InstallResult:
    """Copy one file into place and mark it executable.

    Into bin_dir directly under its original basename when that is the install
    base; otherwise into install_base/tool_name/ with a bin_dir symlink named
    after the tool.
    """
    if _same_dir(install_base, bin_dir):
        dest_dir = bin_dir
    else:
        dest_dir = os.path.join(install_base, tool_name)

    dest_path = copy_file(artifact.path, dest_dir)
    make_executable(dest_path)
    lifecycle.record_event(f"Copied {artifact.path} -> {dest_path} and set +x")

    if not _same_dir(dest_dir, bin_dir):
        link_into_bin_dir(dest_path, bin_dir, tool_name)

    return InstallResult(
        install_base=install_base,
        tool_name=tool_name,
        kind=ArtifactKind.SINGLE_FILE,
        installed_executable=dest_path,
        install_dir=dest_dir,
    )


STRATEGIES: Dict[ArtifactKind, Callable[..., InstallResult]] = {
    ArtifactKind.PACKAGE: install_package,
    ArtifactKind.TARBALL: install_tarball,
    ArtifactKind.ZIP: install_zip,
    ArtifactKind.SINGLE_FILE: install_single_file,
}


def install_artifact(
    artifact: Artifact,
    kind: ArtifactKind,
    install_base: str,
    tool_name: str,
    lifecycle,
    platform,
    bin_dir: str,
) -> InstallResult:
    """Run the strategy registered for kind and return its InstallResult."""
    strategy = STRATEGIES[kind]
    InstallerLogger.debug(f"Installing {artifact.path} as {kind.value} via {strategy.__name__}")
    return strategy(artifact, install_base, tool_name, lifecycle, platform, bin_dir)
