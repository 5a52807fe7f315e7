#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""
Utilities for archive extraction, single-file placement, and executable discovery.
"""

import os
import shutil
import stat
import tarfile
import zipfile
from typing import Optional

from tool_installer.installer.utils.exceptions import FatalExecutionError
from tool_installer.installer.utils.logger_utils import InstallerLogger


def ensure_directory(path: str) -> str:
    """mkdir -p, turning filesystem errors into FatalExecutionError."""
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise FatalExecutionError(f"Failed to create {path}: {e}") from e
    return path


def extract_tarball(tarball_file: str, dest: str) -> str:
    """Extract a gzip-compressed tarball into dest (created if needed).

    Args:
        tarball_file: Path to the .tar.gz/.tgz file
        dest: Directory to extract into

    Returns:
        dest
    """
    ensure_directory(dest)
    InstallerLogger.info(f"Extracting tar.gz to {dest}")
    try:
        with tarfile.open(tarball_file, "r:gz") as tar:
            if hasattr(tarfile, "data_filter"):
                tar.extractall(path=dest, filter="data")
            else:
                tar.extractall(path=dest)
    except (tarfile.TarError, EOFError, OSError) as e:
        raise FatalExecutionError(f"Failed to extract {tarball_file} to {dest}: {e}") from e
    InstallerLogger.info("Extraction done.")
    return dest


def extract_zip(zip_file: str, dest: str) -> str:
    """Extract a zip archive into dest, overwriting existing files.

    zipfile does not apply the Unix permission bits stored in the archive, so
    they are restored member by member to keep executables executable.
    """
    ensure_directory(dest)
    InstallerLogger.info(f"Unzipping {zip_file} -> {dest}")
    try:
        with zipfile.ZipFile(zip_file) as zf:
            for info in zf.infolist():
                extracted = zf.extract(info, path=dest)
                mode = (info.external_attr >> 16) & 0o777
                if mode and not info.is_dir():
                    os.chmod(extracted, mode)
    except (zipfile.BadZipFile, zipfile.LargeZipFile, EOFError, OSError) as e:
        raise FatalExecutionError(f"Failed to unzip {zip_file} to {dest}: {e}") from e
    InstallerLogger.info("Unzip complete.")
    return dest


def is_owner_executable_file(path: str) -> bool:
    """True for a regular file (not a symlink) with the owner-execute bit set."""
    try:
        st = os.lstat(path)
    except OSError:
        return False
    return stat.S_ISREG(st.st_mode) and bool(st.st_mode & stat.S_IXUSR)


def find_first_executable(root: str) -> Optional[str]:
    """Best-effort guess at an archive's main executable.

    Walks root top-down with entries in lexical order, looking at the files of a
    directory before descending into its subdirectories, and returns the first
    owner-executable regular file. A wrong guess is acceptable: the user can
    point the symlink or service at another file afterwards.

    Returns:
        The discovered path, or None when the tree has no executable files
    """
    for dirpath, dirnames, filenames in os.walk(root, topdown=True):
        dirnames.sort()
        for filename in sorted(filenames):
            candidate = os.path.join(dirpath, filename)
            if is_owner_executable_file(candidate):
                return candidate
    return None


def make_executable(path: str) -> None:
    """chmod +x for user, group and other (respecting existing bits)."""
    try:
        mode = os.stat(path).st_mode
        os.chmod(path, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    except OSError as e:
        InstallerLogger.warning(f"Could not mark {path} executable: {e}")


def copy_file(src: str, dest_dir: str) -> str:
    """Copy src into dest_dir under its original basename, replacing any existing file."""
    ensure_directory(dest_dir)
    dest_path = os.path.join(dest_dir, os.path.basename(src))
    if os.path.exists(dest_path) and os.path.samefile(src, dest_path):
        return dest_path
    try:
        if os.path.lexists(dest_path) and not os.path.isdir(dest_path):
            os.remove(dest_path)
        shutil.copyfile(src, dest_path)
        shutil.copymode(src, dest_path)
    except (OSError, shutil.Error) as e:
        raise FatalExecutionError(f"Failed to copy {src} to {dest_path}: {e}") from e
    return dest_path


def link_into_bin_dir(target: str, bin_dir: str, link_name: str) -> str:
    """Create (or replace) bin_dir/link_name as a symlink to target.

    The link points at the installed file rather than a copy of it, so it
    follows the installed tree and dangles if that tree is removed.
    """
    ensure_directory(bin_dir)
    link_path = os.path.join(bin_dir, link_name)
    target = os.path.abspath(target)
    try:
        if os.path.islink(link_path) or os.path.isfile(link_path):
            os.remove(link_path)
        os.symlink(target, link_path)
    except OSError as e:
        raise FatalExecutionError(f"Failed to create symlink {link_path} -> {target}: {e}") from e
    InstallerLogger.info(f"Symlink created: {link_path} -> {target}")
    return link_path
