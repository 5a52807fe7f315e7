#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Map a source artifact to exactly one ArtifactKind.

Rules are ordered and the first match wins: the filename extension is checked
first and the MIME type sniffed from the file's bytes is consulted only when no
extension matched. Anything unrecognized is a SINGLE_FILE, so classification
never fails. A file whose name lies about its contents (e.g. a non-gzip file
named .tgz) is not caught here; the selected strategy fails loudly instead.
"""

from typing import Callable, Iterable, Optional, Tuple

import magic

from tool_installer.installer.configs.constants.constants import (
    EXTENSION_KIND_RULES,
    MIME_KIND_RULES,
    MIME_TYPE_UNKNOWN,
)
from tool_installer.installer.configs.constants.enums import ArtifactKind
from tool_installer.installer.utils.logger_utils import InstallerLogger


def detect_mime_type(path: str) -> str:
    """Sniff the MIME type of a file with libmagic, never raising."""
    try:
        return magic.from_file(path, mime=True) or MIME_TYPE_UNKNOWN
    except (magic.MagicException, OSError) as e:
        InstallerLogger.debug(f"MIME detection failed for {path}: {e}")
        return MIME_TYPE_UNKNOWN


def kind_from_extension(
    path: str, rules: Iterable[Tuple[str, ArtifactKind]] = EXTENSION_KIND_RULES
) -> Optional[ArtifactKind]:
    for suffix, kind in rules:
        if path.endswith(suffix):
            return kind
    return None


def kind_from_mime(
    mime_type: Optional[str], rules: Iterable[Tuple[str, ArtifactKind]] = MIME_KIND_RULES
) -> ArtifactKind:
    for rule_mime_type, kind in rules:
        if mime_type == rule_mime_type:
            return kind
    return ArtifactKind.SINGLE_FILE


def classify_artifact(
    path: str,
    lifecycle=None,
    mime_detector: Callable[[str], str] = detect_mime_type,
) -> ArtifactKind:
    """Return the ArtifactKind for the file at path.

    Args:
        path: Path of the fetched artifact
        lifecycle: Optional InstallLifecycle used to record the decision
        mime_detector: Callable returning a MIME type string for a path

    Returns:
        Exactly one ArtifactKind; SINGLE_FILE when nothing else matches
    """
    kind = kind_from_extension(path)
    if kind is None:
        mime_type = mime_detector(path)
        if lifecycle is not None:
            lifecycle.record_event(f"Detected MIME type: {mime_type}")
        kind = kind_from_mime(mime_type)

    if lifecycle is not None:
        lifecycle.record_event(f"Interpreting as: {kind.value}")
    return kind
