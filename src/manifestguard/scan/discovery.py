# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Filesystem traversal for manifests and source files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator

from ..config import DEPENDENCY_CACHE_DIR, MANIFEST_FILENAME

logger = logging.getLogger(__name__)


def _log_walk_error(exc: OSError) -> None:
    logger.debug("Skipping unreadable directory %s: %s", getattr(exc, "filename", "?"), exc)


def walk_files(root: str, *, exclude_dir: str = DEPENDENCY_CACHE_DIR) -> Iterator[str]:
    """
    Yield every file path under ``root`` in a stable, name-sorted order.

    Directories named ``exclude_dir`` are pruned wherever they occur and
    unreadable directories are skipped.
    """
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames[:] = sorted(d for d in dirnames if d != exclude_dir)
        for filename in sorted(filenames):
            yield os.path.join(dirpath, filename)


def iter_manifests(root: str, *, manifest_name: str = MANIFEST_FILENAME) -> Iterator[str]:
    for path in walk_files(root):
        if os.path.basename(path) == manifest_name:
            yield path


def iter_source_files(root: str, extensions: Iterable[str], *, limit: int | None = None) -> Iterator[str]:
    suffixes = tuple(extensions)
    count = 0
    for path in walk_files(root):
        if limit is not None and count >= limit:
            return
        if path.endswith(suffixes):
            count += 1
            yield path


def repo_name_for(manifest_path: str, root: str) -> str:
    """Display name for a manifest: its directory name, or ``[ROOT]`` for the scan root itself."""
    manifest_dir = os.path.dirname(manifest_path)
    if os.path.realpath(manifest_dir or ".") == os.path.realpath(root):
        return "[ROOT]"
    return os.path.basename(manifest_dir)


__all__ = ["iter_manifests", "iter_source_files", "repo_name_for", "walk_files"]
