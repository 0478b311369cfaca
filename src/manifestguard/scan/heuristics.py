# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Source-file heuristic for Server Action directives."""

from __future__ import annotations

import logging

from ..config import DEFAULT_MAX_SOURCE_FILES, SOURCE_EXTENSIONS
from .discovery import iter_source_files

logger = logging.getLogger(__name__)

USE_SERVER_DIRECTIVE = b'"use server"'
READ_CHUNK_BYTES = 64 * 1024


def file_contains(path: str, needle: bytes, *, chunk_size: int = READ_CHUNK_BYTES) -> bool:
    """Stream ``path`` in chunks looking for ``needle``; raises OSError if the file cannot be read."""
    overlap = len(needle) - 1
    tail = b""
    with open(path, "rb") as handle:
        while True:
            chunk = handle.read(chunk_size)
            if not chunk:
                return False
            window = tail + chunk
            if needle in window:
                return True
            # Keep enough bytes to catch a match split across chunks.
            tail = window[-overlap:] if overlap else b""


def contains_use_server(project_dir: str, *, max_files: int = DEFAULT_MAX_SOURCE_FILES) -> bool:
    """
    Sample up to ``max_files`` JS/TS sources under ``project_dir`` for a ``"use server"`` literal.

    A hit is authoritative; a miss only means none of the sampled files matched.
    Files are compared as bytes, so binary content is searched rather than rejected.
    """
    candidates = list(iter_source_files(project_dir, SOURCE_EXTENSIONS, limit=max_files))
    for path in candidates:
        try:
            found = file_contains(path, USE_SERVER_DIRECTIVE)
        except OSError as exc:
            logger.debug("Skipping unreadable source file %s: %s", path, exc)
            continue
        if found:
            logger.debug("Found 'use server' directive in %s", path)
            return True
    return False


__all__ = ["USE_SERVER_DIRECTIVE", "contains_use_server", "file_contains"]
