# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Manifest domain models."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import ErrorCategory


@dataclass(frozen=True)
class ManifestRecord:
    """A discovered manifest and its raw text, or the reason it could not be read."""

    repo_name: str
    manifest_path: str
    raw_content: str | None = None
    error_category: ErrorCategory = ErrorCategory.NONE

    @property
    def readable(self) -> bool:
        return self.raw_content is not None


@dataclass(frozen=True)
class DependencyInfo:
    react_version: str | None = None
    next_version: str | None = None
    has_react: bool = False
    has_next: bool = False
    has_react_server_package: bool = False
