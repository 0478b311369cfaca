# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Classification rules for extracted dependency information."""

from __future__ import annotations

from collections.abc import Callable

from ..models import DependencyInfo, ScanResult
from ..utils.version_thresholds import NEXT_VULNERABLE_PATTERN, REACT_VULNERABLE_PATTERN

REASON_RSC_PACKAGES = "Uses React Server Components packages"
REASON_USE_SERVER = "Contains 'use server' directives (Server Actions)"


def is_react_version_vulnerable(version: str | None) -> bool:
    if not version:
        return False
    return REACT_VULNERABLE_PATTERN.search(version) is not None


def is_next_version_vulnerable(version: str | None) -> bool:
    if not version:
        return False
    return NEXT_VULNERABLE_PATTERN.search(version) is not None


def vulnerability_reasons(
    info: DependencyInfo,
    uses_server_actions: Callable[[], bool] | None = None,
) -> tuple[bool, list[str]]:
    """
    Evaluate every rule in order and return ``(is_vulnerable, reasons)``.

    Only the React and Next.js version rules decide vulnerability; the RSC
    package and Server Action checks just add context. ``uses_server_actions``
    is only called once a version rule has fired.
    """
    reasons: list[str] = []
    vulnerable = False

    if is_react_version_vulnerable(info.react_version):
        vulnerable = True
        reasons.append(f"React {info.react_version} (vulnerable: 19.0.0-19.2.0)")

    if is_next_version_vulnerable(info.next_version):
        vulnerable = True
        reasons.append(f"Next.js {info.next_version} (vulnerable: 15.x before patch)")

    if not vulnerable:
        return False, reasons

    if info.has_react_server_package:
        reasons.append(REASON_RSC_PACKAGES)

    if uses_server_actions is not None and uses_server_actions():
        reasons.append(REASON_USE_SERVER)

    return True, reasons


def classify(
    info: DependencyInfo,
    *,
    repo_name: str,
    manifest_path: str,
    uses_server_actions: Callable[[], bool] | None = None,
) -> ScanResult | None:
    """Map dependency info to a result; ``None`` when the manifest declares neither React nor Next.js."""
    vulnerable, reasons = vulnerability_reasons(info, uses_server_actions)
    if vulnerable:
        return ScanResult.vulnerable(repo_name, manifest_path, reasons, info.react_version, info.next_version)
    if info.has_react or info.has_next:
        return ScanResult.safe(repo_name, manifest_path, info.react_version, info.next_version)
    return None


__all__ = [
    "REASON_RSC_PACKAGES",
    "REASON_USE_SERVER",
    "classify",
    "is_next_version_vulnerable",
    "is_react_version_vulnerable",
    "vulnerability_reasons",
]
