# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for manifestguard."""

from .manifest import DependencyInfo, ManifestRecord
from .report import ScanResult, ScanStatus, ScanSummary

__all__ = [
    "DependencyInfo",
    "ManifestRecord",
    "ScanResult",
    "ScanStatus",
    "ScanSummary",
]
