# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
manifestguard package entrypoint.

Static scanner that walks a directory tree, reads ``package.json`` manifests and
flags projects declaring React/Next.js versions affected by CVE-2025-55182
(React2Shell). Matching is lexical: declared version strings are tested against
fixed patterns rather than resolved as semver ranges.
"""

from .config import ScanSettings, load_scan_settings
from .log import setup_logging
from .models import DependencyInfo, ManifestRecord, ScanResult, ScanStatus, ScanSummary
from .report import ConsoleReporter, export_summary_csv
from .scan import ScanEngine, classify
from .version import __version__

__all__ = [
    "ConsoleReporter",
    "DependencyInfo",
    "ManifestRecord",
    "ScanEngine",
    "ScanResult",
    "ScanSettings",
    "ScanStatus",
    "ScanSummary",
    "classify",
    "export_summary_csv",
    "load_scan_settings",
    "setup_logging",
    "__version__",
]
