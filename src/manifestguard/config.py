# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for manifestguard."""

import os
from dataclasses import dataclass

MANIFEST_FILENAME = "package.json"
DEPENDENCY_CACHE_DIR = "node_modules"
SOURCE_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx")
DEFAULT_CSV_FILENAME = "cve-2025-55182-scan-results.csv"
DEFAULT_MAX_SOURCE_FILES = 100


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ScanSettings:
    """Scanner defaults."""

    max_source_files: int = DEFAULT_MAX_SOURCE_FILES
    csv_filename: str = DEFAULT_CSV_FILENAME
    write_csv: bool = True
    no_color: bool = False
    fail_on_vulnerable: bool = False

    @classmethod
    def from_env(cls) -> "ScanSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_source_files = _int_env("MANIFESTGUARD_MAX_SOURCE_FILES", cls.max_source_files)
        if max_source_files <= 0:
            max_source_files = cls.max_source_files
        csv_filename = os.getenv("MANIFESTGUARD_CSV_FILENAME", "").strip() or cls.csv_filename
        return cls(
            max_source_files=max_source_files,
            csv_filename=csv_filename,
            write_csv=_bool_env("MANIFESTGUARD_WRITE_CSV", cls.write_csv),
            no_color=_bool_env("MANIFESTGUARD_NO_COLOR", cls.no_color),
            fail_on_vulnerable=_bool_env("MANIFESTGUARD_FAIL_ON_VULNERABLE", cls.fail_on_vulnerable),
        )


def load_scan_settings() -> ScanSettings:
    """Load scan settings from environment with sensible defaults."""
    return ScanSettings.from_env()
