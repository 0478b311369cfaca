# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Manifest discovery, classification and scan orchestration."""

from .classify import classify
from .engine import ScanEngine, load_manifest

__all__ = ["ScanEngine", "classify", "load_manifest"]
