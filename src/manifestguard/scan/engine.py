# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan orchestration: discovery, extraction, classification."""

from __future__ import annotations

import logging
import os

from ..config import ScanSettings
from ..errors import categorize_exception, error_category_to_reason
from ..models import ManifestRecord, ScanResult, ScanSummary
from ..utils.extract import extract_dependencies
from .classify import classify
from .discovery import iter_manifests, repo_name_for
from .heuristics import contains_use_server

logger = logging.getLogger(__name__)


def load_manifest(manifest_path: str, root: str) -> ManifestRecord:
    """Read a manifest once; failures are captured on the record instead of raised."""
    repo_name = repo_name_for(manifest_path, root)
    try:
        with open(manifest_path, encoding="utf-8", errors="replace") as handle:
            content = handle.read()
    except OSError as exc:
        logger.warning("Failed to read %s: %s", manifest_path, exc)
        return ManifestRecord(repo_name, manifest_path, error_category=categorize_exception(exc))
    return ManifestRecord(repo_name, manifest_path, raw_content=content)


class ScanEngine:
    """Single-pass, sequential scan of a directory tree."""

    def __init__(self, settings: ScanSettings | None = None):
        self.settings = settings or ScanSettings()

    def scan_manifest(self, record: ManifestRecord) -> ScanResult | None:
        if not record.readable:
            return ScanResult.unknown(
                record.repo_name,
                record.manifest_path,
                error_category_to_reason(record.error_category),
            )
        info = extract_dependencies(record.raw_content or "")
        project_dir = os.path.dirname(record.manifest_path) or "."
        return classify(
            info,
            repo_name=record.repo_name,
            manifest_path=record.manifest_path,
            uses_server_actions=lambda: contains_use_server(project_dir, max_files=self.settings.max_source_files),
        )

    def run(self, root: str) -> ScanSummary:
        summary = ScanSummary(root=root)
        if not os.path.isdir(root):
            logger.warning("Scan root %s is not a directory", root)
            return summary
        for manifest_path in iter_manifests(root):
            record = load_manifest(manifest_path, root)
            result = self.scan_manifest(record)
            logger.debug("%s -> %s", manifest_path, result.status.value if result else "no React/Next.js")
            summary.add(result)
        return summary
