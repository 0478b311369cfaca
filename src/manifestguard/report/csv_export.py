# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""CSV export of vulnerable manifests."""

from __future__ import annotations

import csv
import logging
import os
from collections.abc import Iterable
from typing import TextIO

from ..config import DEFAULT_CSV_FILENAME
from ..errors import ReportWriteError
from ..models import ScanResult, ScanSummary
from ..utils.text import printable

logger = logging.getLogger(__name__)

CSV_HEADER = ("Name", "Path", "Details", "ReactVersion", "NextVersion")


def csv_row(result: ScanResult) -> tuple[str, str, str, str, str]:
    return (
        printable(result.repo_name),
        printable(result.manifest_path),
        printable(result.details),
        printable(result.react_version),
        printable(result.next_version),
    )


def write_vulnerable_csv(results: Iterable[ScanResult], handle: TextIO) -> int:
    """Write the header plus one fully quoted row per result; returns the row count."""
    csv.writer(handle, lineterminator="\n").writerow(CSV_HEADER)
    writer = csv.writer(handle, quoting=csv.QUOTE_ALL, lineterminator="\n")
    rows = 0
    for result in results:
        writer.writerow(csv_row(result))
        rows += 1
    return rows


def export_summary_csv(summary: ScanSummary, filename: str = DEFAULT_CSV_FILENAME) -> str | None:
    """
    Write ``<root>/<filename>`` when the summary has vulnerable entries.

    Returns the written path, or ``None`` when there was nothing to export.
    Raises ReportWriteError if the file cannot be created.
    """
    if not summary.vulnerable:
        return None
    path = os.path.join(summary.root, filename)
    try:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            rows = write_vulnerable_csv(summary.vulnerable, handle)
    except OSError as exc:
        raise ReportWriteError(path, exc) from exc
    logger.info("Wrote %d vulnerable entries to %s", rows, path)
    return path


__all__ = ["CSV_HEADER", "csv_row", "export_summary_csv", "write_vulnerable_csv"]
