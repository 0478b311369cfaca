# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""manifestguard CLI."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from ..config import DEFAULT_MAX_SOURCE_FILES, ScanSettings, load_scan_settings
from ..errors import ReportWriteError
from ..log import setup_logging
from ..report import ConsoleReporter, create_console, export_summary_csv
from ..scan import ScanEngine
from ..utils.version_thresholds import CVE_ID

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VULNERABLE = 1
EXIT_REPORT_ERROR = 2


def positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {parsed}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=f"Scan package.json manifests for React/Next.js versions affected by {CVE_ID} (React2Shell)"
    )
    parser.add_argument("path", nargs="?", default=".", help="Root directory to scan (default: current directory)")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of human-friendly summary",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--no-csv", action="store_true", help="Do not write the CSV report")
    parser.add_argument(
        "--fail-on-vulnerable",
        action="store_true",
        help="Exit with status 1 when vulnerable manifests are found",
    )
    parser.add_argument(
        "--max-source-files",
        type=positive_int,
        default=None,
        metavar="N",
        help=f"Source files sampled per project for 'use server' directives (default: {DEFAULT_MAX_SOURCE_FILES})",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: WARNING)")
    return parser


def _settings_from_args(args: argparse.Namespace) -> ScanSettings:
    settings = load_scan_settings()
    if args.no_color:
        settings.no_color = True
    if args.no_csv:
        settings.write_csv = False
    if args.fail_on_vulnerable:
        settings.fail_on_vulnerable = True
    if args.max_source_files is not None:
        settings.max_source_files = args.max_source_files
    return settings


def _print_json(data: dict[str, Any] | Any) -> None:
    payload = data.to_dict() if hasattr(data, "to_dict") else data
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    settings = _settings_from_args(args)
    reporter = None if args.json else ConsoleReporter(create_console(no_color=settings.no_color))

    if reporter:
        reporter.start(args.path)
    summary = ScanEngine(settings).run(args.path)

    if args.json:
        _print_json(summary)
    elif reporter:
        reporter.render(summary)

    exit_code = EXIT_OK
    if settings.write_csv:
        try:
            csv_path = export_summary_csv(summary, settings.csv_filename)
        except ReportWriteError as exc:
            logger.error("%s", exc)
            exit_code = EXIT_REPORT_ERROR
        else:
            if csv_path and reporter:
                reporter.csv_written(csv_path)

    if exit_code == EXIT_OK and settings.fail_on_vulnerable and summary.has_vulnerable:
        exit_code = EXIT_VULNERABLE
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
