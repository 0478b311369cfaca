# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Human-readable scan reports."""

from __future__ import annotations

from typing import Protocol

from rich.console import Console

from ..models import ScanResult, ScanSummary
from ..utils.text import printable
from ..utils.version_thresholds import ADVISORY_URL, CVE_ID, NEXT_FIXED_VERSION, REACT_FIXED_VERSION

RULE = "=" * 40
SUBRULE = "-" * 40


class Reporter(Protocol):
    def start(self, root: str) -> None: ...

    def render(self, summary: ScanSummary) -> None: ...

    def csv_written(self, path: str) -> None: ...


def format_versions(result: ScanResult) -> str:
    parts = []
    if result.react_version:
        parts.append(f"React: {result.react_version}")
    if result.next_version:
        parts.append(f"Next: {result.next_version}")
    return ", ".join(parts)


def create_console(*, no_color: bool = False) -> Console:
    # Rich drops styling on its own when stdout is not a terminal.
    return Console(no_color=no_color, highlight=False, emoji=False, soft_wrap=True)


class ConsoleReporter:
    """Sectioned, color-coded report; plain text when color is unavailable."""

    def __init__(self, console: Console | None = None):
        self.console = console or create_console()

    def _line(self, text: str = "", style: str | None = None) -> None:
        self.console.print(printable(text), style=style, markup=False)

    def _header(self, title: str, style: str) -> None:
        self._line()
        self._line(RULE, style)
        self._line(f" {title}", style)
        self._line(RULE, style)

    def start(self, root: str) -> None:
        self._header(f"{CVE_ID} (React2Shell) Scanner", "cyan")
        self._line()
        self._line(f"Scanning: {root}", "yellow")

    def render(self, summary: ScanSummary) -> None:
        self._line(f"Found {summary.total_scanned} package.json files to analyze...")
        self._render_vulnerable(summary.vulnerable)
        self._render_safe(summary.safe)
        self._render_unknown(summary.unknown)
        self._render_totals(summary)

    def _render_vulnerable(self, results: list[ScanResult]) -> None:
        self._header(f"VULNERABLE REPOSITORIES ({len(results)})", "red")
        if not results:
            self._line()
            self._line("No vulnerable repositories found!", "green")
            return
        for result in results:
            self._line()
            self._line(f"[!] {result.repo_name}", "red")
            self._line(f"    Path: {result.manifest_path}", "bright_black")
            self._line(f"    Issue: {result.details}", "yellow")

        self._line()
        self._line(SUBRULE, "red")
        self._line(" REMEDIATION REQUIRED:", "red")
        self._line(SUBRULE, "red")
        self._line(f" - React: Upgrade to {REACT_FIXED_VERSION} or later", "white")
        self._line(f" - Next.js: Upgrade to {NEXT_FIXED_VERSION} or later", "white")
        self._line(f" - See: {ADVISORY_URL}", "cyan")

    def _render_safe(self, results: list[ScanResult]) -> None:
        self._header(f"SAFE REPOSITORIES ({len(results)})", "green")
        for result in results:
            self._line(f"  [OK] {result.repo_name} - {format_versions(result)}", "green")

    def _render_unknown(self, results: list[ScanResult]) -> None:
        if not results:
            return
        self._header(f"PARSE ERRORS ({len(results)})", "yellow")
        for result in results:
            self._line(f"  [?] {result.repo_name}: {result.error}", "yellow")

    def _render_totals(self, summary: ScanSummary) -> None:
        self._header("SCAN COMPLETE", "cyan")
        self._line(f" Total package.json scanned: {summary.total_scanned}")
        self._line(f" Vulnerable: {len(summary.vulnerable)}", "red" if summary.vulnerable else "green")
        self._line(f" Safe (React/Next but not vulnerable): {len(summary.safe)}", "green")
        self._line(f" Parse errors: {len(summary.unknown)}", "yellow")

    def csv_written(self, path: str) -> None:
        self._line()
        self._line(f"Results exported to: {path}", "cyan")


__all__ = ["ConsoleReporter", "Reporter", "create_console", "format_versions"]
