# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Console and CSV reporting."""

from .console import ConsoleReporter, Reporter, create_console
from .csv_export import export_summary_csv, write_vulnerable_csv

__all__ = ["ConsoleReporter", "Reporter", "create_console", "export_summary_csv", "write_vulnerable_csv"]
