# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Utility helpers for manifestguard."""

from .extract import extract_dependencies, get_json_value, has_dependency

__all__ = ["extract_dependencies", "get_json_value", "has_dependency"]
