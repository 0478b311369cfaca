# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Best-effort dependency extraction from raw manifest text."""

from __future__ import annotations

import re
from functools import lru_cache

from ..models import DependencyInfo
from .version_thresholds import REACT_SERVER_PACKAGES

# Horizontal whitespace only: a key and its value must share a line.
_WS = r"[ \t]*"


@lru_cache(maxsize=64)
def _key_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf'"{re.escape(name)}"{_WS}:')


@lru_cache(maxsize=64)
def _value_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf'"{re.escape(name)}"{_WS}:{_WS}"([^"\n]*)"')


def has_dependency(text: str, name: str) -> bool:
    """True when ``"name":`` appears anywhere in the text (exact, case-sensitive key)."""
    return _key_pattern(name).search(text) is not None


def get_json_value(text: str, name: str) -> str | None:
    """Return the first quoted string value following ``"name":``, if any."""
    match = _value_pattern(name).search(text)
    return match.group(1) if match else None


def extract_dependencies(text: str) -> DependencyInfo:
    """
    Pull React/Next declarations out of manifest text without parsing it.

    Malformed JSON is not an error: the patterns simply match less (or more).
    Keys are matched anywhere in the document, not only inside dependency
    sections, so e.g. an ``"overrides"`` entry for ``react`` also counts.
    """
    return DependencyInfo(
        react_version=get_json_value(text, "react"),
        next_version=get_json_value(text, "next"),
        has_react=has_dependency(text, "react"),
        has_next=has_dependency(text, "next"),
        has_react_server_package=any(has_dependency(text, name) for name in REACT_SERVER_PACKAGES),
    )


__all__ = ["extract_dependencies", "get_json_value", "has_dependency"]
