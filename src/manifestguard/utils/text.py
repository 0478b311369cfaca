# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Text helpers for writing filesystem-derived strings."""

from __future__ import annotations


def printable(value: str) -> str:
    """
    Return ``value`` safe to encode as strict UTF-8.

    Paths from ``os.walk`` carry undecodable bytes as lone surrogates
    (``b"shop\\xff"`` becomes ``"shop\\udcff"``); those bytes are rendered as
    ``\\xff`` escapes. Any other lone surrogate is rendered as ``\\udXXX``.
    """
    try:
        raw = value.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return value.encode("utf-8", "backslashreplace").decode("utf-8")
    return raw.decode("utf-8", "backslashreplace")


__all__ = ["printable"]
