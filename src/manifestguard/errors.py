# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from enum import Enum
from typing import Optional


class ManifestGuardError(Exception):
    """Base class for manifestguard failures."""


class ReportWriteError(ManifestGuardError):
    """Raised when the CSV report cannot be written."""

    def __init__(self, path: str, cause: OSError):
        super().__init__(f"Failed to write report to {path}: {cause}")
        self.path = path
        self.cause = cause


class ErrorCategory(str, Enum):
    PERMISSION_DENIED = "PERMISSION_DENIED"
    NOT_FOUND = "NOT_FOUND"
    IS_DIRECTORY = "IS_DIRECTORY"
    IO_ERROR = "IO_ERROR"
    NONE = "NONE"


def categorize_exception(exc: OSError) -> ErrorCategory:
    """
    Map filesystem exceptions to ErrorCategory.
    """
    if isinstance(exc, PermissionError):
        return ErrorCategory.PERMISSION_DENIED
    if isinstance(exc, FileNotFoundError):
        return ErrorCategory.NOT_FOUND
    if isinstance(exc, IsADirectoryError):
        return ErrorCategory.IS_DIRECTORY
    return ErrorCategory.IO_ERROR


def error_category_to_reason(category: Optional[ErrorCategory]) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.PERMISSION_DENIED: "Failed to read file (permission denied)",
        ErrorCategory.NOT_FOUND: "Failed to read file (file disappeared)",
        ErrorCategory.IS_DIRECTORY: "Failed to read file (not a regular file)",
        ErrorCategory.IO_ERROR: "Failed to read file",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Failed to read file")
