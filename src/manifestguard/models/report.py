# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclasses for per-manifest results and the scan summary."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

DETAILS_SEPARATOR = "; "


class ScanStatus(str, Enum):
    VULNERABLE = "VULNERABLE"
    SAFE = "SAFE"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class ScanResult:
    """
    Outcome for a single manifest.

    Which fields are meaningful depends on ``status``: vulnerable results carry
    ``reasons`` plus both version strings, safe results carry the version strings,
    unknown results carry ``error``. Use the ``vulnerable``/``safe``/``unknown``
    constructors rather than building one directly.
    """

    status: ScanStatus
    repo_name: str
    manifest_path: str
    reasons: tuple[str, ...] = ()
    react_version: str = ""
    next_version: str = ""
    error: str = ""

    @classmethod
    def vulnerable(
        cls,
        repo_name: str,
        manifest_path: str,
        reasons: list[str] | tuple[str, ...],
        react_version: str | None,
        next_version: str | None,
    ) -> "ScanResult":
        return cls(
            status=ScanStatus.VULNERABLE,
            repo_name=repo_name,
            manifest_path=manifest_path,
            reasons=tuple(reasons),
            react_version=react_version or "",
            next_version=next_version or "",
        )

    @classmethod
    def safe(
        cls,
        repo_name: str,
        manifest_path: str,
        react_version: str | None,
        next_version: str | None,
    ) -> "ScanResult":
        return cls(
            status=ScanStatus.SAFE,
            repo_name=repo_name,
            manifest_path=manifest_path,
            react_version=react_version or "",
            next_version=next_version or "",
        )

    @classmethod
    def unknown(cls, repo_name: str, manifest_path: str, error: str) -> "ScanResult":
        return cls(status=ScanStatus.UNKNOWN, repo_name=repo_name, manifest_path=manifest_path, error=error)

    @property
    def details(self) -> str:
        return DETAILS_SEPARATOR.join(self.reasons)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "status": self.status.value,
            "name": self.repo_name,
            "path": self.manifest_path,
        }
        if self.status == ScanStatus.UNKNOWN:
            payload["error"] = self.error
            return payload
        payload["react_version"] = self.react_version
        payload["next_version"] = self.next_version
        if self.status == ScanStatus.VULNERABLE:
            payload["reasons"] = list(self.reasons)
            payload["details"] = self.details
        return payload


@dataclass
class ScanSummary:
    """Results of one scan pass, each list in discovery order."""

    root: str
    vulnerable: list[ScanResult] = field(default_factory=list)
    safe: list[ScanResult] = field(default_factory=list)
    unknown: list[ScanResult] = field(default_factory=list)
    total_scanned: int = 0

    def add(self, result: ScanResult | None) -> None:
        """Count a processed manifest and file its result, if it produced one."""
        self.total_scanned += 1
        if result is None:
            return
        if result.status == ScanStatus.VULNERABLE:
            self.vulnerable.append(result)
        elif result.status == ScanStatus.SAFE:
            self.safe.append(result)
        else:
            self.unknown.append(result)

    @property
    def has_vulnerable(self) -> bool:
        return bool(self.vulnerable)

    def to_dict(self) -> dict[str, Any]:
        return {
            "root": self.root,
            "total_scanned": self.total_scanned,
            "vulnerable": [r.to_dict() for r in self.vulnerable],
            "safe": [r.to_dict() for r in self.safe],
            "unknown": [r.to_dict() for r in self.unknown],
            "counts": {
                "vulnerable": len(self.vulnerable),
                "safe": len(self.safe),
                "unknown": len(self.unknown),
            },
        }
