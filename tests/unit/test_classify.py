# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from manifestguard.models import DependencyInfo, ScanStatus
from manifestguard.scan.classify import (
    REASON_RSC_PACKAGES,
    REASON_USE_SERVER,
    classify,
    is_next_version_vulnerable,
    is_react_version_vulnerable,
)
from manifestguard.utils.extract import extract_dependencies


def _classify(info, uses_server_actions=None):
    return classify(info, repo_name="app", manifest_path="app/package.json", uses_server_actions=uses_server_actions)


def test_react_pattern_is_lexical():
    assert is_react_version_vulnerable("19.0.0") is True
    assert is_react_version_vulnerable("^19.1.1") is True
    assert is_react_version_vulnerable("~19.2.0") is True
    assert is_react_version_vulnerable("19.3.0") is False
    # Two-digit minor does not match the single-digit anchor.
    assert is_react_version_vulnerable("19.10.0") is False
    assert is_react_version_vulnerable("18.2.0") is False
    assert is_react_version_vulnerable("") is False
    assert is_react_version_vulnerable(None) is False
    # Known false positive of substring matching: patched releases share the prefix.
    assert is_react_version_vulnerable("19.2.1") is True


def test_next_pattern_matches_any_15():
    assert is_next_version_vulnerable("15.0.0") is True
    assert is_next_version_vulnerable("^15.2.4") is True
    assert is_next_version_vulnerable("14.2.3") is False
    assert is_next_version_vulnerable(None) is False


def test_react_19_1_is_vulnerable():
    result = _classify(extract_dependencies('{"dependencies": {"react": "19.1.0"}}'))
    assert result.status == ScanStatus.VULNERABLE
    assert "React 19.1.0" in result.details
    assert result.reasons == ("React 19.1.0 (vulnerable: 19.0.0-19.2.0)",)
    assert result.react_version == "19.1.0"
    assert result.next_version == ""


def test_react_19_10_is_safe():
    result = _classify(extract_dependencies('{"dependencies": {"react": "19.10.0"}}'))
    assert result.status == ScanStatus.SAFE
    assert result.react_version == "19.10.0"


def test_next_15_without_react():
    info = extract_dependencies('{"dependencies": {"next": "15.0.0"}}')
    assert info.has_react is False
    result = _classify(info)
    assert result.status == ScanStatus.VULNERABLE
    assert "Next.js 15.0.0" in result.details
    assert result.reasons == ("Next.js 15.0.0 (vulnerable: 15.x before patch)",)


def test_react_18_is_safe():
    result = _classify(extract_dependencies('{"dependencies": {"react": "18.2.0"}}'))
    assert result.status == ScanStatus.SAFE
    assert result.react_version == "18.2.0"
    assert result.next_version == ""


def test_no_react_or_next_produces_no_result():
    assert _classify(extract_dependencies('{"dependencies": {"express": "4.0.0"}}')) is None


def test_reasons_are_concatenated_in_order():
    info = DependencyInfo(
        react_version="^19.0.0",
        next_version="15.1.0",
        has_react=True,
        has_next=True,
        has_react_server_package=True,
    )
    result = _classify(info, uses_server_actions=lambda: True)
    assert result.reasons == (
        "React ^19.0.0 (vulnerable: 19.0.0-19.2.0)",
        "Next.js 15.1.0 (vulnerable: 15.x before patch)",
        REASON_RSC_PACKAGES,
        REASON_USE_SERVER,
    )
    assert result.details == "; ".join(result.reasons)


def test_enrichment_alone_does_not_make_vulnerable():
    calls = []

    def _heuristic():
        calls.append(1)
        return True

    info = DependencyInfo(react_version="18.3.1", has_react=True, has_react_server_package=True)
    result = _classify(info, uses_server_actions=_heuristic)
    assert result.status == ScanStatus.SAFE
    assert calls == []
