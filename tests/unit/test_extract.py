# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from manifestguard.utils.extract import extract_dependencies, get_json_value, has_dependency

MANIFEST = """{
  "name": "web",
  "dependencies": {
    "react": "^19.1.0",
    "react-dom": "^19.1.0",
    "next": "15.0.3"
  },
  "devDependencies": {
    "react-server-dom-webpack": "19.1.0"
  }
}
"""


def test_get_json_value_returns_first_match():
    assert get_json_value(MANIFEST, "react") == "^19.1.0"
    assert get_json_value(MANIFEST, "next") == "15.0.3"
    assert get_json_value(MANIFEST, "react-dom") == "^19.1.0"
    assert get_json_value(MANIFEST, "vue") is None


def test_get_json_value_does_not_cross_lines():
    text = '{"react":\n  "19.1.0"}'
    assert get_json_value(text, "react") is None
    assert has_dependency(text, "react") is True


def test_has_dependency_is_exact_and_case_sensitive():
    assert has_dependency(MANIFEST, "react") is True
    assert has_dependency(MANIFEST, "React") is False
    assert has_dependency(MANIFEST, "react-server-dom-esm") is False
    # Package name as a value is not a key.
    assert has_dependency('{"name": "react"}', "react") is False


def test_extract_dependencies_collects_all_flags():
    info = extract_dependencies(MANIFEST)
    assert info.react_version == "^19.1.0"
    assert info.next_version == "15.0.3"
    assert info.has_react is True
    assert info.has_next is True
    assert info.has_react_server_package is True


def test_extract_dependencies_on_malformed_json_is_best_effort():
    # Truncated document: whatever the patterns can still see is reported.
    info = extract_dependencies('{"dependencies": {"react": "18.2.0", "next": ')
    assert info.react_version == "18.2.0"
    assert info.has_react is True
    assert info.has_next is True
    assert info.next_version is None

    garbage = extract_dependencies("\x00\x01 not json at all {{{")
    assert garbage.react_version is None
    assert garbage.has_react is False
    assert garbage.has_next is False


def test_extract_dependencies_without_react_or_next():
    info = extract_dependencies('{"dependencies": {"lodash": "4.17.21"}}')
    assert info.has_react is False
    assert info.has_next is False
    assert info.has_react_server_package is False
