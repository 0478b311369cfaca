# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from manifestguard import config
from manifestguard.errors import ErrorCategory, ReportWriteError, categorize_exception, error_category_to_reason


def test_scan_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("MANIFESTGUARD_MAX_SOURCE_FILES", "25")
    monkeypatch.setenv("MANIFESTGUARD_CSV_FILENAME", "out.csv")
    monkeypatch.setenv("MANIFESTGUARD_WRITE_CSV", "false")
    monkeypatch.setenv("MANIFESTGUARD_NO_COLOR", "1")
    monkeypatch.setenv("MANIFESTGUARD_FAIL_ON_VULNERABLE", "yes")

    settings = config.load_scan_settings()

    assert settings.max_source_files == 25
    assert settings.csv_filename == "out.csv"
    assert settings.write_csv is False
    assert settings.no_color is True
    assert settings.fail_on_vulnerable is True


def test_scan_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("MANIFESTGUARD_MAX_SOURCE_FILES", "lots")
    monkeypatch.setenv("MANIFESTGUARD_CSV_FILENAME", "   ")
    settings = config.load_scan_settings()
    assert settings.max_source_files == config.ScanSettings.max_source_files
    assert settings.csv_filename == config.DEFAULT_CSV_FILENAME

    monkeypatch.setenv("MANIFESTGUARD_MAX_SOURCE_FILES", "0")
    assert config.load_scan_settings().max_source_files == 100


def test_load_scan_settings_reads_env_at_call_time(monkeypatch):
    monkeypatch.setenv("MANIFESTGUARD_MAX_SOURCE_FILES", "7")
    assert config.load_scan_settings().max_source_files == 7
    monkeypatch.setenv("MANIFESTGUARD_MAX_SOURCE_FILES", "8")
    assert config.load_scan_settings().max_source_files == 8


def test_categorize_exception():
    assert categorize_exception(PermissionError("x")) == ErrorCategory.PERMISSION_DENIED
    assert categorize_exception(FileNotFoundError("x")) == ErrorCategory.NOT_FOUND
    assert categorize_exception(IsADirectoryError("x")) == ErrorCategory.IS_DIRECTORY
    assert categorize_exception(OSError("x")) == ErrorCategory.IO_ERROR


def test_error_category_to_reason():
    assert error_category_to_reason(ErrorCategory.IO_ERROR) == "Failed to read file"
    assert error_category_to_reason(ErrorCategory.PERMISSION_DENIED).startswith("Failed to read file")
    assert error_category_to_reason(ErrorCategory.NONE) == ""
    assert error_category_to_reason(None) == ""


def test_report_write_error_message():
    err = ReportWriteError("/tmp/x.csv", PermissionError("denied"))
    assert "/tmp/x.csv" in str(err)
    assert isinstance(err.cause, PermissionError)
