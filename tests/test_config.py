# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasklist.config import DEFAULT_API_BASE_URL, load_settings

ENV_VARS = (
    "TASKLIST_API_BASE_URL",
    "TASKLIST_API_TIMEOUT_SECONDS",
    "TASKLIST_LOG_LEVEL",
    "TASKLIST_LOG_FILE",
    "TASKLIST_HOST",
    "TASKLIST_PORT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = load_settings()
    assert s.api_base_url == DEFAULT_API_BASE_URL
    assert s.api_timeout_seconds == 5.0
    assert s.log_level == "INFO"
    assert s.log_file is None
    assert s.port == 8000


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKLIST_API_BASE_URL", "http://tasks.internal:9000/")
    monkeypatch.setenv("TASKLIST_API_TIMEOUT_SECONDS", "1.5")
    monkeypatch.setenv("TASKLIST_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKLIST_LOG_FILE", str(tmp_path / "tasklist.log"))
    monkeypatch.setenv("TASKLIST_PORT", "9001")

    s = load_settings()
    assert s.api_base_url == "http://tasks.internal:9000"
    assert s.api_timeout_seconds == 1.5
    assert s.log_level == "DEBUG"
    assert s.log_file == tmp_path / "tasklist.log"
    assert s.port == 9001


def test_malformed_numbers_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKLIST_PORT", "eighty")
    monkeypatch.setenv("TASKLIST_API_TIMEOUT_SECONDS", "soon")

    s = load_settings()
    assert s.port == 8000
    assert s.api_timeout_seconds == 5.0
