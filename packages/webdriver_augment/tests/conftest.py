from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _set_required_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEBDRIVER_REMOTE_URL", "http://grid.example.com:4444")
    monkeypatch.delenv("WEBDRIVER_FILE_DETECTOR", raising=False)
    monkeypatch.delenv("WEBDRIVER_REQUEST_TIMEOUT", raising=False)
    monkeypatch.delenv("WEBDRIVER_LOG_LEVEL", raising=False)
