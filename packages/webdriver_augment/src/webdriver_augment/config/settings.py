"""Pydantic models for runtime settings."""

from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel

from webdriver_augment.executor import DEFAULT_TIMEOUT
from webdriver_augment.files.file_detector import FILE_DETECTORS


class Settings(BaseModel, frozen=True):
    """Runtime configuration loaded from environment variables."""

    remote_url: str
    request_timeout: float = DEFAULT_TIMEOUT
    file_detector: str = "useless"
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Load settings from environment variables with defaults."""
    load_dotenv()

    remote_url = os.getenv("WEBDRIVER_REMOTE_URL")
    if not remote_url:
        msg = (
            "WEBDRIVER_REMOTE_URL environment variable is required. "
            "Point it at the remote end, e.g. http://localhost:4444."
        )
        raise ValueError(msg)

    file_detector = os.getenv("WEBDRIVER_FILE_DETECTOR", "useless").strip().lower()
    if file_detector not in FILE_DETECTORS:
        msg = (
            f"WEBDRIVER_FILE_DETECTOR must be one of {sorted(FILE_DETECTORS)}, "
            f"got '{file_detector}'."
        )
        raise ValueError(msg)

    return Settings(
        remote_url=remote_url,
        request_timeout=float(os.getenv("WEBDRIVER_REQUEST_TIMEOUT", str(DEFAULT_TIMEOUT))),
        file_detector=file_detector,
        log_level=os.getenv("WEBDRIVER_LOG_LEVEL", "INFO"),
    )
