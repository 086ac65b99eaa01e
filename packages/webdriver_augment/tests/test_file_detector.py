from __future__ import annotations

from pathlib import Path

import pytest
from webdriver_augment.files.file_detector import (
    FileDetector,
    LocalFileDetector,
    TrustingFileDetector,
    UselessFileDetector,
    get_file_detector,
)


def test_useless_detector_never_resolves(tmp_path: Path) -> None:
    existing = tmp_path / "ext.xpi"
    existing.write_bytes(b"x")
    assert UselessFileDetector().get_local_file(str(existing)) is None


def test_local_detector_resolves_existing_files_and_directories(tmp_path: Path) -> None:
    existing = tmp_path / "ext.xpi"
    existing.write_bytes(b"x")
    detector = LocalFileDetector()

    assert detector.get_local_file(str(existing)) == existing
    assert detector.get_local_file(str(tmp_path)) == tmp_path
    assert detector.get_local_file(str(tmp_path / "missing.xpi")) is None
    assert detector.get_local_file("remote://already-there") is None
    assert detector.get_local_file("") is None


def test_trusting_detector_resolves_everything_but_empty() -> None:
    detector = TrustingFileDetector()
    assert detector.get_local_file("/does/not/exist.xpi") == Path("/does/not/exist.xpi")
    assert detector.get_local_file("") is None


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("useless", UselessFileDetector),
        ("local", LocalFileDetector),
        (" Trusting ", TrustingFileDetector),
    ],
)
def test_get_file_detector(name: str, expected: type) -> None:
    detector = get_file_detector(name)
    assert isinstance(detector, expected)
    assert isinstance(detector, FileDetector)


def test_get_file_detector_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown file detector 'magic'"):
        get_file_detector("magic")
