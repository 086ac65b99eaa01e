"""Strategies deciding whether a path names a file on the calling machine."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileDetector(Protocol):
    """Resolve a path string to a local location, or None when it is not local."""

    def get_local_file(self, path: str) -> Path | None:
        """Return the local location for path, or None."""
        ...


class UselessFileDetector:
    """Never treats a path as local; every path is meaningful to the remote end."""

    def get_local_file(self, path: str) -> Path | None:
        return None


class LocalFileDetector:
    """Treats a path as local only if it exists on this machine."""

    def get_local_file(self, path: str) -> Path | None:
        if not path:
            return None
        candidate = Path(path)
        if candidate.is_file() or candidate.is_dir():
            return candidate
        return None


class TrustingFileDetector:
    """Treats every non-empty path as local."""

    def get_local_file(self, path: str) -> Path | None:
        return Path(path) if path else None


FILE_DETECTORS: dict[str, type[FileDetector]] = {
    "useless": UselessFileDetector,
    "local": LocalFileDetector,
    "trusting": TrustingFileDetector,
}


def get_file_detector(name: str) -> FileDetector:
    """Create a file detector by strategy name.

    Raises:
        ValueError: If name is not a known strategy.
    """
    detector_cls = FILE_DETECTORS.get(name.strip().lower())
    if detector_cls is None:
        msg = f"Unknown file detector '{name}'. Supported: {sorted(FILE_DETECTORS)}"
        raise ValueError(msg)
    return detector_cls()
