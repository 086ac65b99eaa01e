"""Pack local files and directories into base64-encoded ZIP payloads."""

from __future__ import annotations

import base64
import io
import os
import zipfile
from pathlib import Path

# Fixed metadata keeps the archive bytes identical for identical content.
_FIXED_DATE_TIME = (1980, 1, 1, 0, 0, 0)
_FILE_MODE = 0o644 << 16


def _entries(root: Path) -> list[tuple[str, Path]]:
    if root.is_file():
        return [(root.name, root)]
    if not root.is_dir():
        msg = f"No such file or directory: '{root}'"
        raise FileNotFoundError(msg)
    entries = [
        (path.relative_to(root).as_posix(), path)
        for path in root.rglob("*")
        if path.is_file()
    ]
    return sorted(entries)


def zip_path(location: str | os.PathLike[str]) -> str:
    """Archive a file or directory and return the ZIP bytes as base64 text.

    A single file is stored under its base name; a directory is stored
    recursively with entry names relative to it.

    Raises:
        FileNotFoundError: If location does not exist.
        OSError: If any file cannot be read.
    """
    root = Path(location)
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name, path in _entries(root):
            info = zipfile.ZipInfo(name, date_time=_FIXED_DATE_TIME)
            info.compress_type = zipfile.ZIP_DEFLATED
            info.external_attr = _FILE_MODE
            archive.writestr(info, path.read_bytes())
    return base64.b64encode(buffer.getvalue()).decode("ascii")
