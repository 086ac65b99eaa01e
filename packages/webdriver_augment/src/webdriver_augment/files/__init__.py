"""Local resource handling: archiving and local-file detection."""

from webdriver_augment.files.archive import zip_path
from webdriver_augment.files.file_detector import (
    FILE_DETECTORS,
    FileDetector,
    LocalFileDetector,
    TrustingFileDetector,
    UselessFileDetector,
    get_file_detector,
)

__all__ = [
    "FILE_DETECTORS",
    "FileDetector",
    "LocalFileDetector",
    "TrustingFileDetector",
    "UselessFileDetector",
    "get_file_detector",
    "zip_path",
]
