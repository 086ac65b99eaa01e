"""Firefox-specific capabilities."""

from webdriver_augment.firefox.extensions import (
    INSTALL_EXTENSION,
    UNINSTALL_EXTENSION,
    AddHasExtensions,
    FirefoxExtensions,
    HasExtensions,
)

__all__ = [
    "INSTALL_EXTENSION",
    "UNINSTALL_EXTENSION",
    "AddHasExtensions",
    "FirefoxExtensions",
    "HasExtensions",
]
