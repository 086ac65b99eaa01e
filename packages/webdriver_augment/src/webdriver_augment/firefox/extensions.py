"""Install and uninstall Firefox add-ons in a live remote session.

A path that the session's file detector resolves locally is zipped and uploaded
first, and the install command receives the remote path the upload returned.
Any other path is handed to the remote end unchanged.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from webdriver_augment.augment.provider import AugmenterProvider
from webdriver_augment.capabilities import Browser
from webdriver_augment.commands import CommandDescriptor, HttpMethod
from webdriver_augment.errors import (
    InvalidArgumentError,
    LocalIOError,
    TransportError,
    require_non_empty,
)
from webdriver_augment.files.archive import zip_path
from webdriver_augment.transfer import upload_file

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from pathlib import Path

    from webdriver_augment.executor import CommandExecutor
    from webdriver_augment.files.file_detector import FileDetector

logger = logging.getLogger(__name__)

INSTALL_EXTENSION = "installExtension"
UNINSTALL_EXTENSION = "uninstallExtension"

COMMANDS: Mapping[str, CommandDescriptor] = {
    INSTALL_EXTENSION: CommandDescriptor(
        INSTALL_EXTENSION, HttpMethod.POST, "/session/{sessionId}/moz/addon/install"
    ),
    UNINSTALL_EXTENSION: CommandDescriptor(
        UNINSTALL_EXTENSION, HttpMethod.POST, "/session/{sessionId}/moz/addon/uninstall"
    ),
}


class HasExtensions(ABC):
    """Capability to manage browser extensions in a session."""

    @abstractmethod
    def install_extension(self, path: str | os.PathLike[str]) -> str:
        """Install the extension at path and return its id."""

    @abstractmethod
    def uninstall_extension(self, extension_id: str) -> None:
        """Uninstall a previously installed extension."""


class FirefoxExtensions(HasExtensions):
    """HasExtensions bound to one session's executor and file detector."""

    def __init__(
        self,
        executor: CommandExecutor,
        file_detector: FileDetector,
        *,
        archiver: Callable[[Path], str] = zip_path,
    ) -> None:
        if executor is None:
            msg = "Command executor must be set"
            raise TypeError(msg)
        self._executor = executor
        self._file_detector = file_detector
        self._archiver = archiver

    def install_extension(self, path: str | os.PathLike[str]) -> str:
        require_non_empty("Extension path", path)
        path_str = os.fspath(path)
        # Path("") renders as "."
        if not path_str or (not isinstance(path, str) and path_str == "."):
            msg = "Extension path must be set"
            raise InvalidArgumentError(msg)

        local_file = self._file_detector.get_local_file(path_str)
        if local_file is None:
            return self._install_at_path(path_str)

        try:
            blob = self._archiver(local_file)
        except OSError as exc:
            raise LocalIOError(local_file) from exc
        remote_path = upload_file(self._executor, blob)
        logger.debug("Uploaded extension %s as %s", local_file, remote_path)
        return self._install_at_path(remote_path)

    def uninstall_extension(self, extension_id: str) -> None:
        require_non_empty("Extension ID", extension_id)
        self._executor.execute(UNINSTALL_EXTENSION, {"id": extension_id})
        logger.info("Uninstalled extension %s", extension_id)

    def _install_at_path(self, path: str) -> str:
        # TODO: let callers request a temporary install (the remote end accepts temporary=true).
        extension_id = self._executor.execute(
            INSTALL_EXTENSION, {"path": path, "temporary": False}
        )
        if not isinstance(extension_id, str) or not extension_id:
            msg = f"Unexpected response to {INSTALL_EXTENSION}: {extension_id!r}"
            raise TransportError(msg)
        logger.info("Installed extension %s from %s", extension_id, path)
        return extension_id


class AddHasExtensions(AugmenterProvider[HasExtensions]):
    """Adds HasExtensions to Firefox sessions."""

    def additional_commands(self) -> Mapping[str, CommandDescriptor]:
        return COMMANDS

    def is_applicable(self, capabilities: Mapping[str, Any]) -> bool:
        return Browser.FIREFOX.is_(capabilities)

    @property
    def described_interface(self) -> type[HasExtensions]:
        return HasExtensions

    def get_implementation(
        self,
        capabilities: Mapping[str, Any],
        executor: CommandExecutor,
        *,
        file_detector: FileDetector,
    ) -> HasExtensions:
        return FirefoxExtensions(executor, file_detector)
