"""Handle for a live remote session."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from webdriver_augment.capabilities import Capabilities
from webdriver_augment.errors import require_non_empty
from webdriver_augment.executor import HttpCommandExecutor
from webdriver_augment.files.file_detector import UselessFileDetector, get_file_detector
from webdriver_augment.logging_utils import configure_logging

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    import httpx

    from webdriver_augment.commands import CommandTable
    from webdriver_augment.config.settings import Settings
    from webdriver_augment.executor import CommandExecutor
    from webdriver_augment.files.file_detector import FileDetector

logger = logging.getLogger(__name__)


class RemoteSession:
    """A remote session: its id, declared capabilities, executor and file detector.

    The session doubles as the file detector handed to capability
    implementations, delegating to whichever strategy is current at call time.
    """

    def __init__(
        self,
        session_id: str,
        capabilities: Mapping[str, Any],
        executor: CommandExecutor,
        *,
        file_detector: FileDetector | None = None,
    ) -> None:
        require_non_empty("Session id", session_id)
        if executor is None:
            msg = "Command executor must be set"
            raise TypeError(msg)
        self.session_id = session_id
        self.capabilities = Capabilities(capabilities)
        self.executor = executor
        self._file_detector: FileDetector = file_detector or UselessFileDetector()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        session_id: str,
        capabilities: Mapping[str, Any],
        *,
        commands: CommandTable | None = None,
        client: httpx.Client | None = None,
    ) -> RemoteSession:
        """Attach to an existing session on the remote end named by settings."""
        configure_logging(settings.log_level)
        executor = HttpCommandExecutor(
            settings.remote_url,
            session_id,
            commands=commands,
            timeout=settings.request_timeout,
            client=client,
        )
        return cls(
            session_id,
            capabilities,
            executor,
            file_detector=get_file_detector(settings.file_detector),
        )

    @property
    def file_detector(self) -> FileDetector:
        return self._file_detector

    def set_file_detector(self, detector: FileDetector) -> None:
        """Switch the local-file detection strategy."""
        if detector is None:
            msg = "File detector must be set"
            raise TypeError(msg)
        logger.debug("Session %s now uses %s", self.session_id, type(detector).__name__)
        self._file_detector = detector

    def get_local_file(self, path: str) -> Path | None:
        """Resolve path with the current file detector."""
        return self._file_detector.get_local_file(path)

    def execute(self, command_name: str, params: Mapping[str, Any] | None = None) -> Any:
        """Execute a command on this session."""
        return self.executor.execute(command_name, params)
