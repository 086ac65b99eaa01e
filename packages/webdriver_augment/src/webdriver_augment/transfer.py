"""Upload archived local resources to the remote session."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from webdriver_augment.commands import DriverCommand
from webdriver_augment.errors import TransportError

if TYPE_CHECKING:
    from webdriver_augment.executor import CommandExecutor

logger = logging.getLogger(__name__)


def upload_file(executor: CommandExecutor, blob: str) -> str:
    """Send an archive through the upload command and return the remote path.

    One request, no chunking and no retry; executor errors propagate as raised.
    """
    result = executor.execute(DriverCommand.UPLOAD_FILE, {"file": blob})
    if not isinstance(result, str) or not result:
        msg = f"Unexpected response to {DriverCommand.UPLOAD_FILE}: {result!r}"
        raise TransportError(msg)
    logger.debug("Uploaded %d bytes of archive to %s", len(blob), result)
    return result
