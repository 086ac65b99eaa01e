"""Error taxonomy for remote commands and session augmentation."""

from __future__ import annotations

from typing import Any


class WebDriverError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(WebDriverError, ValueError):
    """Caller supplied a null or empty argument."""


class TransportError(WebDriverError):
    """The command channel failed or returned something unusable."""


class LocalIOError(TransportError):
    """A local resource could not be packaged for upload."""

    def __init__(self, path: Any) -> None:
        self.path = path
        super().__init__(f"Cannot upload {path}")


class RemoteCommandError(WebDriverError):
    """The remote end rejected a command with a W3C error payload."""

    def __init__(
        self,
        error: str,
        message: str = "",
        *,
        stacktrace: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.error = error
        self.message = message
        self.stacktrace = stacktrace
        self.status_code = status_code
        text = f"{error}: {message}" if message else error
        super().__init__(text)


class CapabilityNotAvailableError(WebDriverError, LookupError):
    """No applicable provider supplies the requested capability interface."""


def require_non_empty(label: str, value: Any) -> None:
    """Raise InvalidArgumentError when value is None or an empty string."""
    if value is None or value == "":
        msg = f"{label} must be set"
        raise InvalidArgumentError(msg)
