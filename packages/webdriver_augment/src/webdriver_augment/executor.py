"""Command execution channel for a remote automation session.

The HTTP executor follows the W3C WebDriver wire shape: every response body is
a JSON object whose ``value`` member carries the result, or an error object
with ``error``/``message``/``stacktrace`` members.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import httpx

from webdriver_augment.commands import CommandTable, HttpMethod
from webdriver_augment.errors import RemoteCommandError, TransportError
from webdriver_augment.logging_utils import session_context

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from webdriver_augment.commands import CommandDescriptor

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 120.0


@runtime_checkable
class CommandExecutor(Protocol):
    """Sends a named command with parameters and returns the decoded result."""

    def execute(self, command_name: str, params: Mapping[str, Any] | None = None) -> Any:
        """Execute a command against the bound session."""
        ...


class HttpCommandExecutor:
    """Synchronous HTTP command executor bound to one remote session."""

    def __init__(
        self,
        remote_url: str,
        session_id: str,
        *,
        commands: CommandTable | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            remote_url: Base URL of the remote end (e.g. http://grid:4444).
            session_id: Session the commands are addressed to.
            commands: Dispatch table; defaults to the base commands.
            timeout: Request timeout in seconds, used when no client is given.
            client: Pre-configured httpx client (tests inject a MockTransport here).
        """
        self._session_id = session_id
        self._commands = commands if commands is not None else CommandTable.with_defaults()
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=remote_url.rstrip("/"), timeout=timeout)

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def commands(self) -> CommandTable:
        return self._commands

    def add_commands(self, descriptors: Iterable[CommandDescriptor]) -> None:
        """Extend the dispatch table with additional commands."""
        self._commands.register_all(descriptors)

    def close(self) -> None:
        """Close the underlying HTTP client if this executor created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpCommandExecutor:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def execute(self, command_name: str, params: Mapping[str, Any] | None = None) -> Any:
        """Send a command and return the ``value`` of the response."""
        descriptor = self._commands.require(command_name)
        path, body = descriptor.build_path(self._session_id, params)

        with session_context(self._session_id):
            logger.debug("-> %s %s (%s)", descriptor.method.value, path, command_name)
            try:
                if descriptor.method is HttpMethod.POST:
                    response = self._client.request(descriptor.method.value, path, json=body)
                else:
                    response = self._client.request(descriptor.method.value, path)
            except httpx.HTTPError as exc:
                msg = f"Failed to send '{command_name}' to {path}: {exc}"
                raise TransportError(msg) from exc
            logger.debug("<- %s %s", response.status_code, command_name)
            return _decode_response(command_name, response)


def _decode_response(command_name: str, response: httpx.Response) -> Any:
    """Extract the result value, raising for error payloads."""
    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        if response.status_code >= 400:
            raise RemoteCommandError(
                "unknown error",
                response.text,
                status_code=response.status_code,
            ) from exc
        msg = f"Malformed response to '{command_name}': body is not JSON"
        raise TransportError(msg) from exc

    if not isinstance(data, dict) or "value" not in data:
        msg = f"Malformed response to '{command_name}': missing 'value'"
        raise TransportError(msg)

    value = data["value"]
    if isinstance(value, dict) and "error" in value:
        raise RemoteCommandError(
            str(value["error"]),
            str(value.get("message", "")),
            stacktrace=value.get("stacktrace"),
            status_code=response.status_code,
        )
    if response.status_code >= 400:
        raise RemoteCommandError(
            "unknown error",
            json.dumps(value, ensure_ascii=True),
            status_code=response.status_code,
        )
    return value
