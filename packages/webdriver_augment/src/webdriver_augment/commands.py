"""Command descriptors and the name-keyed dispatch table."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from string import Formatter
from typing import TYPE_CHECKING, Any

from webdriver_augment.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

logger = logging.getLogger(__name__)

SESSION_ID = "sessionId"


class HttpMethod(str, Enum):
    """HTTP verb used to send a command."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


@dataclass(frozen=True)
class CommandDescriptor:
    """Remote command: a unique name bound to a method and path template."""

    name: str
    method: HttpMethod
    path_template: str

    def __post_init__(self) -> None:
        if not self.name.strip():
            msg = "CommandDescriptor.name must be non-empty"
            raise ValueError(msg)
        if not self.path_template.startswith("/"):
            msg = f"Path template for '{self.name}' must start with '/'"
            raise ValueError(msg)
        object.__setattr__(self, "method", HttpMethod(self.method))

    def placeholders(self) -> tuple[str, ...]:
        """Return the placeholder names in the path template, in order."""
        return tuple(
            field for _, field, _, _ in Formatter().parse(self.path_template) if field
        )

    def build_path(
        self, session_id: str, params: Mapping[str, Any] | None = None
    ) -> tuple[str, dict[str, Any]]:
        """Fill the path template and return it with the unconsumed parameters.

        ``{sessionId}`` is bound to ``session_id``; any other placeholder is
        taken (and removed) from ``params``.
        """
        remaining = dict(params or {})
        values: dict[str, Any] = {}
        for field in self.placeholders():
            if field == SESSION_ID:
                values[field] = session_id
            elif field in remaining:
                values[field] = remaining.pop(field)
            else:
                msg = f"Command '{self.name}' requires parameter '{field}'"
                raise InvalidArgumentError(msg)
        return self.path_template.format(**values), remaining


class DriverCommand:
    """Names of the base commands this package sends."""

    UPLOAD_FILE = "uploadFile"


BASE_COMMANDS: dict[str, CommandDescriptor] = {
    DriverCommand.UPLOAD_FILE: CommandDescriptor(
        DriverCommand.UPLOAD_FILE, HttpMethod.POST, "/session/{sessionId}/se/file"
    ),
}


class CommandTable:
    """Registry of command descriptors keyed by name."""

    def __init__(self, commands: Iterable[CommandDescriptor] = ()) -> None:
        self._commands: dict[str, CommandDescriptor] = {}
        self.register_all(commands)

    @classmethod
    def with_defaults(cls) -> CommandTable:
        """Create a table holding the base commands."""
        return cls(BASE_COMMANDS.values())

    def register(self, descriptor: CommandDescriptor) -> None:
        """Register a descriptor; identical re-registration is a no-op."""
        existing = self._commands.get(descriptor.name)
        if existing is not None:
            if existing == descriptor:
                return
            msg = (
                f"Command '{descriptor.name}' is already defined as "
                f"{existing.method.value} {existing.path_template}"
            )
            raise ValueError(msg)
        self._commands[descriptor.name] = descriptor
        logger.debug(
            "Registered command: %s (%s %s)",
            descriptor.name,
            descriptor.method.value,
            descriptor.path_template,
        )

    def register_all(self, descriptors: Iterable[CommandDescriptor]) -> None:
        """Register several descriptors."""
        for descriptor in descriptors:
            self.register(descriptor)

    def get(self, name: str) -> CommandDescriptor | None:
        """Get a descriptor by name."""
        return self._commands.get(name)

    def require(self, name: str) -> CommandDescriptor:
        """Get a descriptor by name or raise KeyError."""
        descriptor = self._commands.get(name)
        if descriptor is None:
            msg = f"Unknown command '{name}'"
            raise KeyError(msg)
        return descriptor

    def names(self) -> list[str]:
        """List all registered command names."""
        return list(self._commands.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[CommandDescriptor]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)
