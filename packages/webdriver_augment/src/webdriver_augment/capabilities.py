"""Read-only view of the capabilities a remote session declared."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any


class Capabilities(Mapping[str, Any]):
    """Immutable mapping of capability names to values."""

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data or {})

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Capabilities({self._data!r})"

    @property
    def browser_name(self) -> str | None:
        return self._data.get("browserName")

    @property
    def browser_version(self) -> str | None:
        return self._data.get("browserVersion")

    @property
    def platform_name(self) -> str | None:
        return self._data.get("platformName")


class Browser(str, Enum):
    """Browsers identified by the W3C ``browserName`` capability."""

    CHROME = "chrome"
    EDGE = "MicrosoftEdge"
    FIREFOX = "firefox"
    SAFARI = "safari"

    def is_(self, capabilities: Mapping[str, Any] | None) -> bool:
        """Return True if the capabilities declare this browser."""
        if capabilities is None:
            return False
        return capabilities.get("browserName") == self.value
