"""Contract for contributing vendor capabilities to a session."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Mapping

    from webdriver_augment.commands import CommandDescriptor
    from webdriver_augment.executor import CommandExecutor
    from webdriver_augment.files.file_detector import FileDetector

T = TypeVar("T")


class AugmenterProvider(ABC, Generic[T]):
    """Declares extra remote commands and builds a capability object for a session.

    Implementations must be pure wiring: no I/O in any method below.
    """

    @abstractmethod
    def additional_commands(self) -> Mapping[str, CommandDescriptor]:
        """Return the commands this provider adds, keyed by name."""

    @abstractmethod
    def is_applicable(self, capabilities: Mapping[str, Any]) -> bool:
        """Return True if the session's capabilities call for this provider."""

    @property
    @abstractmethod
    def described_interface(self) -> type[T]:
        """The capability interface the implementation satisfies."""

    @abstractmethod
    def get_implementation(
        self,
        capabilities: Mapping[str, Any],
        executor: CommandExecutor,
        *,
        file_detector: FileDetector,
    ) -> T:
        """Build the capability object bound to executor."""
