"""Attach vendor capabilities to sessions based on their declared capabilities."""

from __future__ import annotations

import logging
from importlib.metadata import entry_points
from typing import TYPE_CHECKING, Any, TypeVar

from webdriver_augment.commands import CommandTable
from webdriver_augment.errors import CapabilityNotAvailableError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from webdriver_augment.augment.provider import AugmenterProvider
    from webdriver_augment.capabilities import Capabilities
    from webdriver_augment.session import RemoteSession

logger = logging.getLogger(__name__)

PROVIDER_ENTRY_POINT_GROUP = "webdriver_augment.providers"

T = TypeVar("T")


def _builtin_providers() -> list[AugmenterProvider[Any]]:
    from webdriver_augment.firefox.extensions import AddHasExtensions  # noqa: PLC0415

    return [AddHasExtensions()]


def load_providers() -> list[AugmenterProvider[Any]]:
    """Instantiate every provider registered under the provider entry-point group.

    Falls back to the built-in providers when none are registered (e.g. when
    running from a source tree that was never installed).
    """
    providers: list[AugmenterProvider[Any]] = []
    seen: set[type] = set()
    for entry_point in entry_points(group=PROVIDER_ENTRY_POINT_GROUP):
        try:
            provider_cls = entry_point.load()
            provider = provider_cls()
        except Exception:  # noqa: BLE001 - a broken plugin must not break the others
            logger.warning("Skipping provider entry point %s", entry_point.name, exc_info=True)
            continue
        if type(provider) in seen:
            continue
        seen.add(type(provider))
        providers.append(provider)
        logger.debug("Loaded provider %s from entry point %s", type(provider).__name__, entry_point.name)

    if not providers:
        providers = _builtin_providers()
    return providers


def build_command_table(
    providers: Iterable[AugmenterProvider[Any]], base: CommandTable | None = None
) -> CommandTable:
    """Build a dispatch table holding the base commands and every provider's commands."""
    table = base if base is not None else CommandTable.with_defaults()
    for provider in providers:
        table.register_all(provider.additional_commands().values())
    return table


class AugmentedSession:
    """A session together with the capability objects its providers supplied."""

    def __init__(self, session: RemoteSession, implementations: Mapping[type, Any]) -> None:
        self._session = session
        self._implementations = dict(implementations)

    @property
    def session(self) -> RemoteSession:
        return self._session

    @property
    def session_id(self) -> str:
        return self._session.session_id

    @property
    def capabilities(self) -> Capabilities:
        return self._session.capabilities

    @property
    def interfaces(self) -> list[type]:
        """List the capability interfaces available on this session."""
        return list(self._implementations.keys())

    def supports(self, interface: type) -> bool:
        """Return True if interface is available on this session."""
        return interface in self._implementations

    def get_capability(self, interface: type[T]) -> T:
        """Return the implementation of interface for this session.

        Raises:
            CapabilityNotAvailableError: If no applicable provider supplies it.
        """
        implementation = self._implementations.get(interface)
        if implementation is None:
            caps = self._session.capabilities
            target = caps.browser_name or "unknown browser"
            if caps.browser_version:
                target = f"{target} {caps.browser_version}"
            if caps.platform_name:
                target = f"{target} on {caps.platform_name}"
            msg = f"{interface.__name__} is not available for {target}"
            raise CapabilityNotAvailableError(msg)
        return implementation

    def execute(self, command_name: str, params: Mapping[str, Any] | None = None) -> Any:
        """Execute a command on the wrapped session."""
        return self._session.execute(command_name, params)


class Augmenter:
    """Evaluates providers against a session and exposes the applicable ones."""

    def __init__(self, providers: Iterable[AugmenterProvider[Any]] | None = None) -> None:
        self._providers = list(providers) if providers is not None else load_providers()

    @property
    def providers(self) -> list[AugmenterProvider[Any]]:
        return list(self._providers)

    def command_table(self, base: CommandTable | None = None) -> CommandTable:
        """Dispatch table covering every known provider, for building executors."""
        return build_command_table(self._providers, base)

    def augment(self, session: RemoteSession) -> AugmentedSession:
        """Wrap session with the capability objects of all applicable providers."""
        implementations: dict[type, Any] = {}
        for provider in self._providers:
            if not provider.is_applicable(session.capabilities):
                continue

            add_commands = getattr(session.executor, "add_commands", None)
            if add_commands is not None:
                add_commands(provider.additional_commands().values())

            interface = provider.described_interface
            implementations[interface] = provider.get_implementation(
                session.capabilities,
                session.executor,
                file_detector=session,
            )
            logger.debug(
                "Session %s augmented with %s", session.session_id, interface.__name__
            )
        return AugmentedSession(session, implementations)
