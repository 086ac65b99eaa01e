"""Tests for provider discovery and session augmentation."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock, patch

import httpx
import pytest
from webdriver_augment.augment import (
    AugmentedSession,
    Augmenter,
    AugmenterProvider,
    build_command_table,
    load_providers,
)
from webdriver_augment.commands import CommandDescriptor, DriverCommand, HttpMethod
from webdriver_augment.errors import CapabilityNotAvailableError
from webdriver_augment.executor import HttpCommandExecutor
from webdriver_augment.files.file_detector import LocalFileDetector
from webdriver_augment.firefox.extensions import (
    INSTALL_EXTENSION,
    UNINSTALL_EXTENSION,
    AddHasExtensions,
    HasExtensions,
)
from webdriver_augment.session import RemoteSession


class HasPing:
    """Capability interface used by the counting provider."""


class CountingProvider(AugmenterProvider[HasPing]):
    """Provider that records how often its predicate is evaluated."""

    def __init__(self, browser: str = "chrome") -> None:
        self.browser = browser
        self.checks = 0

    def additional_commands(self) -> dict[str, CommandDescriptor]:
        return {"ping": CommandDescriptor("ping", HttpMethod.GET, "/session/{sessionId}/ping")}

    def is_applicable(self, capabilities: Any) -> bool:
        self.checks += 1
        return capabilities.get("browserName") == self.browser

    @property
    def described_interface(self) -> type[HasPing]:
        return HasPing

    def get_implementation(self, capabilities: Any, executor: Any, *, file_detector: Any) -> HasPing:
        return HasPing()


def _session(browser: str, executor: Any = None) -> RemoteSession:
    return RemoteSession("s-1", {"browserName": browser}, executor or MagicMock())


class TestAugmenter:
    def test_firefox_session_gets_extensions(self) -> None:
        augmented = Augmenter([AddHasExtensions()]).augment(_session("firefox"))

        assert isinstance(augmented, AugmentedSession)
        assert augmented.supports(HasExtensions)
        assert augmented.interfaces == [HasExtensions]
        assert isinstance(augmented.get_capability(HasExtensions), HasExtensions)

    def test_other_browsers_do_not_get_extensions(self) -> None:
        augmented = Augmenter([AddHasExtensions()]).augment(_session("chrome"))

        assert not augmented.supports(HasExtensions)
        with pytest.raises(CapabilityNotAvailableError, match="HasExtensions is not available for chrome"):
            augmented.get_capability(HasExtensions)

    def test_missing_capability_message_names_version_and_platform(self) -> None:
        session = RemoteSession(
            "s-1",
            {"browserName": "chrome", "browserVersion": "126.0", "platformName": "linux"},
            MagicMock(),
        )
        augmented = Augmenter([AddHasExtensions()]).augment(session)

        with pytest.raises(
            CapabilityNotAvailableError,
            match="HasExtensions is not available for chrome 126.0 on linux",
        ):
            augmented.get_capability(HasExtensions)

    def test_predicate_evaluated_once_per_augmentation(self) -> None:
        provider = CountingProvider()
        augmenter = Augmenter([provider, AddHasExtensions()])

        augmented = augmenter.augment(_session("chrome"))

        assert provider.checks == 1
        assert augmented.interfaces == [HasPing]

    def test_augmentation_does_no_io(self) -> None:
        executor = MagicMock(spec=["execute"])
        Augmenter([AddHasExtensions()]).augment(_session("firefox", executor))
        executor.execute.assert_not_called()

    def test_applicable_commands_are_added_to_executor(self) -> None:
        executor = MagicMock()
        Augmenter([AddHasExtensions(), CountingProvider()]).augment(_session("firefox", executor))

        executor.add_commands.assert_called_once()
        (descriptors,), _ = executor.add_commands.call_args
        assert {d.name for d in descriptors} == {INSTALL_EXTENSION, UNINSTALL_EXTENSION}

    def test_command_table_covers_all_providers(self) -> None:
        table = Augmenter([AddHasExtensions(), CountingProvider()]).command_table()
        assert {DriverCommand.UPLOAD_FILE, INSTALL_EXTENSION, UNINSTALL_EXTENSION, "ping"} <= set(
            table.names()
        )

    def test_sessions_are_independent(self) -> None:
        augmenter = Augmenter([AddHasExtensions()])
        first = augmenter.augment(_session("firefox"))
        second = augmenter.augment(_session("firefox"))
        assert first.get_capability(HasExtensions) is not second.get_capability(HasExtensions)


def test_end_to_end_install_over_http(tmp_path) -> None:
    requests: list[tuple[str, bytes]] = []
    responses = {
        "/session/s-1/se/file": "/remote/tmp/abc.xpi",
        "/session/s-1/moz/addon/install": "ext-id-123",
    }

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append((request.url.path, request.content))
        return httpx.Response(200, json={"value": responses[request.url.path]})

    client = httpx.Client(transport=httpx.MockTransport(handler), base_url="http://test")
    executor = HttpCommandExecutor("http://test", "s-1", client=client)
    session = RemoteSession(
        "s-1", {"browserName": "firefox"}, executor, file_detector=LocalFileDetector()
    )
    xpi = tmp_path / "ext.xpi"
    xpi.write_bytes(b"addon")

    extensions = Augmenter([AddHasExtensions()]).augment(session).get_capability(HasExtensions)

    assert extensions.install_extension(str(xpi)) == "ext-id-123"
    assert [path for path, _ in requests] == [
        "/session/s-1/se/file",
        "/session/s-1/moz/addon/install",
    ]
    assert b'"temporary":false' in requests[1][1].replace(b" ", b"")


def test_detector_change_after_augmentation_is_observed(tmp_path) -> None:
    executor = MagicMock()
    executor.execute.return_value = "ext-id"
    session = _session("firefox", executor)
    extensions = Augmenter([AddHasExtensions()]).augment(session).get_capability(HasExtensions)
    xpi = tmp_path / "ext.xpi"
    xpi.write_bytes(b"addon")

    extensions.install_extension(str(xpi))
    assert executor.execute.call_args_list[-1].args[0] == INSTALL_EXTENSION
    assert executor.execute.call_count == 1

    session.set_file_detector(LocalFileDetector())
    executor.execute.side_effect = ["/remote/ext.xpi", "ext-id"]
    extensions.install_extension(str(xpi))
    assert executor.execute.call_args_list[1].args[0] == DriverCommand.UPLOAD_FILE


class TestLoadProviders:
    def test_falls_back_to_builtin_providers(self) -> None:
        with patch("webdriver_augment.augment.augmenter.entry_points", return_value=[]):
            providers = load_providers()
        assert [type(p) for p in providers] == [AddHasExtensions]

    def test_loads_and_deduplicates_entry_points(self) -> None:
        good = MagicMock()
        good.name = "firefox-extensions"
        good.load.return_value = AddHasExtensions
        duplicate = MagicMock()
        duplicate.name = "firefox-again"
        duplicate.load.return_value = AddHasExtensions
        counting = MagicMock()
        counting.name = "ping"
        counting.load.return_value = CountingProvider

        with patch(
            "webdriver_augment.augment.augmenter.entry_points",
            return_value=[good, duplicate, counting],
        ):
            providers = load_providers()

        assert [type(p) for p in providers] == [AddHasExtensions, CountingProvider]

    def test_broken_entry_point_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        broken = MagicMock()
        broken.name = "broken"
        broken.load.side_effect = ImportError("no module")
        counting = MagicMock()
        counting.name = "ping"
        counting.load.return_value = CountingProvider

        with patch(
            "webdriver_augment.augment.augmenter.entry_points",
            return_value=[broken, counting],
        ):
            providers = load_providers()

        assert [type(p) for p in providers] == [CountingProvider]
        assert "Skipping provider entry point broken" in caplog.text


def test_build_command_table_rejects_conflicts() -> None:
    class Conflicting(CountingProvider):
        def additional_commands(self) -> dict[str, CommandDescriptor]:
            return {
                INSTALL_EXTENSION: CommandDescriptor(
                    INSTALL_EXTENSION, HttpMethod.GET, "/x"
                )
            }

    with pytest.raises(ValueError, match="already defined"):
        build_command_table([AddHasExtensions(), Conflicting()])
