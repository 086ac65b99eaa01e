from webdriver_augment.augment import AugmentedSession, Augmenter, AugmenterProvider, load_providers
from webdriver_augment.capabilities import Browser, Capabilities
from webdriver_augment.commands import CommandDescriptor, CommandTable, DriverCommand, HttpMethod
from webdriver_augment.config import Settings, load_settings
from webdriver_augment.errors import (
    CapabilityNotAvailableError,
    InvalidArgumentError,
    LocalIOError,
    RemoteCommandError,
    TransportError,
    WebDriverError,
)
from webdriver_augment.executor import CommandExecutor, HttpCommandExecutor
from webdriver_augment.files import (
    LocalFileDetector,
    TrustingFileDetector,
    UselessFileDetector,
    zip_path,
)
from webdriver_augment.firefox import AddHasExtensions, FirefoxExtensions, HasExtensions
from webdriver_augment.session import RemoteSession
from webdriver_augment.transfer import upload_file

__all__ = [
    "AddHasExtensions",
    "AugmentedSession",
    "Augmenter",
    "AugmenterProvider",
    "Browser",
    "Capabilities",
    "CapabilityNotAvailableError",
    "CommandDescriptor",
    "CommandExecutor",
    "CommandTable",
    "DriverCommand",
    "FirefoxExtensions",
    "HasExtensions",
    "HttpCommandExecutor",
    "HttpMethod",
    "InvalidArgumentError",
    "LocalFileDetector",
    "LocalIOError",
    "RemoteCommandError",
    "RemoteSession",
    "Settings",
    "TransportError",
    "TrustingFileDetector",
    "UselessFileDetector",
    "WebDriverError",
    "load_providers",
    "load_settings",
    "upload_file",
]
