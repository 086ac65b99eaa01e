"""Session augmentation: providers, discovery and the augmenter."""

from webdriver_augment.augment.augmenter import (
    PROVIDER_ENTRY_POINT_GROUP,
    AugmentedSession,
    Augmenter,
    build_command_table,
    load_providers,
)
from webdriver_augment.augment.provider import AugmenterProvider

__all__ = [
    "PROVIDER_ENTRY_POINT_GROUP",
    "AugmentedSession",
    "Augmenter",
    "AugmenterProvider",
    "build_command_table",
    "load_providers",
]
