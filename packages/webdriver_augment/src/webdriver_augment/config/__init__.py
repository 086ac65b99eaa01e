"""Runtime configuration."""

from webdriver_augment.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
