"""Configuration loading for laraboot."""

from .manager import DEFAULT_CONFIG_FILE, ConfigManager

__all__ = ["ConfigManager", "DEFAULT_CONFIG_FILE"]
