"""Configuration management for laraboot"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from laraboot.errors import ConfigError
from laraboot.installer.steps import STEP_NAMES

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".laraboot.yaml"


class ConfigManager:
    """Manage laraboot configuration"""

    def __init__(self, config_path: Optional[Path]):
        self.config_path = config_path

    def load(self) -> Dict[str, Any]:
        """Load configuration from file and environment"""
        config = self._load_defaults()

        # Load from file if exists
        if self.config_path is not None and self.config_path.exists():
            logger.debug("Loading config from %s", self.config_path)
            try:
                with open(self.config_path) as f:
                    file_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

            if not isinstance(file_config, dict):
                raise ConfigError(f"{self.config_path} must contain a mapping")
            config = self._merge(config, file_config)
            self._check_sections(config)

        # Override with environment variables
        config = self._apply_env_overrides(config)

        self._validate(config)
        return config

    def _load_defaults(self) -> Dict[str, Any]:
        """Load default configuration"""
        return {
            "project": {
                "marker_file": "composer.json",
                "env_file": ".env",
                "env_example": ".env.example",
                "installed_key": "APP_INSTALLED",
            },
            "commands": {},
            "logging": {
                "level": "warning",
            },
        }

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Merge two configuration dictionaries"""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides"""
        if marker := os.getenv("LARABOOT_MARKER_FILE"):
            config["project"]["marker_file"] = marker

        if env_file := os.getenv("LARABOOT_ENV_FILE"):
            config["project"]["env_file"] = env_file

        if env_example := os.getenv("LARABOOT_ENV_EXAMPLE"):
            config["project"]["env_example"] = env_example

        if key := os.getenv("LARABOOT_INSTALLED_KEY"):
            config["project"]["installed_key"] = key

        if level := os.getenv("LARABOOT_LOG_LEVEL"):
            config["logging"]["level"] = level

        return config

    def _check_sections(self, config: Dict[str, Any]) -> None:
        for section in ("project", "logging"):
            if not isinstance(config.get(section), dict):
                raise ConfigError(f"'{section}' must be a mapping")

    def _validate(self, config: Dict[str, Any]) -> None:
        for key, value in config["project"].items():
            if not isinstance(value, str) or not value:
                raise ConfigError(f"project.{key} must be a non-empty string")

        if not isinstance(config["logging"].get("level"), str):
            raise ConfigError("logging.level must be a string")

        commands = config.get("commands") or {}
        if not isinstance(commands, dict):
            raise ConfigError("'commands' must map step names to shell commands")

        for name, command in commands.items():
            if name not in STEP_NAMES:
                raise ConfigError(f"Unknown step in commands: {name}")
            if name == "cp_env":
                raise ConfigError("cp_env copies the env file and takes no command")
            if not isinstance(command, str) or not command.strip():
                raise ConfigError(f"commands.{name} must be a non-empty string")
