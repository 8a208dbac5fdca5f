"""Configuration management for gridpkg.

Provides configuration handling with sectioned settings, JSON file loading
merged over built-in defaults, and a process-wide configuration instance.
The ``factory`` section names the grid and grid-object classes an
application makes available.
"""

import copy
import logging
import os
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, List, Optional, TypeVar, Union

from gridpkg.constants import DEFAULT_CONFIG, DEFAULT_CONFIG_FILE
from gridpkg.utils.errors import ConfigError
from gridpkg.utils.file_utils import load_json, save_json

T = TypeVar('T')

logger = logging.getLogger(__name__)

# Global configuration instance
_global_config = None


class ConfigProvider(ABC):
    """
    Abstract configuration provider interface.

    Can be implemented by various configuration sources like files,
    environment variables or in-memory dictionaries.
    """

    @abstractmethod
    def get_config_value(self, section: str, key: str, default: Any = None) -> Any:
        """Get a configuration value from this provider."""
        pass

    @abstractmethod
    def get_section(self, section: str) -> Dict[str, Any]:
        """Get an entire section from this provider."""
        pass


class FileConfigProvider(ConfigProvider):
    """Configuration provider backed by data loaded from a JSON file."""

    def __init__(self, config_data: Dict[str, Any]) -> None:
        self._config = config_data

    def get_config_value(self, section: str, key: str, default: Any = None) -> Any:
        section_values = self._config.get(section)
        if not isinstance(section_values, dict):
            return default
        return section_values.get(key, default)

    def get_section(self, section: str) -> Dict[str, Any]:
        section_values = self._config.get(section, {})
        return dict(section_values) if isinstance(section_values, dict) else {}


class Config:
    """
    Configuration manager for gridpkg.

    Handles loading, saving, and accessing configuration settings.
    Values from loaded files take precedence over the built-in defaults.
    """

    def __init__(self) -> None:
        """Initialize the configuration with default values."""
        self._config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        self._providers: List[ConfigProvider] = [
            FileConfigProvider(self._config)
        ]

    def get(self, section: Optional[str] = None, key: Optional[str] = None,
            default: Optional[T] = None) -> Union[Dict[str, Any], Any, T]:
        """
        Get configuration value(s).

        Args:
            section: Section name (optional).
            key: Configuration key within section (optional).
            default: Default value if section/key not found.

        Returns:
            Configuration value, section dict, or default value.
        """
        if section is None:
            return copy.deepcopy(self._config)

        if section not in self._config:
            return default

        if key is None:
            return copy.deepcopy(self._config[section])

        for provider in self._providers:
            value = provider.get_config_value(section, key, None)
            if value is not None:
                return value

        return default

    def set(self, section: str, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            section: Section name.
            key: Configuration key.
            value: Value to set.
        """
        if section not in self._config:
            self._config[section] = {}

        self._config[section][key] = value

    def get_component_config(self, component_name: str) -> Dict[str, Any]:
        """Get the configuration section for a component, or an empty dict."""
        return self.get(component_name, default={})

    def load_from_file(self, file_path: Union[str, Path]) -> None:
        """
        Load configuration from a JSON file.

        Args:
            file_path: Path to the JSON config file.

        Raises:
            ConfigError: If the file cannot be read or is not a JSON object.
        """
        try:
            file_config = load_json(file_path)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Failed to load config from {file_path}: {e}") from e

        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {file_path} must contain a JSON object")

        # File values take precedence over defaults
        for section, section_values in file_config.items():
            if isinstance(section_values, dict):
                if not isinstance(self._config.get(section), dict):
                    self._config[section] = {}
                for key, value in section_values.items():
                    self._config[section][key] = value
            else:
                self._config[section] = section_values

        self._providers.insert(0, FileConfigProvider(file_config))
        logger.debug(f"Loaded configuration from {file_path}")

    def save_to_file(self, file_path: Union[str, Path]) -> None:
        """
        Save configuration to a JSON file.

        Raises:
            ConfigError: If the configuration cannot be written.
        """
        try:
            save_json(self._config, file_path)
        except (OSError, TypeError) as e:
            raise ConfigError(f"Failed to save config to {file_path}: {e}") from e

    @contextmanager
    def component_context(self, component_name: str):
        """
        Context manager for component-specific configuration.

        Yields:
            Dict[str, Any]: Component configuration.
        """
        yield self.get_component_config(component_name)


def get_config() -> Config:
    """
    Get the global configuration instance.

    If no global instance exists, one is created, loading
    ``gridpkg_config.json`` from the working directory when present.
    """
    global _global_config
    if _global_config is None:
        _global_config = Config()

        default_path = os.path.join(os.getcwd(), DEFAULT_CONFIG_FILE)
        if os.path.exists(default_path):
            _global_config.load_from_file(default_path)

    return _global_config


def set_global_config(config: Optional[Config]) -> None:
    """Set (or with None, reset) the global configuration instance."""
    global _global_config
    _global_config = config


def load_config(file_path: Union[str, Path]) -> Config:
    """
    Load configuration from a file and return a new Config instance.

    Args:
        file_path: Path to the JSON config file.

    Returns:
        Config: Configuration instance loaded from the file.
    """
    config = Config()
    config.load_from_file(file_path)
    return config
