"""
Utility functions and helpers for the gridpkg library.

This module provides various utility functionalities:
- config: Configuration management
- errors: Exception hierarchy
- file_utils: JSON file helpers
- logging: Logger setup
"""

from gridpkg.utils.config import Config, get_config, set_global_config, load_config
from gridpkg.utils.file_utils import ensure_dir, load_json, save_json
from gridpkg.utils.logging import setup_logger

__all__ = [
    # Configuration
    "Config",
    "get_config",
    "set_global_config",
    "load_config",

    # File utilities
    "ensure_dir",
    "load_json",
    "save_json",

    # Logging
    "setup_logger",
]
