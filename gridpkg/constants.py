"""
Constants for the gridpkg library.

This module defines the constant values used throughout the package,
including class categories, file names and default configuration
values.
"""

from enum import Enum
from typing import Any, Dict, Final


class Category(str, Enum):
    """Categories of classes made by the factory."""
    BOUNDED_GRID = "bounded grid"
    UNBOUNDED_GRID = "unbounded grid"
    GRID_OBJECT = "grid object"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, label: str) -> "Category":
        """
        Convert a descriptive label into a Category.

        Accepts the enum values as well as member names, ignoring case,
        and treats underscores and hyphens as spaces.

        Raises:
            ValueError: If the label names no category
        """
        normalized = str(label).strip().lower().replace("_", " ").replace("-", " ")
        normalized = " ".join(normalized.split())
        for category in cls:
            if normalized == category.value:
                return category
        raise ValueError(f"Unknown class category: {label!r}")


# Default file names
DEFAULT_CONFIG_FILE: Final[str] = "gridpkg_config.json"

# Logging
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Default configuration settings
DEFAULT_CONFIG: Final[Dict[str, Dict[str, Any]]] = {
    "factory": {
        "bounded_grids": [],
        "unbounded_grids": [],
        "grid_objects": [],
        "default_bounded_grid": None,
        "default_unbounded_grid": None
    },
    "logging": {
        "level": DEFAULT_LOG_LEVEL,
        "format": DEFAULT_LOG_FORMAT,
        "log_file": None
    }
}
