"""Utility functions for file operations.

Small helpers for reading and writing the JSON configuration files that
name grid and grid-object classes, accepting both string and Path objects.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, TypeVar, Union, overload

logger = logging.getLogger(__name__)

# Type aliases
PathLike = Union[str, Path]
T = TypeVar('T')


def ensure_dir(dir_path: PathLike) -> Path:
    """
    Ensure a directory exists, creating it and its parents if necessary.

    Args:
        dir_path: Path to the directory (string or Path object).

    Returns:
        Path: Path object for the directory.

    Raises:
        OSError: If the directory cannot be created.
    """
    path_obj = Path(dir_path)
    try:
        path_obj.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Ensured directory exists: {path_obj}")
    except OSError as e:
        logger.error(f"Failed to create or access directory {path_obj}: {e}")
        raise
    return path_obj


@overload
def load_json(file_path: PathLike) -> Dict[str, Any]: ...

@overload
def load_json(file_path: PathLike, default: T) -> Union[Dict[str, Any], T]: ...


def load_json(file_path: PathLike, default: Optional[T] = None) -> Union[Dict[str, Any], T]:
    """
    Load JSON data from a file.

    Args:
        file_path: Path to the JSON file (string or Path object).
        default: Value to return if the file is missing, empty or invalid.
                 If None (default), errors are raised instead.

    Returns:
        Parsed JSON data, or the default value.

    Raises:
        FileNotFoundError: If the file does not exist and no default is provided.
        json.JSONDecodeError: If the file contains invalid JSON and no default is provided.
        ValueError: If the file is empty and no default is provided.
    """
    path_obj = Path(file_path)
    if not path_obj.is_file():
        if default is not None:
            logger.warning(f"JSON file not found at {path_obj}, returning default.")
            return default
        raise FileNotFoundError(f"JSON file not found: {file_path}")

    try:
        with path_obj.open('r', encoding='utf-8') as f:
            content = f.read()
    except OSError as e:
        if default is not None:
            logger.warning(f"Could not read file {path_obj} (Error: {e}), returning default.")
            return default
        logger.error(f"Error reading file {path_obj}: {e}")
        raise FileNotFoundError(f"Could not read file: {file_path}") from e

    if not content.strip():
        if default is not None:
            logger.warning(f"JSON file is empty at {path_obj}, returning default.")
            return default
        raise ValueError(f"JSON file is empty: {file_path}")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        if default is not None:
            logger.warning(f"Invalid JSON in file {path_obj} (Error: {e}), returning default.")
            return default
        logger.error(f"Failed to decode JSON from {path_obj}: {e}")
        raise
    logger.debug(f"Successfully loaded JSON from: {path_obj}")
    return data


def save_json(data: Dict[str, Any], file_path: PathLike, pretty: bool = True) -> None:
    """
    Save data as JSON to a file.

    Ensures the parent directory exists before writing.

    Args:
        data: Data dictionary to save as JSON.
        file_path: Path where to save the JSON file (string or Path object).
        pretty: If True (default), format JSON with indentation for readability.

    Raises:
        TypeError: If the data is not JSON serializable.
        OSError: If the file cannot be written.
    """
    path_obj = Path(file_path)
    ensure_dir(path_obj.parent)

    try:
        with path_obj.open('w', encoding='utf-8') as f:
            if pretty:
                json.dump(data, f, indent=2, sort_keys=True, ensure_ascii=False)
            else:
                json.dump(data, f, ensure_ascii=False)
        logger.debug(f"Successfully saved JSON to: {path_obj}")
    except TypeError as e:
        logger.error(f"Data for {path_obj} is not JSON serializable: {e}", exc_info=True)
        raise
    except OSError as e:
        logger.error(f"Failed to write JSON to {path_obj}: {e}")
        raise
