"""
Utilities Module - Common helper functions.
==========================================

Provides utility functions for:
- File I/O (JSON) and Pydantic model lists
- Directory management
- Currency formatting for display
"""

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel

from gradcompass.shared.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


# ─────────────────────────────────────────────────────────────────────────────
# Directory Management
# ─────────────────────────────────────────────────────────────────────────────


def ensure_parent_directory(file_path: Path) -> Path:
    """
    Ensure the parent directory of a file exists.

    Args:
        file_path: File path

    Returns:
        The file path (for chaining)
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    return file_path


# ─────────────────────────────────────────────────────────────────────────────
# JSON File I/O
# ─────────────────────────────────────────────────────────────────────────────


def load_json(file_path: Path) -> Any:
    """
    Load data from a JSON file.

    Args:
        file_path: Path to JSON file

    Returns:
        Parsed JSON data

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If file is not valid JSON
    """
    file_path = Path(file_path)

    with open(file_path, "r", encoding="utf-8") as f:
        return json.load(f)


def save_json(file_path: Path, data: Any, indent: int = 2) -> None:
    """
    Save data to a JSON file.

    Args:
        file_path: Path to JSON file
        data: Data to save (must be JSON serializable)
        indent: Indentation level (default: 2)
    """
    file_path = Path(file_path)
    ensure_parent_directory(file_path)

    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False, default=str)

    logger.debug(f"Saved JSON to {file_path}")


# ─────────────────────────────────────────────────────────────────────────────
# Pydantic Model I/O Helpers
# ─────────────────────────────────────────────────────────────────────────────


def load_models_from_json(file_path: Path, model_class: type[T]) -> list[T]:
    """
    Load a list of Pydantic models from a JSON file.

    Args:
        file_path: Path to JSON file containing a list (or a single object)
        model_class: Pydantic model class

    Returns:
        List of model instances
    """
    data = load_json(file_path)
    if not isinstance(data, list):
        data = [data]
    return [model_class.model_validate(item) for item in data]


# ─────────────────────────────────────────────────────────────────────────────
# Formatting
# ─────────────────────────────────────────────────────────────────────────────


def format_usd(amount: float) -> str:
    """
    Format a dollar amount with thousands separators.

    Example:
        >>> format_usd(55000)
        '$55,000'
    """
    return f"${amount:,.0f}"
