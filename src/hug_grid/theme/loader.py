"""
Module: theme.loader

Purpose:
    Load a gridder theme from a JSON file. Values missing from the file
    fall back to the default theme, size tokens from the file are added
    over the default tokens and the ``config.hug`` section is merged
    over the default gridder config.

Key Functions:
    - load_theme(): Load and validate a theme file
    - theme_from_dict(): Build a Theme from parsed JSON

Key Classes:
    - ThemeLoadError: Theme file could not be read

Dependencies:
    - json (std)
    - core.schemas.validator: Schema validation

Used By:
    - cli: --theme option
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from hug_grid.core.schemas.validator import validate_theme
from hug_grid.layout.config import extend_hug_config

from .tokens import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)


class ThemeLoadError(Exception):
    """Error reading a theme file."""
    pass


def theme_from_dict(data: Mapping[str, Any]) -> Theme:
    """
    Build a Theme from parsed theme JSON.

    Args:
        data: Dict with optional ``breakpoints``, ``sizes`` and ``config.hug``

    Returns:
        Theme with defaults filled in

    Raises:
        ValidationError: If data does not match the theme schema
    """
    validate_theme(data)

    breakpoints = tuple(data.get("breakpoints", DEFAULT_THEME.breakpoints))
    sizes = {**DEFAULT_THEME.sizes, **data.get("sizes", {})}
    hug_config = extend_hug_config(data.get("config", {}).get("hug", {}))["hug"]

    return Theme(breakpoints=breakpoints, sizes=sizes, hug=hug_config)


def load_theme(path: Path) -> Theme:
    """
    Load a theme file.

    Args:
        path: Path to a JSON theme file

    Returns:
        Parsed Theme

    Raises:
        ThemeLoadError: If the file is missing or not valid JSON
        ValidationError: If the content does not match the theme schema
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ThemeLoadError(f"Theme file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ThemeLoadError(f"Invalid JSON in {path}: {e}") from e

    theme = theme_from_dict(data)
    logger.debug(f"Loaded theme from {path} with breakpoints {', '.join(theme.breakpoints)}")
    return theme
