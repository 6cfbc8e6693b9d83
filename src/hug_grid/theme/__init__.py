"""
Theme Package

Breakpoints, size tokens and gridder config, plus JSON theme loading.
"""

from .tokens import Theme, DEFAULT_THEME, DEFAULT_BREAKPOINTS, DEFAULT_SIZES
from .loader import load_theme, theme_from_dict, ThemeLoadError

__all__ = [
    "Theme",
    "DEFAULT_THEME",
    "DEFAULT_BREAKPOINTS",
    "DEFAULT_SIZES",
    "load_theme",
    "theme_from_dict",
    "ThemeLoadError",
]
