"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_theme,
    ValidationError,
)

__all__ = [
    "validate_theme",
    "ValidationError",
]
