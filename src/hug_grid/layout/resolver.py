"""
Module: layout.resolver

Purpose:
    Closest-value resolution for breakpoint-keyed settings. Values are
    declared mobile-first: a breakpoint without its own entry inherits
    the value of the nearest smaller breakpoint that has one.

Key Functions:
    - get_closest_value(): Resolve a sparse mapping for one breakpoint

Algorithm:
    1. An explicit entry for the current breakpoint always wins, even
       when the value is falsy (0, "", [])
    2. Otherwise walk the breakpoint order backwards from the current
       position and return the first truthy entry
    3. Otherwise return the default (None when not given)

Dependencies:
    - typing (std)

Used By:
    - layout.region: Gap, column count and span resolution
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence, TypeVar, overload

logger = logging.getLogger(__name__)

T = TypeVar("T")


@overload
def get_closest_value(
    values: Mapping[str, T],
    breakpoint: str,
    breakpoints: Sequence[str],
) -> Optional[T]: ...


@overload
def get_closest_value(
    values: Mapping[str, T],
    breakpoint: str,
    breakpoints: Sequence[str],
    default: T,
) -> T: ...


def get_closest_value(values, breakpoint, breakpoints, default=None):
    """
    Resolve the value in effect at ``breakpoint``.

    The backward scan skips falsy entries while the exact match does
    not, so ``{"base": 4, "md": 0}`` yields 0 at ``md`` but 4 at ``lg``.

    Args:
        values: Mapping of breakpoint -> value, any subset of breakpoints
        breakpoint: Breakpoint to resolve for
        breakpoints: All breakpoints, smallest first
        default: Returned when nothing matches

    Returns:
        The matched value, or ``default``

    Example:
        >>> order = ["base", "sm", "md", "lg"]
        >>> get_closest_value({"base": 1, "md": 3}, "sm", order)
        1
        >>> get_closest_value({"base": 1, "md": 3}, "lg", order)
        3
    """
    if breakpoint in values:
        return values[breakpoint]

    try:
        stop_index = list(breakpoints).index(breakpoint)
    except ValueError:
        stop_index = -1

    while stop_index >= 0:
        key = breakpoints[stop_index]
        if values.get(key):
            logger.debug(f"Breakpoint {breakpoint} inherits value from {key}")
            return values[key]
        stop_index -= 1

    return default
