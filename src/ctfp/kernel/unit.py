"""Unit type - the terminal object of the category of Python types."""

from __future__ import annotations

from typing import TypeAlias

Unit: TypeAlias = tuple[()]

UNIT: Unit = ()


def unit(_value: object) -> Unit:
    """Map any value to the unit value.

    Every type has exactly one function into Unit, and this is it:
    the input is discarded and UNIT is returned.

    Example:
        >>> unit(42)
        ()
        >>> unit("anything") == unit([1, 2, 3])
        True
    """
    return UNIT
