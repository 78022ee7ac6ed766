"""
Module for linear unit multipliers
"""
__all__ = [
    'UNIT_FT', 'UNIT_KM', 'UNIT_M', 'UNIT_MI', 'UNIT_MULTIPLIERS', 'UNIT_NMI',
    'unit_multiplier',
]

from typing import Union

# Units per kilometer
UNIT_KM = 1.0
UNIT_M = 1000.0
UNIT_MI = 0.62137119
UNIT_FT = 3280.84
UNIT_NMI = 0.5399568

UNIT_MULTIPLIERS = {
    'km': UNIT_KM,
    'm': UNIT_M,
    'mi': UNIT_MI,
    'ft': UNIT_FT,
    'nmi': UNIT_NMI,
}


def unit_multiplier(unit: Union[str, float, int]) -> float:
    """
    Resolves a unit to its multiplier (units per kilometer).

    Numeric values are passed through untouched, so callers may supply any multiplier
    outside the catalog.

    Args:
        unit (Union[str, float]): The unit name (kilometer = 'km', meter = 'm',
        mile = 'mi', feet = 'ft', nautical mile = 'nmi') or a raw multiplier.

    Returns:
        float: The number of units per kilometer.
    """
    if not isinstance(unit, str):
        return unit

    try:
        return UNIT_MULTIPLIERS[unit.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown unit '{unit}'. Options: {list(UNIT_MULTIPLIERS.keys())}"
        ) from None
