"""
Floating point precision selection.

All of zgdist's arithmetic is carried out in a single numpy floating type, either
double (float64) or single (float32) width. The process-wide default is double; it
may be changed once at startup using set_precision(), or overridden per call using
the `precision` keyword argument accepted by every distance operation.
"""

__all__ = ['get_precision', 'precision_of', 'resolve_dtype', 'set_precision']

from typing import Literal, Optional, Type

import numpy as np

from zgdist.utils.logging import LOGGER

_DTYPES = {
    'double': np.float64,
    'single': np.float32,
}

# The precision in use (default double)
_PRECISION = 'double'


def set_precision(precision: Literal['double', 'single']):
    """
    Set the global floating point precision.

    Args:
        precision: 'double' or 'single'
    """
    global _PRECISION

    if precision not in _DTYPES:
        raise ValueError(f"Unknown precision '{precision}'. Options: {list(_DTYPES.keys())}")

    if precision != _PRECISION:
        LOGGER.info('Floating point precision changed from %s to %s', _PRECISION, precision)

    _PRECISION = precision


def get_precision() -> str:
    """Returns the name of the global floating point precision"""
    return _PRECISION


def resolve_dtype(precision: Optional[str] = None) -> Type[np.floating]:
    """
    Returns the numpy floating type for a precision name, falling back to the global
    precision when none is given.
    """
    if precision is None:
        return _DTYPES[_PRECISION]

    if precision not in _DTYPES:
        raise ValueError(f"Unknown precision '{precision}'. Options: {list(_DTYPES.keys())}")

    return _DTYPES[precision]


def precision_of(dtype) -> str:
    """Returns the precision name of a numpy floating type"""
    for name, _dtype in _DTYPES.items():
        if np.dtype(dtype) == np.dtype(_dtype):
            return name

    raise TypeError(f'Unsupported floating point type: {dtype}')
