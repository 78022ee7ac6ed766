
from zgdist._version import __version__  # noqa: F401
from zgdist.utils.logging import LOGGER
from zgdist.coordinates import Coordinate
from zgdist.distance import (
    ScaleFactors, distance, path_length, path_length_arrays, scale_factors
)
from zgdist.ellipsoid import Ellipsoid, WGS84
from zgdist.precision import get_precision, set_precision
from zgdist.units import UNIT_FT, UNIT_KM, UNIT_M, UNIT_MI, UNIT_NMI

__all__ = [
    'Coordinate',
    'Ellipsoid',
    'ScaleFactors',
    'UNIT_FT',
    'UNIT_KM',
    'UNIT_M',
    'UNIT_MI',
    'UNIT_NMI',
    'WGS84',
    'distance',
    'get_precision',
    'path_length',
    'path_length_arrays',
    'scale_factors',
    'set_precision',
    'LOGGER',
]
