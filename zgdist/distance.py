"""
Fast approximate distance calculations using properties of ellipsoidal geometry.

The reference ellipsoid is linearized around a single latitude: the radii of curvature
in the meridian and in the prime vertical give the distance covered by one degree of
latitude and one degree of longitude, and distances are then measured on that flat
plane. Derive the scale factors once for a region and reuse them for every distance
in it; accuracy degrades with distance from the reference latitude and towards the
poles.

No inputs are validated. Out of range latitudes, NaN values and non-positive unit
multipliers propagate through the arithmetic.
"""

__all__ = [
    'ScaleFactors', 'distance', 'path_length', 'path_length_arrays', 'scale_factors',
]

from typing import Iterable, Optional, Sequence, Type, Union

import numpy as np

from zgdist._const import DEGREE
from zgdist.ellipsoid import Ellipsoid, WGS84
from zgdist.precision import precision_of, resolve_dtype
from zgdist.units import UNIT_KM, unit_multiplier
from zgdist.utils.logging import warn_once


class ScaleFactors:
    """
    Conversion multipliers from degrees of latitude/longitude to a linear unit, valid
    at the latitude they were derived at.

    Unpacks as a (lat_factor, lon_factor) pair, so that it may be splatted directly
    into distance() and path_length().

    Args:
        lat_factor:
            Linear units per degree of latitude (north-south)

        lon_factor:
            Linear units per degree of longitude (east-west)

    Keyword Args:
        precision: (str) (Default None)
            'double' or 'single'. When omitted, numpy-typed factors keep their own
            precision and plain numbers use the global precision.
    """

    __slots__ = ('lat_factor', 'lon_factor')

    def __init__(self, lat_factor, lon_factor, precision: Optional[str] = None):
        typed = [x for x in (lat_factor, lon_factor) if isinstance(x, np.floating)]
        if len({x.dtype for x in typed}) > 1:
            raise TypeError('Scale factors must share a single floating point precision')

        if precision is None and typed:
            precision = precision_of(typed[0].dtype)

        real = resolve_dtype(precision)
        if typed and typed[0].dtype != np.dtype(real):
            raise TypeError(
                f'Scale factors are not held in {precision} precision; '
                'precisions may not be mixed within one computation'
            )

        self.lat_factor = real(lat_factor)
        self.lon_factor = real(lon_factor)

    def __eq__(self, other):
        if not isinstance(other, ScaleFactors):
            return False

        return (
            self.precision == other.precision and
            self.lat_factor == other.lat_factor and
            self.lon_factor == other.lon_factor
        )

    def __hash__(self):
        return hash((self.precision, self.lat_factor, self.lon_factor))

    def __iter__(self):
        return iter((self.lat_factor, self.lon_factor))

    def __repr__(self):
        return f'<ScaleFactors({self.lat_factor}, {self.lon_factor}, {self.precision})>'

    @property
    def precision(self) -> str:
        """The floating point precision the factors are held in"""
        return precision_of(self.lat_factor.dtype)

    def distance(self, start: Sequence[float], end: Sequence[float]):
        """
        Distance between two (lat, lon) coordinates using these factors.

        Args:
            start:
                The first coordinate, as a Coordinate or a (lat, lon) pair

            end:
                The second coordinate, as a Coordinate or a (lat, lon) pair

        Returns:
            The distance, in the unit the factors were derived for
        """
        lat1, lon1 = start
        lat2, lon2 = end
        return distance(lat1, lon1, lat2, lon2, self.lat_factor, self.lon_factor)

    def path_length(self, coordinates: Iterable[Sequence[float]]):
        """Length of a path of (lat, lon) coordinates using these factors"""
        return path_length(coordinates, self.lat_factor, self.lon_factor)


def _evaluation_dtype(lat_factor, lon_factor, precision: Optional[str]) -> Type[np.floating]:
    """
    Determines the floating point type a distance is evaluated in, refusing to combine
    scale factors held in one precision with a request for the other.
    """
    factor_dtypes = {
        x.dtype for x in (lat_factor, lon_factor) if isinstance(x, np.floating)
    }
    if len(factor_dtypes) > 1:
        raise TypeError('Scale factors must share a single floating point precision')

    if precision is None:
        if factor_dtypes:
            return resolve_dtype(precision_of(factor_dtypes.pop()))
        return resolve_dtype()

    real = resolve_dtype(precision)
    if factor_dtypes and factor_dtypes.pop() != np.dtype(real):
        raise TypeError(
            f'Scale factors were not derived in {precision} precision; '
            'precisions may not be mixed within one computation'
        )

    return real


def scale_factors(
    latitude: float,
    unit: Union[str, float] = UNIT_KM,
    *,
    ellipsoid: Ellipsoid = WGS84,
    precision: Optional[str] = None,
) -> ScaleFactors:
    """
    Calculates the unit per degree difference at a given latitude, by computing the
    radius of curvature in the meridian and in the prime vertical and multiplying each
    by a unit multiplier.

    See:
        https://en.wikipedia.org/wiki/Earth_radius#Radii_of_curvature

    Args:
        latitude:
            The reference latitude, in degrees

        unit:
            A unit name from zgdist.units (e.g. 'km', 'mi') or a raw multiplier
            expressed in units per kilometer

    Keyword Args:
        ellipsoid: (Ellipsoid) (Default WGS84)
            The reference ellipsoid

        precision: (str) (Default None)
            'double' or 'single'; the global precision if not provided

    Returns:
        ScaleFactors
    """
    real = resolve_dtype(precision)
    unitm = unit_multiplier(unit)
    if unitm <= 0:
        warn_once(
            'Non-positive unit multipliers produce degenerate distances. '
            '(this warning will not repeat)'
        )

    one = real(1)
    degree = real(DEGREE)
    a = real(ellipsoid.a)
    e2 = real(ellipsoid.e2)
    unitm = real(unitm)

    cos_lat = np.cos(real(latitude) * degree)
    # sin^2 taken as 1 - cos^2 to avoid a second trigonometric call
    v = np.sqrt(one - e2 * (one - cos_lat * cos_lat))

    # Meridional radius of curvature (N-S)
    lat_factor = degree * (a * (one - e2)) / (v * v * v) * unitm

    # Prime vertical (transverse) radius of curvature (E-W)
    lon_factor = degree * cos_lat * (a / v) * unitm

    return ScaleFactors(lat_factor, lon_factor)


def distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    lat_factor: float,
    lon_factor: float,
    *,
    precision: Optional[str] = None,
):
    """
    Calculates the distance between two points on the plane described by a pair of
    scale factors.

    Args:
        lat1, lon1:
            The first point, in degrees

        lat2, lon2:
            The second point, in degrees

        lat_factor, lon_factor:
            Scale factors, as produced by scale_factors()

    Keyword Args:
        precision: (str) (Default None)
            'double' or 'single'; defaults to the precision of the scale factors

    Returns:
        The distance, in the unit the scale factors were derived for
    """
    real = _evaluation_dtype(lat_factor, lon_factor, precision)
    dy = (real(lat2) - real(lat1)) * real(lat_factor)
    dx = (real(lon2) - real(lon1)) * real(lon_factor)
    return np.sqrt(dy * dy + dx * dx)


def path_length_arrays(
    latitudes: Sequence[float],
    longitudes: Sequence[float],
    lat_factor: float,
    lon_factor: float,
    *,
    precision: Optional[str] = None,
):
    """
    Calculates the length of a path given as parallel arrays of latitudes and
    longitudes, i.e. the sum of the distances between consecutive points.

    A single point has a length of zero.

    Args:
        latitudes:
            The latitude of each point, in degrees

        longitudes:
            The longitude of each point, in degrees

        lat_factor, lon_factor:
            Scale factors, as produced by scale_factors()

    Keyword Args:
        precision: (str) (Default None)
            'double' or 'single'; defaults to the precision of the scale factors

    Returns:
        The path length, in the unit the scale factors were derived for
    """
    real = _evaluation_dtype(lat_factor, lon_factor, precision)
    lats = np.asarray(latitudes, dtype=real)
    lons = np.asarray(longitudes, dtype=real)

    if lats.ndim != 1 or lats.shape != lons.shape:
        raise ValueError(
            'Latitudes and longitudes must be one-dimensional and of equal length; '
            f'received shapes {lats.shape} and {lons.shape}'
        )

    if lats.size == 0:
        raise ValueError('A path must contain at least one coordinate')

    dy = np.diff(lats) * real(lat_factor)
    dx = np.diff(lons) * real(lon_factor)
    return np.sqrt(dy * dy + dx * dx).sum(dtype=real)


def path_length(
    coordinates: Iterable[Sequence[float]],
    lat_factor: float,
    lon_factor: float,
    *,
    precision: Optional[str] = None,
):
    """
    Calculates the length of a path, i.e. the sum of the distances between each pair
    of consecutive coordinates.

    A single coordinate has a length of zero.

    Args:
        coordinates:
            An ordered sequence of Coordinates or (lat, lon) pairs, or an (n, 2) array

        lat_factor, lon_factor:
            Scale factors, as produced by scale_factors()

    Keyword Args:
        precision: (str) (Default None)
            'double' or 'single'; defaults to the precision of the scale factors

    Returns:
        The path length, in the unit the scale factors were derived for
    """
    real = _evaluation_dtype(lat_factor, lon_factor, precision)
    if isinstance(coordinates, np.ndarray):
        coords = coordinates.astype(real, copy=False)
    else:
        coords = np.array([tuple(x) for x in coordinates], dtype=real)

    if coords.size == 0:
        raise ValueError('A path must contain at least one coordinate')

    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValueError(f'Coordinates must be (lat, lon) pairs; received shape {coords.shape}')

    return path_length_arrays(
        coords[:, 0],
        coords[:, 1],
        lat_factor,
        lon_factor,
        precision=precision_of(real),
    )
