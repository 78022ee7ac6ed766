"""
Representation of a specific point on earth
"""

__all__ = ['Coordinate']

from typing import Tuple, Union


class Coordinate:
    """
    Representation of a coordinate on the globe (i.e., a lat/lon pair), in degrees.

    Values are stored exactly as given; latitudes outside [-90, 90] and longitudes
    outside [-180, 180] are neither rejected nor wrapped.
    """

    __slots__ = ('latitude', 'longitude')

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        self.latitude = float(latitude)
        self.longitude = float(longitude)

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __iter__(self):
        return iter((self.latitude, self.longitude))

    def __len__(self):
        return 2

    def __repr__(self):
        return f'<Coordinate({self.latitude}, {self.longitude})>'

    @classmethod
    def from_dms(cls, lat: Tuple[int, int, float, str], lon: Tuple[int, int, float, str]):
        """
        Creates a Coordinate from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))

        Returns:
            Coordinate
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return Coordinate(convert(lat), convert(lon))

    def to_float(self) -> Tuple[float, float]:
        """Returns the coordinate as a (latitude, longitude) tuple"""
        return self.latitude, self.longitude
