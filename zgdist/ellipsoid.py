"""
Reference ellipsoid definitions
"""

__all__ = ['Ellipsoid', 'WGS84']

from zgdist._const import WGS84_A, WGS84_B


class Ellipsoid:
    """
    An immutable reference ellipsoid, described by its semi-major and semi-minor axes.

    Axis lengths are in kilometers; every scale factor derived from the ellipsoid is
    therefore expressed in kilometers before the unit multiplier is applied.

    Args:
        a:
            The semi-major (equatorial) axis, in kilometers

        b:
            The semi-minor (polar) axis, in kilometers
    """

    __slots__ = ('_a', '_b')

    def __init__(self, a: float, b: float):
        object.__setattr__(self, '_a', float(a))
        object.__setattr__(self, '_b', float(b))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self.a == other.a and self.b == other.b

    def __hash__(self):
        return hash((self.a, self.b))

    def __repr__(self):
        return f'<Ellipsoid(a={self.a}, b={self.b})>'

    @property
    def a(self) -> float:
        """Semi-major axis (km)"""
        return self._a

    @property
    def b(self) -> float:
        """Semi-minor axis (km)"""
        return self._b

    @property
    def flattening(self) -> float:
        """The ellipsoid's flattening, (a - b) / a"""
        return (self.a - self.b) / self.a

    @property
    def e2(self) -> float:
        """The ellipsoid's squared eccentricity, f * (2 - f)"""
        f = self.flattening
        return f * (2 - f)


WGS84 = Ellipsoid(WGS84_A, WGS84_B)
