from pytest import approx

from zgdist import Coordinate


def test_coordinate_init():
    c = Coordinate(1., 0.)
    assert c.latitude == 1.
    assert c.longitude == 0.

    c = Coordinate('1.0', '0.0')
    assert c.latitude == 1.
    assert c.longitude == 0.

    # Out of range values are kept as-is
    c = Coordinate(91., 181.)
    assert c.to_float() == (91., 181.)


def test_coordinate_hash():
    coords = [
        Coordinate(0., 0.),
        Coordinate(0., 0.),
        Coordinate(1., 1.)
    ]
    assert len(set(coords)) == 2
    assert Coordinate(0., 0.) in set(coords)
    assert Coordinate(1., 1.) in set(coords)


def test_coordinate_eq():
    assert Coordinate(0., 0.) == Coordinate(0., 0.)
    assert Coordinate(0., 0.) != Coordinate(1., 0.)
    assert Coordinate(0., 0.) != (0., 0.)


def test_coordinate_iter():
    lat, lon = Coordinate(1., 2.)
    assert (lat, lon) == (1., 2.)
    assert len(Coordinate(1., 2.)) == 2


def test_coordinate_repr():
    assert repr(Coordinate(1., 0.)) == '<Coordinate(1.0, 0.0)>'


def test_coordinate_to_float():
    assert Coordinate(1., 0.).to_float() == (1.0, 0.0)


def test_coordinate_from_dms():
    c = Coordinate.from_dms((45, 30, 0., 'S'), (10, 15, 36., 'E'))
    assert c.latitude == -45.5
    assert c.longitude == approx(10.26)
