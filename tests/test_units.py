import pytest

from zgdist.units import *


def test_unit_multiplier():
    # Test cases: (unit, expected_result)
    test_data = [
        ('km', 1.0),
        ('m', 1000.0),
        ('mi', 0.62137119),
        ('ft', 3280.84),
        ('nmi', 0.5399568),
        ('KM', 1.0),
    ]

    for unit, expected_result in test_data:
        assert unit_multiplier(unit) == expected_result


def test_unit_multiplier_raw():
    assert unit_multiplier(2.5) == 2.5
    assert unit_multiplier(UNIT_FT) == UNIT_FT
    assert unit_multiplier(-1) == -1


def test_unit_multiplier_unknown():
    with pytest.raises(ValueError):
        unit_multiplier('yd')
