from pytest import approx

from zgdist.distance import ScaleFactors


def assert_factors_equal(f1: ScaleFactors, f2: ScaleFactors, rel=1e-12):
    """
    Asserts that two sets of scale factors are equal within a relative tolerance.

    Args:
        f1: The first ScaleFactors
        f2: The second ScaleFactors
        rel: The relative tolerance for floating point comparison.
    """
    try:
        assert f1.lat_factor == approx(f2.lat_factor, rel=rel)
        assert f1.lon_factor == approx(f2.lon_factor, rel=rel)
    except AssertionError as e:
        print(f1)
        print(f2)
        raise e
