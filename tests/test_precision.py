import logging

import numpy as np
import pytest

from zgdist.distance import distance, path_length, scale_factors
from zgdist.precision import *


def test_default_precision():
    assert get_precision() == 'double'
    assert resolve_dtype() is np.float64


def test_resolve_dtype():
    assert resolve_dtype('double') is np.float64
    assert resolve_dtype('single') is np.float32

    with pytest.raises(ValueError):
        resolve_dtype('half')


def test_precision_of():
    assert precision_of(np.float64) == 'double'
    assert precision_of(np.dtype('float32')) == 'single'

    with pytest.raises(TypeError):
        precision_of(np.float16)


def test_set_precision(caplog):
    caplog.set_level(logging.INFO, logger='zgdist')
    try:
        set_precision('single')
        assert get_precision() == 'single'
        assert resolve_dtype() is np.float32
        assert 'precision changed from double to single' in caplog.text

        factors = scale_factors(20.)
        assert factors.precision == 'single'
        assert isinstance(distance(20., 20., 20.5, 20.5, *factors), np.float32)
        assert isinstance(path_length([(20., 20.), (20.5, 20.5)], *factors), np.float32)

        # Explicit precision overrides the global setting
        assert scale_factors(20., precision='double').precision == 'double'
    finally:
        set_precision('double')

    assert get_precision() == 'double'


def test_set_precision_unknown():
    with pytest.raises(ValueError):
        set_precision('quad')

    assert get_precision() == 'double'


def test_factors_keep_their_precision():
    # Factors derived in single precision are evaluated in single precision
    # regardless of the global setting
    factors = scale_factors(20., precision='single')
    assert isinstance(distance(20., 20., 20.5, 20.5, *factors), np.float32)
