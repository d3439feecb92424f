import numpy as np
import pytest

from poromat import (
    Config,
    get_dtype,
    get_floating_point_info,
    use_32bit_precision,
    use_64bit_precision,
    with_precision,
)


def test_out_of_range():
    config = Config()
    assert not config.is_out_of_range(0.5)
    assert not config.is_out_of_range(1.0 + 1e-9)
    assert config.is_out_of_range(-0.1)
    assert config.is_out_of_range(np.array([0.2, 1.5]))
    assert not config.is_out_of_range(np.array([0.0, 1.0]))


def test_tolerance_must_be_non_negative():
    with pytest.raises(ValueError):
        Config(saturation_tolerance=-1.0)


def test_precision_switching():
    assert get_dtype() == np.float64
    with with_precision(np.float32):
        assert get_dtype() == np.float32
        assert get_floating_point_info().bits == 32
    assert get_dtype() == np.float64

    use_32bit_precision()
    try:
        assert get_dtype() == np.float32
    finally:
        use_64bit_precision()
    assert get_dtype() == np.float64
