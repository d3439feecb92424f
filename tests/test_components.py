import pytest

from poromat import LNAPL, ConstantLiquidComponent


def test_lnapl():
    assert LNAPL.name == "LNAPL"
    assert not LNAPL.liquid_is_compressible()
    assert LNAPL.liquid_density(temperature=293.15, pressure=1e5) == 890.0
    assert LNAPL.liquid_density(temperature=350.0, pressure=5e7) == 890.0
    assert LNAPL.liquid_viscosity(temperature=293.15, pressure=1e5) == 8e-3


def test_constant_component_validation():
    with pytest.raises(ValueError):
        ConstantLiquidComponent(name="bad", density=0.0, viscosity=1e-3)
