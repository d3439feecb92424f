import numpy as np
import pytest

from poromat import (
    FluidState,
    SupportsSaturation,
    UnsupportedOperationError,
    ValidationError,
    make_fluid_state,
)


def test_accessors():
    state = make_fluid_state(num_phases=2, num_components=3, molar_masses=[0.018, 0.016, 0.044])
    state.set_pressure(0, 1e5)
    state.set_temperature(1, 300.0)
    state.set_saturation(0, 0.3)
    state.set_mole_fraction(1, 2, 0.25)
    state.set_density(0, 1000.0)
    state.set_viscosity(0, 1e-3)
    state.set_enthalpy(1, 2.5e5)

    assert state.num_phases == 2
    assert state.num_components == 3
    assert state.pressure(0) == 1e5
    assert state.temperature(1) == 300.0
    assert state.saturation(0) == pytest.approx(0.3)
    assert state.mole_fraction(1, 2) == 0.25
    assert state.density(0) == 1000.0
    assert state.viscosity(0) == pytest.approx(1e-3)
    assert state.enthalpy(1) == 2.5e5
    assert state.average_molar_mass(1) == pytest.approx(0.011)
    assert isinstance(state, SupportsSaturation)


def test_fugacity():
    state = make_fluid_state(num_phases=2, num_components=2)
    assert state.fugacity_coefficients.shape == (2, 2)
    state.set_pressure(1, 2e5)
    state.set_mole_fraction(1, 0, 0.4)
    state.set_fugacity_coefficient(1, 0, 0.5)

    assert state.fugacity_coefficient(1, 0) == 0.5
    assert state.fugacity(1, 0) == pytest.approx(4e4)
    assert state.fugacity(0, 0) == 0.0


def test_enthalpy_is_optional():
    state = make_fluid_state(num_phases=2, num_components=1, store_enthalpy=False)
    assert not state.stores_enthalpy
    with pytest.raises(UnsupportedOperationError):
        state.enthalpy(0)
    with pytest.raises(UnsupportedOperationError):
        state.set_enthalpy(0, 1.0)


def test_average_molar_mass_requires_molar_masses():
    state = make_fluid_state(num_phases=1, num_components=1)
    with pytest.raises(ValidationError):
        state.average_molar_mass(0)


def test_assign_and_copy():
    source = make_fluid_state(num_phases=2, num_components=2)
    source.set_saturation(1, 0.7)
    source.set_enthalpy(0, 10.0)
    source.set_fugacity_coefficient(1, 1, 0.9)

    target = make_fluid_state(num_phases=2, num_components=2, store_enthalpy=False)
    target.assign(source)
    assert target.saturation(1) == pytest.approx(0.7)
    assert target.fugacity_coefficient(1, 1) == pytest.approx(0.9)
    assert not target.stores_enthalpy

    duplicate = source.copy()
    duplicate.set_saturation(1, 0.1)
    duplicate.set_fugacity_coefficient(1, 1, 0.2)
    assert source.saturation(1) == pytest.approx(0.7)
    assert source.fugacity_coefficient(1, 1) == pytest.approx(0.9)
    assert duplicate.enthalpy(0) == 10.0

    with pytest.raises(ValidationError):
        target.assign(make_fluid_state(num_phases=3, num_components=2))


def test_shape_validation():
    with pytest.raises(ValidationError):
        FluidState(
            pressures=np.zeros(2),
            temperatures=np.zeros(3),
            mole_fractions=np.zeros((2, 1)),
            fugacity_coefficients=np.zeros((2, 1)),
            saturations=np.zeros(2),
            densities=np.zeros(2),
            viscosities=np.zeros(2),
        )
    with pytest.raises(ValidationError):
        FluidState(
            pressures=np.zeros(2),
            temperatures=np.zeros(2),
            mole_fractions=np.zeros((2, 2)),
            fugacity_coefficients=np.zeros((2, 1)),
            saturations=np.zeros(2),
            densities=np.zeros(2),
            viscosities=np.zeros(2),
        )
    with pytest.raises(ValidationError):
        make_fluid_state(num_phases=0, num_components=1)
