import pytest

from poromat import (
    DifferentiationAxis,
    MaterialLawCapabilities,
    PiecewiseLinearTwoPhaseMaterial,
    ValidationError,
    capillary_pressure_derivatives,
    relative_permeability_derivatives,
)


class StrictLaw(PiecewiseLinearTwoPhaseMaterial):
    """Fails if asked for derivatives along axes it does not depend on."""

    def d_capillary_pressures_d_pressure(self, *args):
        raise AssertionError("should not be called")

    def d_capillary_pressures_d_temperature(self, *args):
        raise AssertionError("should not be called")

    def d_capillary_pressures_d_mole_fraction(self, *args):
        raise AssertionError("should not be called")

    def d_relative_permeabilities_d_pressure(self, *args):
        raise AssertionError("should not be called")

    def d_relative_permeabilities_d_temperature(self, *args):
        raise AssertionError("should not be called")

    def d_relative_permeabilities_d_mole_fraction(self, *args):
        raise AssertionError("should not be called")


def test_depends_on():
    capabilities = MaterialLawCapabilities(
        is_saturation_dependent=True, is_temperature_dependent=True
    )
    assert capabilities.depends_on(DifferentiationAxis.SATURATION)
    assert capabilities.depends_on("temperature")
    assert not capabilities.depends_on(DifferentiationAxis.PRESSURE)
    assert not capabilities.depends_on(DifferentiationAxis.MOLE_FRACTION)


@pytest.mark.parametrize(
    "axis",
    [
        DifferentiationAxis.PRESSURE,
        DifferentiationAxis.TEMPERATURE,
        DifferentiationAxis.MOLE_FRACTION,
    ],
)
def test_independent_axes_are_zero_filled(params, state_factory, axis):
    law = StrictLaw()
    state = state_factory(0.25)
    for dispatch in (capillary_pressure_derivatives, relative_permeability_derivatives):
        values = [None, None]
        dispatch(law, values, params, state, axis, phase_index=0, component_index=0)
        assert values == [0.0, 0.0]


def test_saturation_axis_is_forwarded(law, params, state_factory):
    state = state_factory(0.25)
    values = [None, None]
    capillary_pressure_derivatives(
        law, values, params, state, DifferentiationAxis.SATURATION, phase_index=0
    )
    assert values == [0.0, pytest.approx(2000.0)]

    relative_permeability_derivatives(
        law, values, params, state, DifferentiationAxis.SATURATION, phase_index=0
    )
    assert values == [pytest.approx(1.25), 0.0]


def test_saturation_axis_requires_phase_index(law, params, state_factory):
    with pytest.raises(ValidationError):
        capillary_pressure_derivatives(
            law, [None, None], params, state_factory(0.5), DifferentiationAxis.SATURATION
        )
