import pytest

from poromat import (
    PiecewiseLinearTwoPhaseMaterial,
    PiecewiseLinearTwoPhaseMaterialParams,
    SampleTable,
    make_fluid_state,
)


@pytest.fixture
def pc_table():
    return SampleTable.from_points([(0.0, 0.0), (0.5, 1000.0), (1.0, 3000.0)])


@pytest.fixture
def params(pc_table):
    return PiecewiseLinearTwoPhaseMaterialParams(
        pcnw_samples=pc_table,
        krw_samples=SampleTable(x=[0.2, 1.0], y=[0.0, 1.0]),
        krn_samples=SampleTable(x=[0.1, 0.9], y=[0.8, 0.0]),
    )


@pytest.fixture
def law():
    return PiecewiseLinearTwoPhaseMaterial()


def make_state(wetting_saturation, non_wetting_saturation=None):
    if non_wetting_saturation is None:
        non_wetting_saturation = 1.0 - wetting_saturation
    state = make_fluid_state(num_phases=2, num_components=1, store_enthalpy=False)
    state.set_saturation(0, wetting_saturation)
    state.set_saturation(1, non_wetting_saturation)
    return state


@pytest.fixture
def state_factory():
    return make_state
