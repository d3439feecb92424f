"""Material law contract, capability descriptors and capability-aware dispatch."""

from abc import ABC, abstractmethod
import typing

import attrs

from poromat.errors import ValidationError
from poromat.types import DifferentiationAxis, SupportsSaturation, SupportsSetItem


__all__ = [
    "MaterialLawCapabilities",
    "MaterialLaw",
    "capillary_pressure_derivatives",
    "relative_permeability_derivatives",
]

PhaseValues = SupportsSetItem[int, float]


@attrs.frozen(slots=True)
class MaterialLawCapabilities:
    """
    Declares which parts of the material law API a law implements, and which
    physical quantities its results depend on.

    Generic callers consult this instead of calling derivative methods blindly.
    A law asked for a derivative along an axis it does not depend on still
    answers with exact zeros.
    """

    implements_two_phase_api: bool = False
    """Whether the law implements the two-phase convenience API."""
    implements_two_phase_sat_api: bool = False
    """Whether the law implements the two-phase API that only depends on saturations."""
    is_saturation_dependent: bool = False
    """Whether the law's quantities depend on phase saturations."""
    is_pressure_dependent: bool = False
    """Whether the law's quantities depend on absolute phase pressures."""
    is_temperature_dependent: bool = False
    """Whether the law's quantities depend on temperature."""
    is_composition_dependent: bool = False
    """Whether the law's quantities depend on phase composition."""

    def depends_on(self, axis: DifferentiationAxis) -> bool:
        """
        Check whether the law's quantities vary along `axis`.

        :param axis: The differentiation axis.
        :return: True if derivatives along `axis` may be non-zero.
        """
        axis = DifferentiationAxis(axis)
        if axis is DifferentiationAxis.SATURATION:
            return self.is_saturation_dependent
        elif axis is DifferentiationAxis.PRESSURE:
            return self.is_pressure_dependent
        elif axis is DifferentiationAxis.TEMPERATURE:
            return self.is_temperature_dependent
        return self.is_composition_dependent


class MaterialLaw(ABC):
    """
    Base class for fluid-matrix interaction laws.

    All array-filling methods write one entry per phase into `values`.
    """

    capabilities: typing.ClassVar[MaterialLawCapabilities]

    @property
    @abstractmethod
    def num_phases(self) -> int:
        """The number of fluid phases the law handles."""
        ...

    @abstractmethod
    def capillary_pressures(
        self, values: PhaseValues, params: typing.Any, state: SupportsSaturation
    ) -> None: ...

    @abstractmethod
    def saturations(
        self, values: PhaseValues, params: typing.Any, state: SupportsSaturation
    ) -> None: ...

    @abstractmethod
    def relative_permeabilities(
        self, values: PhaseValues, params: typing.Any, state: SupportsSaturation
    ) -> None: ...

    @abstractmethod
    def d_capillary_pressures_d_saturation(
        self,
        values: PhaseValues,
        params: typing.Any,
        state: SupportsSaturation,
        saturation_phase_index: int,
    ) -> None: ...

    @abstractmethod
    def d_capillary_pressures_d_pressure(
        self,
        values: PhaseValues,
        params: typing.Any,
        state: SupportsSaturation,
        pressure_phase_index: int,
    ) -> None: ...

    @abstractmethod
    def d_capillary_pressures_d_temperature(
        self, values: PhaseValues, params: typing.Any, state: SupportsSaturation
    ) -> None: ...

    @abstractmethod
    def d_capillary_pressures_d_mole_fraction(
        self,
        values: PhaseValues,
        params: typing.Any,
        state: SupportsSaturation,
        phase_index: int,
        component_index: int,
    ) -> None: ...

    @abstractmethod
    def d_relative_permeabilities_d_saturation(
        self,
        values: PhaseValues,
        params: typing.Any,
        state: SupportsSaturation,
        saturation_phase_index: int,
    ) -> None: ...

    @abstractmethod
    def d_relative_permeabilities_d_pressure(
        self,
        values: PhaseValues,
        params: typing.Any,
        state: SupportsSaturation,
        pressure_phase_index: int,
    ) -> None: ...

    @abstractmethod
    def d_relative_permeabilities_d_temperature(
        self, values: PhaseValues, params: typing.Any, state: SupportsSaturation
    ) -> None: ...

    @abstractmethod
    def d_relative_permeabilities_d_mole_fraction(
        self,
        values: PhaseValues,
        params: typing.Any,
        state: SupportsSaturation,
        phase_index: int,
        component_index: int,
    ) -> None: ...

    def fill_zeros(self, values: PhaseValues) -> None:
        """Set the entry of every phase in `values` to zero."""
        for phase_index in range(self.num_phases):
            values[phase_index] = 0.0


def _dispatch(
    law: MaterialLaw,
    methods: typing.Mapping[DifferentiationAxis, typing.Callable[..., None]],
    values: PhaseValues,
    params: typing.Any,
    state: SupportsSaturation,
    axis: DifferentiationAxis,
    phase_index: typing.Optional[int],
    component_index: typing.Optional[int],
) -> None:
    axis = DifferentiationAxis(axis)
    if not law.capabilities.depends_on(axis):
        law.fill_zeros(values)
        return

    method = methods[axis]
    if axis is DifferentiationAxis.TEMPERATURE:
        method(values, params, state)
        return

    if phase_index is None:
        raise ValidationError(f"`phase_index` is required for {axis.value} derivatives")
    if axis is DifferentiationAxis.MOLE_FRACTION:
        if component_index is None:
            raise ValidationError(
                "`component_index` is required for mole fraction derivatives"
            )
        method(values, params, state, phase_index, component_index)
        return
    method(values, params, state, phase_index)


def capillary_pressure_derivatives(
    law: MaterialLaw,
    values: PhaseValues,
    params: typing.Any,
    state: SupportsSaturation,
    axis: DifferentiationAxis,
    phase_index: typing.Optional[int] = None,
    component_index: typing.Optional[int] = None,
) -> None:
    """
    Fill `values` with the derivatives of all capillary pressures along `axis`.

    Axes the law declares itself independent of are answered with exact zeros
    without calling into the law.

    :param law: The material law.
    :param values: Per-phase output container.
    :param params: The law's parameters.
    :param state: Fluid state to evaluate at.
    :param axis: The differentiation axis.
    :param phase_index: Phase whose saturation/pressure/mole fraction is varied.
        Not used for temperature.
    :param component_index: Component whose mole fraction is varied. Only used for
        mole fraction derivatives.
    """
    methods = {
        DifferentiationAxis.SATURATION: law.d_capillary_pressures_d_saturation,
        DifferentiationAxis.PRESSURE: law.d_capillary_pressures_d_pressure,
        DifferentiationAxis.TEMPERATURE: law.d_capillary_pressures_d_temperature,
        DifferentiationAxis.MOLE_FRACTION: law.d_capillary_pressures_d_mole_fraction,
    }
    _dispatch(law, methods, values, params, state, axis, phase_index, component_index)


def relative_permeability_derivatives(
    law: MaterialLaw,
    values: PhaseValues,
    params: typing.Any,
    state: SupportsSaturation,
    axis: DifferentiationAxis,
    phase_index: typing.Optional[int] = None,
    component_index: typing.Optional[int] = None,
) -> None:
    """
    Fill `values` with the derivatives of all relative permeabilities along `axis`.

    See `capillary_pressure_derivatives` for the meaning of the arguments.
    """
    methods = {
        DifferentiationAxis.SATURATION: law.d_relative_permeabilities_d_saturation,
        DifferentiationAxis.PRESSURE: law.d_relative_permeabilities_d_pressure,
        DifferentiationAxis.TEMPERATURE: law.d_relative_permeabilities_d_temperature,
        DifferentiationAxis.MOLE_FRACTION: law.d_relative_permeabilities_d_mole_fraction,
    }
    _dispatch(law, methods, values, params, state, axis, phase_index, component_index)
