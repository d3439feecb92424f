"""
Tabulated, piecewise linear two-phase material law.

Capillary pressure and relative permeabilities are linearly interpolated from
sample tables indexed by wetting phase saturation, the way ECLIPSE-style
simulators treat saturation function tables.
"""

import logging
import typing

import attrs
import numpy.typing as npt
from typing_extensions import Self

from poromat.config import Config
from poromat.errors import UnsupportedOperationError, ValidationError
from poromat.interpolation import evaluate, evaluate_derivative
from poromat.laws.base import MaterialLaw, MaterialLawCapabilities, PhaseValues
from poromat.tables import SampleTable
from poromat.traits import TwoPhaseMaterialTraits
from poromat.types import FloatOrArray, SupportsSaturation

logger = logging.getLogger(__name__)


__all__ = ["PiecewiseLinearTwoPhaseMaterialParams", "PiecewiseLinearTwoPhaseMaterial"]


@attrs.frozen
class PiecewiseLinearTwoPhaseMaterialParams:
    """
    Sample tables of the piecewise linear two-phase material law.

    All three tables are indexed by wetting phase saturation, including the
    non-wetting phase relative permeability table.
    """

    pcnw_samples: SampleTable = attrs.field(
        validator=attrs.validators.instance_of(SampleTable)
    )
    """Capillary pressure (Pc = P_non-wetting - P_wetting) against wetting phase saturation."""
    krw_samples: SampleTable = attrs.field(
        validator=attrs.validators.instance_of(SampleTable)
    )
    """Wetting phase relative permeability against wetting phase saturation."""
    krn_samples: SampleTable = attrs.field(
        validator=attrs.validators.instance_of(SampleTable)
    )
    """Non-wetting phase relative permeability against wetting phase saturation."""

    @classmethod
    def from_arrays(
        cls,
        wetting_phase_saturation: npt.ArrayLike,
        capillary_pressure: npt.ArrayLike,
        wetting_phase_relative_permeability: npt.ArrayLike,
        non_wetting_phase_relative_permeability: npt.ArrayLike,
    ) -> Self:
        """
        Build the parameters from columns sharing one wetting phase saturation column.

        :param wetting_phase_saturation: Wetting phase saturations, ascending.
        :param capillary_pressure: Capillary pressure at each saturation.
        :param wetting_phase_relative_permeability: Wetting phase kr at each saturation.
        :param non_wetting_phase_relative_permeability: Non-wetting phase kr at each saturation.
        :return: The material law parameters.
        """
        return cls(
            pcnw_samples=SampleTable(x=wetting_phase_saturation, y=capillary_pressure),
            krw_samples=SampleTable(
                x=wetting_phase_saturation, y=wetting_phase_relative_permeability
            ),
            krn_samples=SampleTable(
                x=wetting_phase_saturation, y=non_wetting_phase_relative_permeability
            ),
        )


@attrs.frozen
class PiecewiseLinearTwoPhaseMaterial(MaterialLaw):
    """
    Piecewise linear capillary pressure and relative permeability law for two phases.

    Policies outside the tables' saturation range:
    - capillary pressure is linearly extrapolated from the nearest segment.
    - relative permeabilities are held at the nearest end value, and their
      derivatives are zero.

    The inverse relation (saturation from capillary pressure) is not provided.

    Example:
    ```python
    law = PiecewiseLinearTwoPhaseMaterial()
    params = PiecewiseLinearTwoPhaseMaterialParams(
        pcnw_samples=SampleTable(x=[0.0, 0.5, 1.0], y=[0.0, 1000.0, 3000.0]),
        krw_samples=SampleTable(x=[0.2, 1.0], y=[0.0, 1.0]),
        krn_samples=SampleTable(x=[0.0, 0.8], y=[1.0, 0.0]),
    )
    law.two_phase_sat_pcnw(params, 0.25)  # 500.0
    ```
    """

    traits: TwoPhaseMaterialTraits = attrs.field(factory=TwoPhaseMaterialTraits)
    """Phase index mapping (wetting and non-wetting phase)."""
    config: Config = attrs.field(factory=Config)
    """Evaluation options."""

    capabilities: typing.ClassVar[MaterialLawCapabilities] = MaterialLawCapabilities(
        implements_two_phase_api=True,
        implements_two_phase_sat_api=True,
        is_saturation_dependent=True,
        is_pressure_dependent=False,
        is_temperature_dependent=False,
        is_composition_dependent=False,
    )

    def __attrs_post_init__(self) -> None:
        if not isinstance(self.traits, TwoPhaseMaterialTraits):
            raise ValidationError(
                "The piecewise linear two-phase law requires `TwoPhaseMaterialTraits`. "
                f"Got {type(self.traits).__name__}"
            )
        if self.traits.num_phases != 2:
            raise ValidationError(
                "The piecewise linear two-phase law only applies to two fluid phases. "
                f"Got traits for {self.traits.num_phases} phases"
            )
        logger.debug(
            f"Piecewise linear two-phase law with wetting phase {self.traits.wetting_phase_index} "
            f"and non-wetting phase {self.traits.non_wetting_phase_index}"
        )

    @property
    def num_phases(self) -> int:
        return self.traits.num_phases

    def _report_saturation(self, saturation: FloatOrArray, name: str) -> None:
        if self.config.warn_out_of_range_saturations and self.config.is_out_of_range(
            saturation
        ):
            logger.warning(
                f"{name} outside [0, 1] ({saturation}). Evaluating by table extrapolation."
            )

    def _wetting_saturation(self, state: SupportsSaturation) -> float:
        return state.saturation(self.traits.wetting_phase_index)

    def _non_wetting_saturation(self, state: SupportsSaturation) -> float:
        return state.saturation(self.traits.non_wetting_phase_index)

    ##################
    # PHASE ARRAYS   #
    ##################

    def capillary_pressures(
        self,
        values: PhaseValues,
        params: PiecewiseLinearTwoPhaseMaterialParams,
        state: SupportsSaturation,
    ) -> None:
        """
        Capillary pressures of all phases.

        The wetting phase is the reference phase, so its entry is zero.
        """
        values[self.traits.wetting_phase_index] = 0.0
        values[self.traits.non_wetting_phase_index] = self.pcnw(params, state)

    def saturations(
        self,
        values: PhaseValues,
        params: PiecewiseLinearTwoPhaseMaterialParams,
        state: SupportsSaturation,
    ) -> None:
        """Saturations from phase pressure differences. Not supported by this law."""
        raise UnsupportedOperationError("Not implemented: saturations()")

    def relative_permeabilities(
        self,
        values: PhaseValues,
        params: PiecewiseLinearTwoPhaseMaterialParams,
        state: SupportsSaturation,
    ) -> None:
        """Relative permeabilities of all phases."""
        values[self.traits.wetting_phase_index] = self.krw(params, state)
        values[self.traits.non_wetting_phase_index] = self.krn(params, state)

    def d_capillary_pressures_d_saturation(
        self,
        values: PhaseValues,
        params: PiecewiseLinearTwoPhaseMaterialParams,
        state: SupportsSaturation,
        saturation_phase_index: int,
    ) -> None:
        """
        Derivatives of all capillary pressures with respect to the saturation of
        the phase at `saturation_phase_index`.

        Only the non-wetting entry reacts, and only to the wetting phase saturation.
        """
        self.fill_zeros(values)
        if saturation_phase_index == self.traits.wetting_phase_index:
            values[self.traits.non_wetting_phase_index] = self.dpcnw_dsw(params, state)

    def d_capillary_pressures_d_pressure(
        self,
        values: PhaseValues,
        params: PiecewiseLinearTwoPhaseMaterialParams,
        state: SupportsSaturation,
        pressure_phase_index: int,
    ) -> None:
        # not pressure dependent
        self.fill_zeros(values)

    def d_capillary_pressures_d_temperature(
        self,
        values: PhaseValues,
        params: PiecewiseLinearTwoPhaseMaterialParams,
        state: SupportsSaturation,
    ) -> None:
        # not temperature dependent
        self.fill_zeros(values)

    def d_capillary_pressures_d_mole_fraction(
        self,
        values: PhaseValues,
        params: PiecewiseLinearTwoPhaseMaterialParams,
        state: SupportsSaturation,
        phase_index: int,
        component_index: int,
    ) -> None:
        # not composition dependent
        self.fill_zeros(values)

    def d_relative_permeabilities_d_saturation(
        self,
        values: PhaseValues,
        params: PiecewiseLinearTwoPhaseMaterialParams,
        state: SupportsSaturation,
        saturation_phase_index: int,
    ) -> None:
        """
        Derivatives of all relative permeabilities with respect to the saturation of
        the phase at `saturation_phase_index`.

        Each phase's relative permeability only reacts to its own saturation. The
        non-wetting table is indexed by `Sw = 1 - Sn`, so its derivative with
        respect to `Sn` is the negated table slope.
        """
        wetting = self.traits.wetting_phase_index
        non_wetting = self.traits.non_wetting_phase_index
        if saturation_phase_index == wetting:
            values[wetting] = self.dkrw_dsw(params, state)
            values[non_wetting] = 0.0
        else:
            values[wetting] = 0.0
            values[non_wetting] = -self.two_phase_sat_dkrn_dsw(
                params, 1.0 - self._non_wetting_saturation(state)
            )

    def d_relative_permeabilities_d_pressure(
        self,
        values: PhaseValues,
        params: PiecewiseLinearTwoPhaseMaterialParams,
        state: SupportsSaturation,
        pressure_phase_index: int,
    ) -> None:
        # not pressure dependent
        self.fill_zeros(values)

    def d_relative_permeabilities_d_temperature(
        self,
        values: PhaseValues,
        params: PiecewiseLinearTwoPhaseMaterialParams,
        state: SupportsSaturation,
    ) -> None:
        # not temperature dependent
        self.fill_zeros(values)

    def d_relative_permeabilities_d_mole_fraction(
        self,
        values: PhaseValues,
        params: PiecewiseLinearTwoPhaseMaterialParams,
        state: SupportsSaturation,
        phase_index: int,
        component_index: int,
    ) -> None:
        # not composition dependent
        self.fill_zeros(values)

    ####################
    # TWO-PHASE API    #
    ####################

    def pcnw(
        self, params: PiecewiseLinearTwoPhaseMaterialParams, state: SupportsSaturation
    ) -> float:
        """Capillary pressure at the state's wetting phase saturation."""
        return self.two_phase_sat_pcnw(params, self._wetting_saturation(state))

    def two_phase_sat_pcnw(
        self, params: PiecewiseLinearTwoPhaseMaterialParams, sw: FloatOrArray
    ) -> FloatOrArray:
        """
        Capillary pressure at wetting phase saturation(s) `sw`.

        Linearly extrapolated outside the table's saturation range.
        """
        self._report_saturation(sw, "Wetting phase saturation")
        return evaluate(params.pcnw_samples, sw)

    def sw(
        self, params: PiecewiseLinearTwoPhaseMaterialParams, state: SupportsSaturation
    ) -> float:
        """Wetting phase saturation from the state's phase pressures. Not supported."""
        raise UnsupportedOperationError("Not implemented: sw()")

    def two_phase_sat_sw(
        self, params: PiecewiseLinearTwoPhaseMaterialParams, pc: FloatOrArray
    ) -> FloatOrArray:
        """Wetting phase saturation from capillary pressure. Not supported."""
        raise UnsupportedOperationError("Not implemented: two_phase_sat_sw()")

    def sn(
        self, params: PiecewiseLinearTwoPhaseMaterialParams, state: SupportsSaturation
    ) -> float:
        """Non-wetting phase saturation from the state's phase pressures."""
        return 1.0 - self.sw(params, state)

    def two_phase_sat_sn(
        self, params: PiecewiseLinearTwoPhaseMaterialParams, pc: FloatOrArray
    ) -> FloatOrArray:
        """Non-wetting phase saturation from capillary pressure."""
        return 1.0 - self.two_phase_sat_sw(params, pc)

    def dpcnw_dsw(
        self, params: PiecewiseLinearTwoPhaseMaterialParams, state: SupportsSaturation
    ) -> float:
        """Derivative of the capillary pressure with respect to wetting phase saturation."""
        return self.two_phase_sat_dpcnw_dsw(params, self._wetting_saturation(state))

    def two_phase_sat_dpcnw_dsw(
        self, params: PiecewiseLinearTwoPhaseMaterialParams, sw: FloatOrArray
    ) -> FloatOrArray:
        return evaluate_derivative(params.pcnw_samples, sw)

    def krw(
        self, params: PiecewiseLinearTwoPhaseMaterialParams, state: SupportsSaturation
    ) -> float:
        """Wetting phase relative permeability at the state's wetting phase saturation."""
        return self.two_phase_sat_krw(params, self._wetting_saturation(state))

    def two_phase_sat_krw(
        self, params: PiecewiseLinearTwoPhaseMaterialParams, sw: FloatOrArray
    ) -> FloatOrArray:
        """
        Wetting phase relative permeability at wetting phase saturation(s) `sw`.

        Held at the nearest end value outside the table's saturation range.
        """
        self._report_saturation(sw, "Wetting phase saturation")
        return evaluate(params.krw_samples, sw, clamp=True)

    def dkrw_dsw(
        self, params: PiecewiseLinearTwoPhaseMaterialParams, state: SupportsSaturation
    ) -> float:
        return self.two_phase_sat_dkrw_dsw(params, self._wetting_saturation(state))

    def two_phase_sat_dkrw_dsw(
        self, params: PiecewiseLinearTwoPhaseMaterialParams, sw: FloatOrArray
    ) -> FloatOrArray:
        """
        Derivative of the wetting phase relative permeability with respect to
        wetting phase saturation. Zero outside the table's saturation range.
        """
        return evaluate_derivative(params.krw_samples, sw, clamp=True)

    def krn(
        self, params: PiecewiseLinearTwoPhaseMaterialParams, state: SupportsSaturation
    ) -> float:
        """
        Non-wetting phase relative permeability at the state's saturation.

        The non-wetting table is indexed by wetting phase saturation, so the
        lookup coordinate is `1 - sn` taken from the non-wetting phase.
        """
        return self.two_phase_sat_krn(params, 1.0 - self._non_wetting_saturation(state))

    def two_phase_sat_krn(
        self, params: PiecewiseLinearTwoPhaseMaterialParams, sw: FloatOrArray
    ) -> FloatOrArray:
        """
        Non-wetting phase relative permeability at wetting phase saturation(s) `sw`.

        Held at the nearest end value outside the table's saturation range.
        """
        self._report_saturation(sw, "Wetting phase saturation")
        return evaluate(params.krn_samples, sw, clamp=True)

    def dkrn_dsw(
        self, params: PiecewiseLinearTwoPhaseMaterialParams, state: SupportsSaturation
    ) -> float:
        return self.two_phase_sat_dkrn_dsw(params, self._wetting_saturation(state))

    def two_phase_sat_dkrn_dsw(
        self, params: PiecewiseLinearTwoPhaseMaterialParams, sw: FloatOrArray
    ) -> FloatOrArray:
        """
        Derivative of the non-wetting phase relative permeability with respect to
        wetting phase saturation. Zero outside the table's saturation range.
        """
        return evaluate_derivative(params.krn_samples, sw, clamp=True)
