"""Fluid state container holding per-phase thermodynamic quantities."""

import typing

import attrs
import numpy as np
import numpy.typing as npt
from typing_extensions import Self

from poromat._precision import get_dtype
from poromat.errors import UnsupportedOperationError, ValidationError


__all__ = ["FluidState", "make_fluid_state"]


def _zeros(*shape: int) -> npt.NDArray[np.floating]:
    return np.zeros(shape, dtype=get_dtype())


@attrs.define(eq=False)
class FluidState:
    """
    Thermodynamic quantities of a multi-phase, multi-component fluid system,
    without assuming thermodynamic equilibrium between phases.

    Every phase carries its own pressure, temperature, composition, fugacity
    coefficients, saturation, density and viscosity. Enthalpy is optional; states built without it reject
    enthalpy access.

    Use `make_fluid_state` to build one with correctly sized columns.
    """

    pressures: npt.NDArray[np.floating]
    """Phase pressures (Pa), shape `(num_phases,)`."""
    temperatures: npt.NDArray[np.floating]
    """Phase temperatures (K), shape `(num_phases,)`."""
    mole_fractions: npt.NDArray[np.floating]
    """Component mole fractions per phase, shape `(num_phases, num_components)`."""
    fugacity_coefficients: npt.NDArray[np.floating]
    """Component fugacity coefficients per phase, shape `(num_phases, num_components)`."""
    saturations: npt.NDArray[np.floating]
    """Phase saturations (fraction), shape `(num_phases,)`."""
    densities: npt.NDArray[np.floating]
    """Phase mass densities (kg/m³), shape `(num_phases,)`."""
    viscosities: npt.NDArray[np.floating]
    """Phase dynamic viscosities (Pa·s), shape `(num_phases,)`."""
    enthalpies: typing.Optional[npt.NDArray[np.floating]] = None
    """Specific phase enthalpies (J/kg), shape `(num_phases,)`, or None if not stored."""
    molar_masses: typing.Optional[npt.NDArray[np.floating]] = None
    """Component molar masses (kg/mol), shape `(num_components,)`, if known."""

    def __attrs_post_init__(self) -> None:
        num_phases = self.num_phases
        for name in ("temperatures", "saturations", "densities", "viscosities"):
            column = getattr(self, name)
            if column.shape != (num_phases,):
                raise ValidationError(
                    f"`{name}` must have shape ({num_phases},). Got {column.shape}"
                )
        if self.mole_fractions.ndim != 2 or self.mole_fractions.shape[0] != num_phases:
            raise ValidationError(
                f"`mole_fractions` must have shape ({num_phases}, num_components). "
                f"Got {self.mole_fractions.shape}"
            )
        if self.fugacity_coefficients.shape != self.mole_fractions.shape:
            raise ValidationError(
                f"`fugacity_coefficients` must have shape {self.mole_fractions.shape}. "
                f"Got {self.fugacity_coefficients.shape}"
            )
        if self.enthalpies is not None and self.enthalpies.shape != (num_phases,):
            raise ValidationError(
                f"`enthalpies` must have shape ({num_phases},). Got {self.enthalpies.shape}"
            )
        if self.molar_masses is not None and self.molar_masses.shape != (
            self.num_components,
        ):
            raise ValidationError(
                f"`molar_masses` must have shape ({self.num_components},). "
                f"Got {self.molar_masses.shape}"
            )

    @property
    def num_phases(self) -> int:
        return self.pressures.shape[0]

    @property
    def num_components(self) -> int:
        return self.mole_fractions.shape[1]

    @property
    def stores_enthalpy(self) -> bool:
        return self.enthalpies is not None

    def pressure(self, phase_index: int) -> float:
        return float(self.pressures[phase_index])

    def set_pressure(self, phase_index: int, value: float) -> None:
        self.pressures[phase_index] = value

    def temperature(self, phase_index: int) -> float:
        return float(self.temperatures[phase_index])

    def set_temperature(self, phase_index: int, value: float) -> None:
        self.temperatures[phase_index] = value

    def saturation(self, phase_index: int) -> float:
        return float(self.saturations[phase_index])

    def set_saturation(self, phase_index: int, value: float) -> None:
        self.saturations[phase_index] = value

    def mole_fraction(self, phase_index: int, component_index: int) -> float:
        return float(self.mole_fractions[phase_index, component_index])

    def set_mole_fraction(
        self, phase_index: int, component_index: int, value: float
    ) -> None:
        self.mole_fractions[phase_index, component_index] = value

    def fugacity_coefficient(self, phase_index: int, component_index: int) -> float:
        return float(self.fugacity_coefficients[phase_index, component_index])

    def set_fugacity_coefficient(
        self, phase_index: int, component_index: int, value: float
    ) -> None:
        self.fugacity_coefficients[phase_index, component_index] = value

    def fugacity(self, phase_index: int, component_index: int) -> float:
        """
        Fugacity of a component in a phase (Pa), `x * phi * p`.

        :param phase_index: Phase index.
        :param component_index: Component index.
        :return: Mole fraction times fugacity coefficient times phase pressure.
        """
        return float(
            self.mole_fractions[phase_index, component_index]
            * self.fugacity_coefficients[phase_index, component_index]
            * self.pressures[phase_index]
        )

    def density(self, phase_index: int) -> float:
        return float(self.densities[phase_index])

    def set_density(self, phase_index: int, value: float) -> None:
        self.densities[phase_index] = value

    def viscosity(self, phase_index: int) -> float:
        return float(self.viscosities[phase_index])

    def set_viscosity(self, phase_index: int, value: float) -> None:
        self.viscosities[phase_index] = value

    def enthalpy(self, phase_index: int) -> float:
        """
        Specific enthalpy of a phase.

        :raises UnsupportedOperationError: If the state does not store enthalpies.
        """
        if self.enthalpies is None:
            raise UnsupportedOperationError("Enthalpy is not stored by this fluid state")
        return float(self.enthalpies[phase_index])

    def set_enthalpy(self, phase_index: int, value: float) -> None:
        if self.enthalpies is None:
            raise UnsupportedOperationError("Enthalpy is not stored by this fluid state")
        self.enthalpies[phase_index] = value

    def average_molar_mass(self, phase_index: int) -> float:
        """
        Mole fraction weighted molar mass of a phase (kg/mol).

        :raises ValidationError: If component molar masses are not known.
        """
        if self.molar_masses is None:
            raise ValidationError("Component molar masses are required")
        return float(np.dot(self.mole_fractions[phase_index], self.molar_masses))

    def assign(self, other: "FluidState") -> None:
        """
        Copy all quantities of `other` into this state.

        Enthalpies are copied only if both states store them.
        """
        if (other.num_phases, other.num_components) != (
            self.num_phases,
            self.num_components,
        ):
            raise ValidationError(
                f"Cannot assign a state with {other.num_phases} phases and "
                f"{other.num_components} components to one with {self.num_phases} "
                f"phases and {self.num_components} components"
            )
        self.pressures[:] = other.pressures
        self.temperatures[:] = other.temperatures
        self.mole_fractions[:] = other.mole_fractions
        self.fugacity_coefficients[:] = other.fugacity_coefficients
        self.saturations[:] = other.saturations
        self.densities[:] = other.densities
        self.viscosities[:] = other.viscosities
        if self.enthalpies is not None and other.enthalpies is not None:
            self.enthalpies[:] = other.enthalpies
        if other.molar_masses is not None:
            self.molar_masses = other.molar_masses.copy()

    def copy(self) -> Self:
        """Return an independent copy of this state."""
        return attrs.evolve(
            self,
            pressures=self.pressures.copy(),
            temperatures=self.temperatures.copy(),
            mole_fractions=self.mole_fractions.copy(),
            fugacity_coefficients=self.fugacity_coefficients.copy(),
            saturations=self.saturations.copy(),
            densities=self.densities.copy(),
            viscosities=self.viscosities.copy(),
            enthalpies=None if self.enthalpies is None else self.enthalpies.copy(),
            molar_masses=None if self.molar_masses is None else self.molar_masses.copy(),
        )


def make_fluid_state(
    num_phases: int,
    num_components: int,
    store_enthalpy: bool = True,
    molar_masses: typing.Optional[npt.ArrayLike] = None,
) -> FluidState:
    """
    Build a zero-initialized fluid state.

    :param num_phases: Number of fluid phases.
    :param num_components: Number of chemical components.
    :param store_enthalpy: Whether the state keeps per-phase enthalpies.
    :param molar_masses: Optional component molar masses (kg/mol).
    :return: The fluid state.
    """
    if num_phases < 1:
        raise ValidationError("At least one phase is required")
    if num_components < 1:
        raise ValidationError("At least one component is required")
    return FluidState(
        pressures=_zeros(num_phases),
        temperatures=_zeros(num_phases),
        mole_fractions=_zeros(num_phases, num_components),
        fugacity_coefficients=_zeros(num_phases, num_components),
        saturations=_zeros(num_phases),
        densities=_zeros(num_phases),
        viscosities=_zeros(num_phases),
        enthalpies=_zeros(num_phases) if store_enthalpy else None,
        molar_masses=(
            None
            if molar_masses is None
            else np.array(molar_masses, dtype=get_dtype()).ravel()
        ),
    )
