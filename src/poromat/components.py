"""Components with constant thermophysical properties."""

import typing

import attrs


__all__ = ["ConstantLiquidComponent", "LNAPL"]


@attrs.frozen
class ConstantLiquidComponent:
    """
    A liquid component whose density and viscosity do not vary with
    temperature or pressure.
    """

    name: str
    """Human readable name of the component."""
    density: float = attrs.field(validator=attrs.validators.gt(0))
    """Liquid density (kg/m³)."""
    viscosity: float = attrs.field(validator=attrs.validators.gt(0))
    """Liquid dynamic viscosity (Pa·s)."""
    molar_mass: typing.Optional[float] = None
    """Molar mass (kg/mol), if known."""
    compressible: bool = False
    """Whether the liquid is treated as compressible."""

    def liquid_is_compressible(self) -> bool:
        return self.compressible

    def liquid_density(self, temperature: float, pressure: float) -> float:
        """
        Density of the liquid.

        :param temperature: Temperature (K). Ignored.
        :param pressure: Pressure (Pa). Ignored.
        :return: Density (kg/m³).
        """
        return self.density

    def liquid_viscosity(self, temperature: float, pressure: float) -> float:
        """
        Dynamic viscosity of the liquid.

        :param temperature: Temperature (K). Ignored.
        :param pressure: Pressure (Pa). Ignored.
        :return: Viscosity (Pa·s).
        """
        return self.viscosity


LNAPL = ConstantLiquidComponent(name="LNAPL", density=890.0, viscosity=8e-3)
"""Rough estimate of a light non-aqueous phase liquid, e.g. a kind of oil."""
