"""
Phase index mappings connecting fluid systems and material laws.

A traits object tells a material law which phase index plays which role
(wetting, non-wetting, gas) and how many phases there are.
"""

import typing

import attrs

from poromat.errors import ValidationError


__all__ = ["NullMaterialTraits", "TwoPhaseMaterialTraits", "ThreePhaseMaterialTraits"]


def _check_indices(indices: typing.Dict[str, int], num_phases: int) -> None:
    for name, index in indices.items():
        if not 0 <= index < num_phases:
            raise ValidationError(
                f"`{name}` must be in [0, {num_phases - 1}]. Got {index}"
            )
    if len(set(indices.values())) != len(indices):
        raise ValidationError(
            f"Phase indices must be different. Got {', '.join(f'{k}={v}' for k, v in indices.items())}"
        )


@attrs.frozen
class NullMaterialTraits:
    """Traits which do not provide any phase indices."""

    num_phases: int = attrs.field(validator=attrs.validators.ge(1))
    """The number of fluid phases."""


@attrs.frozen
class TwoPhaseMaterialTraits:
    """Traits for two-phase material laws."""

    wetting_phase_index: int = 0
    """The index of the wetting phase."""
    non_wetting_phase_index: int = 1
    """The index of the non-wetting phase."""

    num_phases: typing.ClassVar[int] = 2
    """The number of fluid phases."""

    def __attrs_post_init__(self) -> None:
        _check_indices(
            {
                "wetting_phase_index": self.wetting_phase_index,
                "non_wetting_phase_index": self.non_wetting_phase_index,
            },
            self.num_phases,
        )


@attrs.frozen
class ThreePhaseMaterialTraits:
    """Traits for three-phase material laws."""

    wetting_phase_index: int = 0
    """The index of the wetting liquid phase."""
    non_wetting_phase_index: int = 1
    """The index of the non-wetting liquid phase."""
    gas_phase_index: int = 2
    """The index of the gas phase (i.e., the least wetting phase)."""

    num_phases: typing.ClassVar[int] = 3
    """The number of fluid phases."""

    def __attrs_post_init__(self) -> None:
        _check_indices(
            {
                "wetting_phase_index": self.wetting_phase_index,
                "non_wetting_phase_index": self.non_wetting_phase_index,
                "gas_phase_index": self.gas_phase_index,
            },
            self.num_phases,
        )
