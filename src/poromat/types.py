import enum
import typing

import numpy as np
import numpy.typing as npt
from typing_extensions import TypeAlias


__all__ = [
    "FloatOrArray",
    "SamplePoint",
    "DifferentiationAxis",
    "SupportsSaturation",
    "SupportsSetItem",
]

FloatOrArray: TypeAlias = typing.Union[float, npt.NDArray[np.floating]]
"""A scalar or an array of floating point values"""

SamplePoint: TypeAlias = typing.Tuple[float, float]
"""An `(x, y)` knot of a sample table"""


class DifferentiationAxis(str, enum.Enum):
    """Physical quantity a material law quantity may be differentiated against."""

    SATURATION = "saturation"
    PRESSURE = "pressure"
    TEMPERATURE = "temperature"
    MOLE_FRACTION = "mole_fraction"


@typing.runtime_checkable
class SupportsSaturation(typing.Protocol):
    """
    Protocol for a fluid state that material laws can read phase saturations from.
    """

    def saturation(self, phase_index: int, /) -> float:
        """
        Returns the saturation of the phase at `phase_index`.

        :param phase_index: Index of the fluid phase.
        :return: Saturation of the phase (fraction).
        """
        ...


K_con = typing.TypeVar("K_con", contravariant=True)
V_con = typing.TypeVar("V_con", contravariant=True)


class SupportsSetItem(typing.Generic[K_con, V_con], typing.Protocol):
    """
    Protocol for objects that support item assignment.
    """

    def __setitem__(self, key: K_con, value: V_con, /) -> None:
        """Sets the item at the specified key to the given value."""
        ...
