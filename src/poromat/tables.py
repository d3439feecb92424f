"""Sample tables holding tabulated saturation functions."""

import logging
import typing

import attrs
import numpy as np
import numpy.typing as npt
from typing_extensions import Self

from poromat._precision import get_dtype
from poromat.errors import ValidationError
from poromat.types import SamplePoint

logger = logging.getLogger(__name__)


__all__ = ["SampleTable"]


def _as_column(value: typing.Any) -> npt.NDArray[np.floating]:
    return np.array(value, dtype=get_dtype(), copy=True).ravel()


@attrs.frozen(eq=False)
class SampleTable:
    """
    Ordered `(x, y)` knots of a piecewise linear function.

    The `x` column holds the independent variable (e.g. wetting phase saturation)
    and must be non-decreasing. Repeated `x` values are only accepted on the first
    or last segment, where they act as flat extrapolation anchors.

    Example:
    ```python
    table = SampleTable(x=[0.0, 0.5, 1.0], y=[0.0, 1000.0, 3000.0])
    table.front  # (0.0, 0.0)
    table[1]  # (0.5, 1000.0)
    ```
    """

    x: npt.NDArray[np.floating] = attrs.field(converter=_as_column)
    """Independent variable values, in ascending order."""
    y: npt.NDArray[np.floating] = attrs.field(converter=_as_column)
    """Dependent variable values corresponding to `x`."""

    def __attrs_post_init__(self) -> None:
        """Validate table data."""
        if len(self.x) != len(self.y):
            raise ValidationError(
                f"Sample table columns must have same length. "
                f"Got {len(self.x)} vs {len(self.y)}"
            )
        if len(self.x) < 2:
            raise ValidationError("At least 2 points required for interpolation")

        widths = np.diff(self.x)
        if not np.all(widths >= 0):
            raise ValidationError(
                "Sample table `x` values must be monotonically increasing"
            )

        degenerate = np.flatnonzero(widths == 0)
        interior = degenerate[(degenerate > 0) & (degenerate < len(widths) - 1)]
        if interior.size:
            raise ValidationError(
                f"Repeated `x` values are only allowed at the table ends. "
                f"Found zero-width segments at {interior.tolist()}"
            )
        if degenerate.size == len(widths):
            raise ValidationError("Sample table must span a non-empty `x` range")

        logger.debug(
            f"Built sample table with {len(self.x)} points over "
            f"[{self.x[0]}, {self.x[-1]}]"
        )

    @classmethod
    def from_points(cls, points: typing.Iterable[SamplePoint]) -> Self:
        """
        Build a table from a sequence of `(x, y)` pairs.

        :param points: The `(x, y)` pairs, sorted by `x`.
        :return: A new sample table.
        """
        points = list(points)
        if not points:
            raise ValidationError("At least 2 points required for interpolation")
        xs, ys = zip(*points)
        return cls(x=xs, y=ys)

    @property
    def front(self) -> SamplePoint:
        """The first `(x, y)` knot."""
        return self[0]

    @property
    def back(self) -> SamplePoint:
        """The last `(x, y)` knot."""
        return self[-1]

    @property
    def domain(self) -> typing.Tuple[float, float]:
        """The `(min, max)` range of `x` covered by the table."""
        return float(self.x[0]), float(self.x[-1])

    def __len__(self) -> int:
        return len(self.x)

    def __getitem__(self, index: int) -> SamplePoint:
        return float(self.x[index]), float(self.y[index])

    def __iter__(self) -> typing.Iterator[SamplePoint]:
        for index in range(len(self)):
            yield self[index]
