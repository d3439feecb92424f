import attrs
import numpy as np

from poromat.types import FloatOrArray


__all__ = ["Config"]


@attrs.frozen
class Config:
    """Material law evaluation options."""

    warn_out_of_range_saturations: bool = False
    """
    Whether to log a warning when a law is queried at a saturation outside [0, 1].

    Out-of-range saturations are always evaluated (extrapolated or clamped, depending
    on the quantity). This only controls whether such queries are reported.
    """
    saturation_tolerance: float = attrs.field(
        default=1e-6, validator=attrs.validators.ge(0)
    )
    """Slack allowed around [0, 1] before a saturation is reported as out of range."""

    def is_out_of_range(self, saturation: FloatOrArray) -> bool:
        """
        Check whether a saturation lies outside [0, 1] beyond the configured tolerance.

        :param saturation: Saturation(s) (fraction) - scalar or array.
        :return: True if any saturation is out of range.
        """
        saturation = np.asarray(saturation)
        return bool(
            np.any(
                (saturation < -self.saturation_tolerance)
                | (saturation > 1.0 + self.saturation_tolerance)
            )
        )
