"""
Piecewise linear evaluation of sample tables.

Segment selection rule, shared by value and derivative evaluation:

- query above the last knot: last segment
- query below the first knot: first segment
- otherwise: the segment `i` with `x[i] <= query < x[i + 1]`, found by bisection.
  A query sitting exactly on an internal knot therefore resolves to the segment
  starting at that knot, and a query on the last knot to the last segment.

The derivative at an internal knot is the slope of the segment to its right.
"""

import typing

import numba
import numpy as np
import numpy.typing as npt

from poromat.tables import SampleTable
from poromat.types import FloatOrArray


__all__ = ["find_segment_index", "evaluate", "evaluate_derivative"]


@numba.njit(cache=True)
def find_segment_index(xs: npt.NDArray[np.floating], x: float) -> int:
    """
    Locate the segment of `xs` used to evaluate a query at `x`.

    :param xs: Knot positions, in ascending order (at least 2).
    :param x: Query position.
    :return: Index `i` of the segment `[xs[i], xs[i + 1]]`.
    """
    n = xs.shape[0] - 1
    if xs[n] < x:
        return n - 1
    elif xs[0] > x:
        return 0

    low = 0
    high = n
    while low + 1 < high:
        mid = (low + high) // 2
        if xs[mid] <= x:
            low = mid
        else:
            high = mid
    return low


@numba.njit(cache=True)
def _interpolate(
    xs: npt.NDArray[np.floating],
    ys: npt.NDArray[np.floating],
    x: float,
    clamp: bool,
) -> float:
    if clamp:
        if x < xs[0]:
            return ys[0]
        elif x > xs[-1]:
            return ys[-1]

    i = find_segment_index(xs, x)
    width = xs[i + 1] - xs[i]
    if width == 0.0:
        # Degenerate end anchor, hold the anchor's value
        if x >= xs[i + 1]:
            return ys[i + 1]
        return ys[i]
    if x == xs[i + 1]:
        return ys[i + 1]
    alpha = (x - xs[i]) / width
    return ys[i] + (ys[i + 1] - ys[i]) * alpha


@numba.njit(cache=True)
def _slope(
    xs: npt.NDArray[np.floating],
    ys: npt.NDArray[np.floating],
    x: float,
    clamp: bool,
) -> float:
    if clamp and (x < xs[0] or x > xs[-1]):
        return 0.0

    i = find_segment_index(xs, x)
    width = xs[i + 1] - xs[i]
    if width == 0.0:
        return 0.0
    return (ys[i + 1] - ys[i]) / width


@numba.njit(cache=True)
def _interpolate_array(
    xs: npt.NDArray[np.floating],
    ys: npt.NDArray[np.floating],
    x: npt.NDArray[np.floating],
    clamp: bool,
) -> npt.NDArray[np.floating]:
    result = np.empty_like(x)
    for k in range(x.shape[0]):
        result[k] = _interpolate(xs, ys, x[k], clamp)
    return result


@numba.njit(cache=True)
def _slope_array(
    xs: npt.NDArray[np.floating],
    ys: npt.NDArray[np.floating],
    x: npt.NDArray[np.floating],
    clamp: bool,
) -> npt.NDArray[np.floating]:
    result = np.empty_like(x)
    for k in range(x.shape[0]):
        result[k] = _slope(xs, ys, x[k], clamp)
    return result


def _check_bracketing(table: SampleTable, x: float) -> None:
    xs = table.x
    if not (xs[0] <= x <= xs[-1]):
        return
    i = find_segment_index(xs, x)
    assert 0 <= i < len(xs) - 1, f"Segment index {i} out of range for {len(xs)} knots"
    assert xs[i] <= x <= xs[i + 1], f"Segment {i} does not bracket query {x}"


def _apply(
    kernel: typing.Callable[..., typing.Any],
    array_kernel: typing.Callable[..., typing.Any],
    table: SampleTable,
    x: FloatOrArray,
    clamp: bool,
) -> FloatOrArray:
    if np.isscalar(x):
        if __debug__:
            _check_bracketing(table, float(x))  # type: ignore[arg-type]
        return float(kernel(table.x, table.y, float(x), clamp))  # type: ignore[arg-type]

    values = np.asarray(x, dtype=table.x.dtype)
    values_flat = np.ascontiguousarray(values.ravel(order="C"))
    result_flat = array_kernel(table.x, table.y, values_flat, clamp)
    return result_flat.reshape(values.shape)


def evaluate(table: SampleTable, x: FloatOrArray, clamp: bool = False) -> FloatOrArray:
    """
    Linearly interpolate the table at `x`.

    Queries outside the table's domain are linearly extrapolated from the nearest
    segment, unless `clamp` is set, in which case they return the `y` value of the
    nearest end knot.

    Supports both scalar and array inputs.

    :param table: The sample table.
    :param x: Query position(s).
    :param clamp: Whether to hold end values constant outside the table's domain.
    :return: Interpolated value(s) - type matches input type.
    """
    return _apply(_interpolate, _interpolate_array, table, x, clamp)


def evaluate_derivative(
    table: SampleTable, x: FloatOrArray, clamp: bool = False
) -> FloatOrArray:
    """
    Slope of the table's segment used to evaluate `x`.

    The segment is selected exactly as in `evaluate`. With `clamp` set, the slope
    is zero outside the table's domain, matching the flat extrapolation.

    :param table: The sample table.
    :param x: Query position(s).
    :param clamp: Whether the table is held constant outside its domain.
    :return: Derivative value(s) - type matches input type.
    """
    return _apply(_slope, _slope_array, table, x, clamp)
