from contextlib import contextmanager
from contextvars import ContextVar

import numpy as np
import numpy.typing as npt


__all__ = [
    "get_dtype",
    "set_dtype",
    "with_precision",
    "use_64bit_precision",
    "use_32bit_precision",
    "get_floating_point_info",
]

_poromat_dtype: ContextVar[npt.DTypeLike] = ContextVar(
    "_poromat_dtype", default=np.float64
)


def get_dtype() -> npt.DTypeLike:
    """
    Get the data type used when materializing sample tables.

    :return: The current data type.
    """
    return _poromat_dtype.get()


def set_dtype(dtype: npt.DTypeLike) -> None:
    """
    Set the data type used when materializing sample tables in the current context.

    :param dtype: The data type to set as default.
    """
    _poromat_dtype.set(dtype)


@contextmanager
def with_precision(dtype: npt.DTypeLike):
    """
    Context manager to temporarily set the data type, and hence the precision of tables built within it.

    :param dtype: The data type to set within the context.
    """
    token = _poromat_dtype.set(dtype)
    try:
        yield
    finally:
        _poromat_dtype.reset(token)


def use_64bit_precision() -> None:
    """
    Set the default data type to float64.

    Default precision for poromat.
    """
    set_dtype(np.float64)


def use_32bit_precision() -> None:
    """
    Set the default data type to float32.
    """
    set_dtype(np.float32)


def get_floating_point_info() -> np.finfo:
    """
    Get the floating point information for the current data type.

    :return: The floating point information.
    """
    return np.finfo(get_dtype())  # type: ignore
