from .base import *  # noqa
from .piecewise_linear import *  # noqa
