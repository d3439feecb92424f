"""
*poromat*

Tabulated fluid-matrix interaction laws for two-phase flow in porous media.
"""

from ._precision import *  # noqa
from .errors import *  # noqa
from .types import *  # noqa
from .config import *  # noqa
from .tables import *  # noqa
from .interpolation import *  # noqa
from .traits import *  # noqa
from .laws import *  # noqa
from .fluid_states import *  # noqa
from .components import *  # noqa
