class PoromatError(Exception):
    """Base class for all poromat-related errors."""

    pass


class ValidationError(PoromatError, ValueError):
    """Raised when input data fails validation checks."""

    pass


class UnsupportedOperationError(PoromatError, NotImplementedError):
    """Raised when a material law cannot provide the requested operation."""

    pass
