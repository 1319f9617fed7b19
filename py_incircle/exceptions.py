"""Exception types raised by py_incircle."""


class InscribedCircleError(Exception):
    """Base class for all py_incircle errors."""


class InvalidInputError(InscribedCircleError, ValueError):
    """Raised when an operation receives input it cannot work with.

    Examples are an empty point sequence where a centroid is required, or a
    star polygon requested with ``n < 3`` or ``m < 1``.
    """
