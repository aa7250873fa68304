"""Public engine exception types."""

from __future__ import annotations


class GridError(Exception):
    """Base class for every error raised by the engine."""


class InvalidArgumentError(GridError, ValueError):
    """Argument is malformed or names an unrecognized variant."""


class NotFoundError(GridError, LookupError):
    """Operation referenced an object id that is not live."""


class WrongTypeError(GridError, TypeError):
    """Operation requires an object of a different kind."""


class SizeMismatchError(GridError, ValueError):
    """Matrix shapes are incompatible for the requested operation."""


class SingularMatrixError(GridError, ArithmeticError):
    """Matrix has a zero determinant and cannot be inverted."""


__all__ = [
    "GridError",
    "InvalidArgumentError",
    "NotFoundError",
    "SingularMatrixError",
    "SizeMismatchError",
    "WrongTypeError",
]
