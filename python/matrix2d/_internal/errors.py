"""matrix2d exception types.

Shape and bounds violations are caller bugs, so they are raised eagerly and
never converted into partial results. Each error also derives from the
builtin a caller would reach for (ValueError / IndexError).
"""


class Matrix2DError(Exception):
    """Base class for all matrix2d errors."""


class ShapeMismatchError(Matrix2DError, ValueError):
    """Operand shapes are incompatible for the requested operation."""


class OutOfBoundsError(Matrix2DError, IndexError):
    """An index pair lies outside the matrix extent."""
