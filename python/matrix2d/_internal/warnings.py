"""matrix2d warning categories.

These exist so users can filter/suppress matrix2d warnings without
catching all UserWarning.

Keep this module lightweight and dependency-free to avoid import cycles.
"""


class Matrix2DWarning(UserWarning):
    """Base warning category for all matrix2d user-facing warnings."""


class Matrix2DPerformanceWarning(Matrix2DWarning):
    """Warnings about likely performance pitfalls (e.g., large pure-Python products)."""
