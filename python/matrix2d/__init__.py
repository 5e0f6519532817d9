"""Dense generic 2D matrices in pure Python."""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

try:
    __version__ = _pkg_version("matrix2d")
except PackageNotFoundError:
    __version__ = "unknown"

from typing import Any, Callable, Iterable

import numpy as _np

from ._internal import ops as _ops
from ._internal.dense import Matrix
from ._internal.dtypes import (
    HasOne,
    HasZero,
    additive_identity as _additive_identity,
    multiplicative_identity as _multiplicative_identity,
)
from ._internal.errors import Matrix2DError, OutOfBoundsError, ShapeMismatchError
from ._internal.runtime import runtime as _runtime
from ._internal.warnings import Matrix2DPerformanceWarning, Matrix2DWarning

__all__ = [
    "Matrix",
    "from_fn",
    "from_vec",
    "zero",
    "one",
    "identity",
    "matrix",
    "transpose",
    "add",
    "subtract",
    "matmul",
    "HasZero",
    "HasOne",
    "additive_identity",
    "multiplicative_identity",
    "Matrix2DError",
    "ShapeMismatchError",
    "OutOfBoundsError",
    "Matrix2DWarning",
    "Matrix2DPerformanceWarning",
    "set_print_options",
    "get_print_options",
    "print_options",
    "set_matmul_warn_threshold",
    "get_matmul_warn_threshold",
]


# --- factories ---

def from_fn(rows: int, columns: int, fn: Callable[[int, int], Any]) -> Matrix:
    """Build a ``rows x columns`` matrix with ``fn(i, j)`` at each position (row-major)."""
    return Matrix.from_fn(rows, columns, fn)


def from_vec(rows: int, columns: int, data: Iterable[Any]) -> Matrix:
    """Wrap a flat row-major sequence; its length must be ``rows * columns``."""
    return Matrix.from_vec(rows, columns, data)


def zero(rows: int, columns: int, dtype: Any = float) -> Matrix:
    return Matrix.zero(rows, columns, dtype=dtype)


def one(rows: int, columns: int, dtype: Any = float) -> Matrix:
    return Matrix.one(rows, columns, dtype=dtype)


def identity(n: int, dtype: Any = float) -> Matrix:
    return Matrix.one(n, n, dtype=dtype)


def matrix(data: Any) -> Matrix:
    """Create a Matrix from a nested sequence, a 2D NumPy array or another Matrix."""
    return Matrix.from_rows(data)


def additive_identity(dtype: Any = None) -> Any:
    return _additive_identity(dtype, np_module=_np)


def multiplicative_identity(dtype: Any = None) -> Any:
    return _multiplicative_identity(dtype, np_module=_np)


# --- ops ---

def transpose(m: Matrix) -> Matrix:
    if not isinstance(m, Matrix):
        raise TypeError(f"transpose expects a Matrix, got {type(m).__name__}")
    return m.trans()


def add(a: Matrix, b: Matrix) -> Matrix:
    _ops.check_operands(a, b, op="add", matrix_cls=Matrix)
    return _ops.add(a, b)


def subtract(a: Matrix, b: Matrix) -> Matrix:
    _ops.check_operands(a, b, op="subtract", matrix_cls=Matrix)
    return _ops.sub(a, b)


def matmul(a: Matrix, b: Matrix, *, dtype: Any = None) -> Matrix:
    """Matrix product ``a * b``.

    ``dtype`` only matters when the inner dimension is zero: the result is
    then filled with ``dtype``'s additive identity instead of raising
    ShapeMismatchError.
    """
    _ops.check_operands(a, b, op="matmul", matrix_cls=Matrix)
    return _ops.matmul(a, b, dtype=dtype, np_module=_np)


# --- configuration ---

def set_print_options(*, edge_items: int | None = None) -> None:
    _runtime.set_print_options(edge_items=edge_items)


def get_print_options() -> dict[str, Any]:
    return _runtime.get_print_options()


def print_options(*, edge_items: int | None = None) -> Any:
    """Context manager that temporarily overrides print options."""
    return _runtime.print_options(edge_items=edge_items)


def set_matmul_warn_threshold(value: int | None) -> None:
    """Set the product size (rows * inner * columns) above which matmul warns; None disables."""
    _runtime.set_matmul_warn_threshold(value)


def get_matmul_warn_threshold() -> int | None:
    return _runtime.matmul_warn_threshold
