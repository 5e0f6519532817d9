from __future__ import annotations

import copy as _copy
import operator
from collections.abc import Iterable
from typing import Any, Callable, Iterator

import numpy as np

from . import formatting as _formatting
from . import ops as _ops
from .coercion import check_extent, coerce_general_matrix
from .dtypes import additive_identity, multiplicative_identity
from .errors import OutOfBoundsError, ShapeMismatchError
from .interop import patch_interop


class Matrix:
    """Dense, immutable 2D matrix over arbitrary element objects.

    Elements are stored row-major in a private tuple: ``(i, j)`` lives at
    ``i * columns + j``. Every operation builds a new matrix; operands are
    never mutated.

    ``+`` and ``-`` are elementwise and need equal shapes. ``*`` (and ``@``)
    is the matrix product and needs ``a.column() == b.row()``.
    """

    __slots__ = ("_rows", "_cols", "_data")

    def __init__(self, rows: int, columns: int, data: Iterable[Any]):
        rows = check_extent(rows, "rows")
        columns = check_extent(columns, "columns")
        data = tuple(data)
        if len(data) != rows * columns:
            raise ShapeMismatchError(
                f"Matrix of shape ({rows}, {columns}) needs {rows * columns} elements, got {len(data)}"
            )
        self._rows = rows
        self._cols = columns
        self._data = data

    # --- construction ---

    @classmethod
    def from_fn(cls, rows: int, columns: int, fn: Callable[[int, int], Any]) -> "Matrix":
        rows = check_extent(rows, "rows")
        columns = check_extent(columns, "columns")
        return cls(rows, columns, [fn(i, j) for i in range(rows) for j in range(columns)])

    @classmethod
    def from_vec(cls, rows: int, columns: int, data: Iterable[Any]) -> "Matrix":
        return cls(rows, columns, data)

    @classmethod
    def zero(cls, rows: int, columns: int, dtype: Any = float) -> "Matrix":
        z = additive_identity(dtype, np_module=np)
        return cls.from_fn(rows, columns, lambda i, j: z)

    @classmethod
    def one(cls, rows: int, columns: int, dtype: Any = float) -> "Matrix":
        """Ones on the main diagonal, zeros everywhere else (any shape)."""
        z = additive_identity(dtype, np_module=np)
        o = multiplicative_identity(dtype, np_module=np)
        return cls.from_fn(rows, columns, lambda i, j: o if i == j else z)

    @classmethod
    def from_rows(cls, data: Any) -> "Matrix":
        rows, cols, flat = coerce_general_matrix(data, np_module=np)
        return cls(rows, cols, flat)

    @classmethod
    def from_numpy(cls, array: Any) -> "Matrix":
        if not isinstance(array, np.ndarray):
            raise TypeError(f"from_numpy expects a numpy.ndarray, got {type(array).__name__}")
        return cls.from_rows(array)

    # --- queries ---

    def size(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    def row(self) -> int:
        return self._rows

    def column(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return self.size()

    @property
    def data(self) -> tuple[Any, ...]:
        return self._data

    def get(self, i: int, j: int) -> Any:
        try:
            i = operator.index(i)
            j = operator.index(j)
        except TypeError:
            raise TypeError("indices must be integers") from None
        if i < 0 or j < 0 or i >= self._rows or j >= self._cols:
            raise OutOfBoundsError(f"index ({i}, {j}) out of range for shape {self.size()}")
        return self._data[i * self._cols + j]

    def __getitem__(self, key: Any) -> Any:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("matrix indices must be provided as [row, col]")
        i, j = key
        return self.get(i, j)

    def iter_rows(self) -> Iterator[tuple[Any, ...]]:
        for i in range(self._rows):
            start = i * self._cols
            yield self._data[start:start + self._cols]

    def tolist(self) -> list[list[Any]]:
        return [list(r) for r in self.iter_rows()]

    def to_numpy(self, dtype: Any = None) -> Any:
        return np.asarray(self, dtype=dtype)

    def copy(self) -> "Matrix":
        return type(self)(self._rows, self._cols, self._data)

    def __copy__(self) -> "Matrix":
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> "Matrix":
        return type(self)(self._rows, self._cols, _copy.deepcopy(self._data, memo))

    # --- transforms ---

    def trans(self) -> "Matrix":
        return self.from_fn(self._cols, self._rows, lambda i, j: self[j, i])

    @property
    def T(self) -> "Matrix":
        return self.trans()

    # --- ops ---

    def __add__(self, other: Any) -> Any:
        if not isinstance(other, Matrix):
            return NotImplemented
        return _ops.add(self, other)

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, Matrix):
            return NotImplemented
        return _ops.sub(self, other)

    def __mul__(self, other: Any) -> Any:
        if not isinstance(other, Matrix):
            return NotImplemented
        return _ops.matmul(self, other)

    __matmul__ = __mul__

    def __eq__(self, other: Any) -> Any:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size() == other.size() and all(
            x == y for x, y in zip(self._data, other._data)
        )

    # --- printing ---

    def __str__(self) -> str:
        return _formatting.matrix_display(self)

    def __format__(self, format_spec: str) -> str:
        return _formatting.matrix_display(self, format_spec)

    def __repr__(self) -> str:
        return _formatting.matrix_repr(self)


patch_interop(Matrix)
