from __future__ import annotations

import operator
from collections.abc import Sequence as _SequenceABC
from typing import Any

from .errors import ShapeMismatchError


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def check_extent(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got bool")
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}") from None
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def _row_entries(row: Any, *, np_module: Any | None) -> list[Any] | None:
    if is_sequence_like(row):
        return list(row)
    if np_module is not None and isinstance(row, np_module.ndarray) and row.ndim == 1:
        return row.tolist()
    return None


def coerce_sequence_rows(candidate: Any, *, np_module: Any | None = None) -> tuple[int, int, list[Any]]:
    if not is_sequence_like(candidate):
        raise TypeError("Matrix data must be provided as a nested sequence or a 2D NumPy array.")
    rows = list(candidate)
    if not rows:
        return 0, 0, []
    flat: list[Any] = []
    cols = None
    for index, raw in enumerate(rows):
        row = _row_entries(raw, np_module=np_module)
        if row is None:
            raise TypeError("Each matrix row must be a sequence of entries.")
        if cols is None:
            cols = len(row)
        elif len(row) != cols:
            raise ShapeMismatchError(
                f"Matrix data must be rectangular: row {index} has {len(row)} entries, expected {cols}"
            )
        flat.extend(row)
    return len(rows), cols or 0, flat


def coerce_numpy_array(array: Any) -> tuple[int, int, list[Any]]:
    if array.ndim != 2:
        raise TypeError(f"Matrix input must be a 2D array, got {array.ndim}D")
    rows, cols = (int(x) for x in array.shape)
    return rows, cols, array.reshape(-1).tolist()


def coerce_general_matrix(candidate: Any, *, np_module: Any | None) -> tuple[int, int, list[Any]]:
    """Return ``(rows, columns, row-major flat data)`` for matrix-like input."""
    size_attr: Any = getattr(candidate, "size", None)
    get_attr: Any = getattr(candidate, "get", None)
    if callable(size_attr) and callable(get_attr):
        rows, cols = size_attr()
        return rows, cols, [get_attr(i, j) for i in range(rows) for j in range(cols)]

    if np_module is not None and isinstance(candidate, np_module.ndarray):
        return coerce_numpy_array(candidate)

    return coerce_sequence_rows(candidate, np_module=np_module)
