from __future__ import annotations

from typing import Any

import numpy as np


def _array(self: Any, dtype: Any = None, copy: Any = None) -> Any:
    if copy is False:
        raise ValueError("Matrix storage cannot be shared with NumPy; a copy is required")
    rows, cols = self.size()
    n = rows * cols
    try:
        flat = np.array(list(self.data), dtype=dtype)
    except ValueError:
        flat = None
    # Sequence-valued elements would otherwise become extra array dimensions.
    if flat is None or flat.shape != (n,):
        flat = np.empty(n, dtype=object if dtype is None else dtype)
        for k, value in enumerate(self.data):
            flat[k] = value
    return flat.reshape(rows, cols)


def _array_ufunc(self: Any, ufunc: Any, method: str, *inputs: Any, **kwargs: Any) -> Any:
    """
    NumPy ufunc protocol implementation for matrix2d matrices.
    Routes np.add / np.subtract / np.matmul between matrices to the matrix
    operators; everything else (including ndarray operands) is refused so
    NumPy does not broadcast over the Matrix as an object scalar.

    np.equal / np.not_equal (reached through ``ndarray == Matrix``) follow
    Matrix equality: a Matrix never equals a non-Matrix.
    """
    if method != "__call__" or kwargs or len(inputs) != 2:
        return NotImplemented
    cls = type(self)
    a, b = inputs
    both = isinstance(a, cls) and isinstance(b, cls)

    if ufunc is np.equal:
        return a == b if both else False
    if ufunc is np.not_equal:
        return a != b if both else True
    if not both:
        return NotImplemented

    if ufunc is np.add:
        return a + b
    if ufunc is np.subtract:
        return a - b
    if ufunc is np.matmul:
        return a @ b
    return NotImplemented


def patch_interop(cls: Any) -> None:
    """Patch the NumPy array protocols onto the given class."""
    cls.__array__ = _array
    cls.__array_ufunc__ = _array_ufunc
