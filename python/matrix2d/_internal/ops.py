from __future__ import annotations

import operator
import warnings
from typing import Any, Callable

from .dtypes import additive_identity
from .errors import ShapeMismatchError
from .runtime import runtime
from .warnings import Matrix2DPerformanceWarning


def check_operands(a: Any, b: Any, *, op: str, matrix_cls: type) -> None:
    for obj in (a, b):
        if not isinstance(obj, matrix_cls):
            raise TypeError(f"{op} expects {matrix_cls.__name__} operands, got {type(obj).__name__}")


def elementwise(a: Any, b: Any, fn: Callable[[Any, Any], Any], *, op: str) -> Any:
    if a.size() != b.size():
        raise ShapeMismatchError(f"Shape mismatch for {op}: {a.size()} vs {b.size()}")
    rows, cols = a.size()
    return a.from_fn(rows, cols, lambda i, j: fn(a[i, j], b[i, j]))


def add(a: Any, b: Any) -> Any:
    return elementwise(a, b, operator.add, op="add")


def sub(a: Any, b: Any) -> Any:
    return elementwise(a, b, operator.sub, op="subtract")


def _warn_if_large(rows: int, inner: int, cols: int) -> None:
    threshold = runtime.matmul_warn_threshold
    if threshold is None:
        return
    work = rows * inner * cols
    if work > threshold:
        warnings.warn(
            f"matmul of ({rows}, {inner}) x ({inner}, {cols}) runs {work} scalar products "
            "in pure Python; convert with to_numpy() for large dense products.",
            Matrix2DPerformanceWarning,
            stacklevel=4,
        )


def matmul(a: Any, b: Any, *, dtype: Any = None, np_module: Any | None = None) -> Any:
    """Dense matrix product ``a * b``.

    Each output entry starts from the ``k = 0`` product and folds the
    remaining terms in increasing ``k`` with ``acc = acc + term``; no zero seed
    is used, so the element type only needs ``*`` and a closed ``+``.

    With a zero inner dimension there is no first term. The product is then
    rejected unless ``dtype`` is given, in which case every entry is that
    type's additive identity.
    """
    r, inner = a.size()
    inner2, c = b.size()
    if inner != inner2:
        raise ShapeMismatchError(f"Shape mismatch for matmul: {a.size()} vs {b.size()}")

    if inner == 0:
        if dtype is None:
            raise ShapeMismatchError(
                f"matmul with zero inner dimension ({a.size()} x {b.size()}) has no terms to sum; "
                "pass dtype= to fill the result with its additive identity"
            )
        zero = additive_identity(dtype, np_module=np_module)
        return a.from_fn(r, c, lambda i, j: zero)

    _warn_if_large(r, inner, c)

    def entry(i: int, j: int) -> Any:
        acc = a[i, 0] * b[0, j]
        for k in range(1, inner):
            acc = acc + a[i, k] * b[k, j]
        return acc

    return a.from_fn(r, c, entry)
