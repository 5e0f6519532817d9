from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HasZero(Protocol):
    """Element types that know their additive identity."""

    @classmethod
    def zero(cls) -> Any: ...


@runtime_checkable
class HasOne(Protocol):
    """Element types that know their multiplicative identity."""

    @classmethod
    def one(cls) -> Any: ...


_BUILTIN_TOKENS: dict[str, Any] = {
    "int": int,
    "i": int,
    "float": float,
    "f": float,
    "double": float,
    "complex": complex,
    "bool": bool,
    "fraction": Fraction,
    "decimal": Decimal,
}


def normalize_dtype(dtype: Any, *, np_module: Any | None) -> Any:
    """Normalize user-provided dtype tokens into a scalar type.

    Returns a callable that builds scalars from ``0`` / ``1`` (or an object
    implementing ``HasZero`` / ``HasOne``).

    Accepted inputs include:
    - None: ``float``
    - Case-insensitive builtin names: "int", "float", "complex", "bool",
      "fraction", "decimal"
    - NumPy dtype names: "float32", "int16", "complex128", ...
    - Python types and classes with ``zero()`` / ``one()``
    - NumPy dtypes/scalar types: np.int16, np.dtype("float32"), ...
    """

    if dtype is None:
        return float

    if isinstance(dtype, str):
        s = dtype.strip().lower()
        if s in _BUILTIN_TOKENS:
            return _BUILTIN_TOKENS[s]
        if np_module is not None:
            try:
                return np_module.dtype(s).type
            except TypeError:
                pass
        raise ValueError(f"Unknown dtype token: {dtype!r}")

    if np_module is not None and isinstance(dtype, np_module.dtype):
        return dtype.type

    if callable(dtype) or isinstance(dtype, (HasZero, HasOne)):
        return dtype

    raise TypeError(f"dtype must be a type, a dtype token or None, got {type(dtype).__name__}")


def _identity(dtype: Any, *, hook: str, seed: int, np_module: Any | None) -> Any:
    scalar_type = normalize_dtype(dtype, np_module=np_module)
    fn = getattr(scalar_type, hook, None)
    if callable(fn):
        return fn()
    try:
        return scalar_type(seed)
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f"dtype {getattr(scalar_type, '__name__', scalar_type)!r} does not provide "
            f"a {hook} element; implement {hook}() or accept {seed} in its constructor"
        ) from exc


def additive_identity(dtype: Any = None, *, np_module: Any | None = None) -> Any:
    return _identity(dtype, hook="zero", seed=0, np_module=np_module)


def multiplicative_identity(dtype: Any = None, *, np_module: Any | None = None) -> Any:
    return _identity(dtype, hook="one", seed=1, np_module=np_module)
