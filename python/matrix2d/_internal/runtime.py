from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Iterator


DEFAULT_EDGE_ITEMS = 4
DEFAULT_MATMUL_WARN_THRESHOLD = 10_000_000

_DISABLED_TOKENS = ("none", "off", "")


def _parse_edge_items(value: Any, *, source: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"{source} must be an integer")
    try:
        n = int(value)
    except ValueError as exc:
        raise ValueError(f"{source} must be an integer, got {value!r}") from exc
    if n < 1:
        raise ValueError(f"{source} must be >= 1, got {n}")
    return n


def _parse_threshold(value: Any, *, source: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, str):
        if value.strip().lower() in _DISABLED_TOKENS:
            return None
        try:
            value = int(value)
        except ValueError as exc:
            raise ValueError(f"{source} must be an integer or 'none', got {value!r}") from exc
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{source} must be an integer or None")
    if value < 0:
        raise ValueError(f"{source} must be non-negative, got {value}")
    return value


class Runtime:
    """Process-global knobs read by formatting and ops at call time."""

    def __init__(
        self,
        *,
        edge_items_env: str = "MATRIX2D_EDGE_ITEMS",
        threshold_env: str = "MATRIX2D_MATMUL_WARN_THRESHOLD",
    ) -> None:
        self._edge_items = DEFAULT_EDGE_ITEMS
        self._matmul_warn_threshold: int | None = DEFAULT_MATMUL_WARN_THRESHOLD

        env = os.environ.get(edge_items_env)
        if env is not None:
            self._edge_items = _parse_edge_items(env, source=edge_items_env)

        env = os.environ.get(threshold_env)
        if env is not None:
            self._matmul_warn_threshold = _parse_threshold(env, source=threshold_env)

    @property
    def edge_items(self) -> int:
        return self._edge_items

    @property
    def matmul_warn_threshold(self) -> int | None:
        return self._matmul_warn_threshold

    def set_print_options(self, *, edge_items: int | None = None) -> None:
        if edge_items is not None:
            self._edge_items = _parse_edge_items(edge_items, source="edge_items")

    def get_print_options(self) -> dict[str, Any]:
        return {"edge_items": self._edge_items}

    @contextmanager
    def print_options(self, *, edge_items: int | None = None) -> Iterator[None]:
        prev = self.get_print_options()
        self.set_print_options(edge_items=edge_items)
        try:
            yield
        finally:
            self.set_print_options(**prev)

    def set_matmul_warn_threshold(self, value: int | None) -> None:
        self._matmul_warn_threshold = _parse_threshold(value, source="matmul_warn_threshold")


runtime = Runtime()
