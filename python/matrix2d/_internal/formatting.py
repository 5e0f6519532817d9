from __future__ import annotations

from typing import Any

from .runtime import runtime


def _edge_indices(length: int) -> tuple[list[int], list[int], bool]:
    edge_items = runtime.edge_items
    if length <= edge_items * 2:
        return list(range(length)), [], False
    head = list(range(edge_items))
    tail = list(range(length - edge_items, length))
    return head, tail, True


def matrix_display(matrix: Any, format_spec: str = "") -> str:
    """Render one line per row, every element followed by a single space.

    Element formatting errors propagate; nothing is returned unless every
    element was written.
    """
    rows, cols = matrix.size()
    parts: list[str] = []
    for i in range(rows):
        for j in range(cols):
            value = matrix[i, j]
            parts.append(format(value, format_spec) if format_spec else str(value))
            parts.append(" ")
        parts.append("\n")
    return "".join(parts)


def _format_matrix_row(
    matrix: Any,
    row_index: int,
    col_head: list[int],
    col_tail: list[int],
    truncated: bool,
) -> str:
    entries: list[str] = [repr(matrix[row_index, col]) for col in col_head]
    if truncated:
        entries.append("...")
    entries.extend(repr(matrix[row_index, col]) for col in col_tail)
    return ", ".join(entries)


def matrix_repr(matrix: Any) -> str:
    rows, cols = matrix.size()
    header = f"{matrix.__class__.__name__}(shape=({rows}, {cols}))"

    if rows == 0 or cols == 0:
        return header + "\n[]"

    row_head, row_tail, rows_truncated = _edge_indices(rows)
    col_head, col_tail, cols_truncated = _edge_indices(cols)

    lines = [header, "["]
    for row_index in row_head:
        row_repr = _format_matrix_row(matrix, row_index, col_head, col_tail, cols_truncated)
        lines.append(f" [{row_repr}]")
    if rows_truncated:
        lines.append(" ...")
    for row_index in row_tail:
        row_repr = _format_matrix_row(matrix, row_index, col_head, col_tail, cols_truncated)
        lines.append(f" [{row_repr}]")
    lines.append("]")
    return "\n".join(lines)
