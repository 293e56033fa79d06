"""Pipe-delimited text tables."""

from __future__ import annotations

from collections.abc import Collection, Sequence

from llm_pricing.ui.formatting import NOT_AVAILABLE

COLUMN_SEPARATOR = " | "
SEPARATOR_JOINT = "-+-"


def render_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str | None]],
    *,
    numeric_columns: Collection[int] = (),
) -> str:
    """Render rows as an aligned table with a header and a dashed separator.

    Each column is as wide as its widest cell or header. Columns listed in
    ``numeric_columns`` are right-justified, the rest left-justified.
    ``None`` cells render as ``N/A``.
    """
    cells = [[NOT_AVAILABLE if cell is None else cell for cell in row] for row in rows]
    for row in cells:
        if len(row) != len(headers):
            raise ValueError(f"Row has {len(row)} cells, expected {len(headers)}")

    widths = [len(header) for header in headers]
    for row in cells:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], len(cell))

    def line(values: Sequence[str]) -> str:
        padded = [
            value.rjust(widths[i]) if i in numeric_columns else value.ljust(widths[i])
            for i, value in enumerate(values)
        ]
        return COLUMN_SEPARATOR.join(padded).rstrip()

    lines = [line(headers), SEPARATOR_JOINT.join("-" * width for width in widths)]
    lines.extend(line(row) for row in cells)
    return "\n".join(lines)
