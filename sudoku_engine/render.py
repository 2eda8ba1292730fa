"""Text rendering of grids: a box-drawing bordered layout and a flat one-line form."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .solver_core import BOX_WIDTH
from .types_sudoku import Fixed

if TYPE_CHECKING:
    from .grid import Grid

OPEN_GLYPH = "."


def cell_text(cell, show_candidates: bool = False) -> str:
    if isinstance(cell, Fixed):
        return str(cell.value)
    if show_candidates and cell.candidates is not None:
        return "{" + ",".join(str(v) for v in sorted(cell.candidates)) + "}"
    return OPEN_GLYPH


def to_line(grid: Grid) -> str:
    """Flat row-major string, '.' for open cells (multi-digit values are space separated)."""
    texts = [cell_text(cell) for cell in grid.cells]
    sep = " " if grid.dimension > 9 else ""
    return sep.join(texts)


def render_grid(grid: Grid, show_candidates: bool = False) -> str:
    """Bordered grid with separators between boxes.

    With `show_candidates`, open cells are drawn as their candidate set,
    e.g. {1,4,7}.
    """
    if show_candidates:
        grid = grid.annotated()
    dim = grid.dimension
    box_cols = dim // BOX_WIDTH
    texts = [cell_text(cell, show_candidates) for cell in grid.cells]
    width = max(len(t) for t in texts)

    fill = "═" + ("═" * width + "═") * BOX_WIDTH

    def border(left: str, mid: str, right: str) -> str:
        return left + mid.join([fill] * box_cols) + right

    lines = [border("╔", "╦", "╗")]
    for r in range(dim):
        if r and r % grid.group_size == 0:
            lines.append(border("╠", "╬", "╣"))
        row = texts[r * dim:(r + 1) * dim]
        segments = [
            " " + " ".join(t.rjust(width) for t in row[b * BOX_WIDTH:(b + 1) * BOX_WIDTH]) + " "
            for b in range(box_cols)
        ]
        lines.append("║" + "║".join(segments) + "║")
    lines.append(border("╚", "╩", "╝"))
    return "\n".join(lines)
