"""Index math for flat row-major grids: cell keys, houses (rows, columns, boxes) and box lookup."""

# solver_core.py
# Pure index-mapping helpers. Nothing here looks at cell contents; a grid of
# side `dim` is a flat sequence where index = col + row * dim.
# Boxes are BOX_WIDTH columns wide and dim // 3 rows tall.

from functools import lru_cache

BOX_WIDTH = 3


def to_index(dim: int, c: int, r: int) -> int:
    return c + r * dim


def to_cr(dim: int, i: int) -> tuple[int, int]:
    return i % dim, i // dim


def rc_to_key(r: int, c: int) -> str:
    """1-based row/col key, e.g. r1c1."""
    return f"r{r}c{c}"


def which_box(dim: int, c: int, r: int) -> int:
    group = dim // 3
    return c // BOX_WIDTH + (r // group) * group


@lru_cache(maxsize=None)
def unit_cells_row(dim: int, r: int) -> tuple[int, ...]:
    return tuple(to_index(dim, c, r) for c in range(dim))


@lru_cache(maxsize=None)
def unit_cells_col(dim: int, c: int) -> tuple[int, ...]:
    return tuple(to_index(dim, c, r) for r in range(dim))


@lru_cache(maxsize=None)
def unit_cells_box(dim: int, g: int) -> tuple[int, ...]:
    group = dim // 3
    c0 = g % group * BOX_WIDTH
    r0 = g // group * group
    return tuple(
        to_index(dim, c0 + gc, r0 + gr) for gr in range(group) for gc in range(BOX_WIDTH)
    )


@lru_cache(maxsize=None)
def houses(dim: int) -> tuple[tuple[int, ...], ...]:
    """Every row, then every column, then every box."""
    return (
        tuple(unit_cells_row(dim, r) for r in range(dim))
        + tuple(unit_cells_col(dim, c) for c in range(dim))
        + tuple(unit_cells_box(dim, g) for g in range(dim))
    )
