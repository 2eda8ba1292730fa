"""Grid formats, immutable grids, candidate computation and the propagate-and-branch expansion."""

# grid.py
# A Grid is an immutable flat tuple of cells (Fixed / Open) plus its GridFormat.
# Each solving step builds new Grid values; nothing is mutated in place.

from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple, Sequence

from .errors import ConfigurationError, MalformedInputError
from .solver_core import houses, to_cr, unit_cells_box, unit_cells_col, unit_cells_row, which_box
from .types_sudoku import Cell, Fixed, Open, RowsGrid

CONTRADICTORY = "contradictory"
COMPLETE = "complete"
PARTIAL = "partial"


class GridFormat:
    """Shape of a puzzle: side length, box height and the legal symbols."""

    def __init__(self, dimension: int) -> None:
        if not isinstance(dimension, int) or dimension <= 0 or dimension % 3 != 0:
            raise ConfigurationError(f"invalid grid dimension ({dimension})")
        self.dimension = dimension
        self.group_size = dimension // 3
        self.full_set = frozenset(range(1, dimension + 1))

    def __eq__(self, other) -> bool:
        return isinstance(other, GridFormat) and other.dimension == self.dimension

    def __hash__(self) -> int:
        return hash(self.dimension)

    def __repr__(self) -> str:
        return f"GridFormat({self.dimension})"

    def _cell_for(self, value: int) -> Cell:
        return Fixed(value) if value in self.full_set else Open()

    def parse(self, text: str) -> Grid:
        """Read one character per cell, ignoring whitespace.

        Digits 1..dimension become fixed cells; every other character
        (including '0', '.' and digits above the dimension) is open.
        """
        cells = []
        for ch in text:
            if ch.isspace():
                continue
            if "0" <= ch <= "9":
                cells.append(self._cell_for(ord(ch) - ord("0")))
            else:
                cells.append(Open())
        expected = self.dimension * self.dimension
        if len(cells) != expected:
            raise MalformedInputError(f"wrong dimensions ({len(cells)} != {expected})")
        return Grid(cells, self)

    def from_rows(self, rows: Sequence[Sequence[int]]) -> Grid:
        """Build a grid from `dimension` rows of ints (0 = blank)."""
        dim = self.dimension
        if len(rows) != dim or any(len(row) != dim for row in rows):
            raise MalformedInputError(f"expected {dim} rows of {dim} values")
        return Grid([self._cell_for(int(v)) for row in rows for v in row], self)

    def empty(self) -> Grid:
        return Grid([Open()] * (self.dimension * self.dimension), self)


class Expansion(NamedTuple):
    """Result of one propagate-and-branch step."""

    solutions: tuple[Grid, ...]
    children: tuple[Grid, ...]


class Grid:
    def __init__(self, cells: Iterable[Cell], fmt: GridFormat) -> None:
        self.cells: tuple[Cell, ...] = tuple(cells)
        self.fmt = fmt
        expected = fmt.dimension * fmt.dimension
        if len(self.cells) != expected:
            raise MalformedInputError(f"wrong dimensions ({len(self.cells)} != {expected})")

    @property
    def dimension(self) -> int:
        return self.fmt.dimension

    @property
    def group_size(self) -> int:
        return self.fmt.group_size

    # --- derived groupings -------------------------------------------------

    def at(self, c: int, r: int) -> Cell:
        return self.cells[c + r * self.dimension]

    def row(self, r: int) -> list[Cell]:
        return [self.cells[i] for i in unit_cells_row(self.dimension, r)]

    def col(self, c: int) -> list[Cell]:
        return [self.cells[i] for i in unit_cells_col(self.dimension, c)]

    def box(self, g: int) -> list[Cell]:
        return [self.cells[i] for i in unit_cells_box(self.dimension, g)]

    def box_at(self, c: int, r: int) -> list[Cell]:
        return self.box(which_box(self.dimension, c, r))

    def rows(self) -> list[list[Cell]]:
        return [self.row(r) for r in range(self.dimension)]

    def cols(self) -> list[list[Cell]]:
        return [self.col(c) for c in range(self.dimension)]

    def boxes(self) -> list[list[Cell]]:
        return [self.box(g) for g in range(self.dimension)]

    def open_indices(self) -> list[int]:
        return [i for i, cell in enumerate(self.cells) if isinstance(cell, Open)]

    # --- candidates --------------------------------------------------------

    def _fixed_in(self, indices: Iterable[int]) -> set[int]:
        cells = self.cells
        return {cells[i].value for i in indices if isinstance(cells[i], Fixed)}

    def candidates(self) -> dict[int, frozenset[int]]:
        """Candidate set of every open cell, keyed by flat index."""
        dim = self.dimension
        full = self.fmt.full_set
        row_left = [full - self._fixed_in(unit_cells_row(dim, r)) for r in range(dim)]
        col_left = [full - self._fixed_in(unit_cells_col(dim, c)) for c in range(dim)]
        box_left = [full - self._fixed_in(unit_cells_box(dim, g)) for g in range(dim)]
        out = {}
        for i in self.open_indices():
            c, r = to_cr(dim, i)
            out[i] = row_left[r] & col_left[c] & box_left[which_box(dim, c, r)]
        return out

    def annotated(self) -> Grid:
        """Same placements, with every open cell carrying its candidate set."""
        cands = self.candidates()
        cells = [Open(cands[i]) if i in cands else cell for i, cell in enumerate(self.cells)]
        return Grid(cells, self.fmt)

    # --- validity ----------------------------------------------------------

    def is_valid(self) -> bool:
        """No row, column or box holds the same fixed value twice."""
        cells = self.cells
        for house in houses(self.dimension):
            fixed = [cells[i].value for i in house if isinstance(cells[i], Fixed)]
            if len(fixed) != len(set(fixed)):
                return False
        return True

    def is_complete(self) -> bool:
        return all(isinstance(cell, Fixed) for cell in self.cells)

    def status(self) -> str:
        if not self.is_valid():
            return CONTRADICTORY
        return COMPLETE if self.is_complete() else PARTIAL

    # --- solving -----------------------------------------------------------

    def with_values(self, placements: dict[int, int]) -> Grid:
        cells = list(self.cells)
        for i, value in placements.items():
            cells[i] = Fixed(value)
        return Grid(cells, self.fmt)

    def expand(self) -> Expansion:
        """Apply every forced placement, then branch on the tightest open cell.

        Returns the solutions found at this node (only when the grid is
        already complete) and the child grids still to be explored. An
        invalid grid yields neither.
        """
        if not self.is_valid():
            return Expansion((), ())
        ordered = sorted(self.candidates().items(), key=lambda kv: (len(kv[1]), kv[0]))
        if not ordered:
            return Expansion((self,), ())

        forced = {i: next(iter(cands)) for i, cands in ordered if len(cands) == 1}
        remaining = [(i, cands) for i, cands in ordered if len(cands) != 1]
        base = self.with_values(forced) if forced else self

        if not remaining:
            # forced cells may clash with each other; the child's own
            # validity check settles that
            return Expansion((), (base,))

        i, cands = remaining[0]
        return Expansion((), tuple(base.with_values({i: v}) for v in sorted(cands)))

    def iter_solutions(self) -> Iterator[Grid]:
        """Depth-first walk of the expansion tree, yielding terminal grids."""
        stack = [self]
        while stack:
            solutions, children = stack.pop().expand()
            yield from solutions
            stack.extend(reversed(children))

    def solve(self) -> list[Grid]:
        return list(self.iter_solutions())

    # --- conversions -------------------------------------------------------

    def values(self) -> tuple[int, ...]:
        """Flat values, 0 for open cells."""
        return tuple(cell.value if isinstance(cell, Fixed) else 0 for cell in self.cells)

    def to_rows(self) -> RowsGrid:
        dim = self.dimension
        flat = self.values()
        return [list(flat[r * dim:(r + 1) * dim]) for r in range(dim)]

    def __eq__(self, other) -> bool:
        return isinstance(other, Grid) and self.fmt == other.fmt and self.values() == other.values()

    def __hash__(self) -> int:
        return hash((self.dimension, self.values()))

    def __repr__(self) -> str:
        from .render import to_line

        return f"Grid({self.dimension}, {to_line(self)!r})"

    def __str__(self) -> str:
        from .render import render_grid

        return render_grid(self)
