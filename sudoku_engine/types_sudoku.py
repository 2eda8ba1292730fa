# types_sudoku.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

RowsGrid = list[list[int]]
"""An N x N grid as rows of integers (0 = empty)."""


@dataclass(frozen=True)
class Fixed:
    """A placed digit."""

    value: int


@dataclass(frozen=True)
class Open:
    """An unsolved position. `candidates` is an optional cache only."""

    candidates: Optional[frozenset[int]] = None


Cell = Union[Fixed, Open]
