"""
Sudoku expansion engine

Constraint propagation plus exhaustive branching over immutable grids.
"""

from .errors import ConfigurationError, MalformedInputError, SudokuError
from .types_sudoku import Fixed, Open
from .grid import Grid, GridFormat
from .search import SearchResult, solve_all
from .render import render_grid, to_line
from .config import SolverConfig, load_config

__version__ = "1.0.0"
__all__ = [
    'ConfigurationError',
    'MalformedInputError',
    'SudokuError',
    'Fixed',
    'Open',
    'Grid',
    'GridFormat',
    'SearchResult',
    'solve_all',
    'render_grid',
    'to_line',
    'SolverConfig',
    'load_config',
]
