"""Search driver: splits the expansion tree, fans subtrees out to worker processes and collects the solved grids."""

from __future__ import annotations

import logging
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import List, Optional

from .config import SolverConfig
from .errors import ConfigurationError
from .grid import Grid

logger = logging.getLogger(__name__)

NO_SOLUTION = "no-solution"
UNIQUE = "unique"
MULTIPLE = "multiple"

MESSAGES = {
    NO_SOLUTION: "No solutions found",
    UNIQUE: "Found a unique solution",
    MULTIPLE: "Multiple solutions found",
}


@dataclass
class SearchResult:
    outcome: str
    solutions: List[Grid] = field(default_factory=list)
    duration_ms: int = 0
    nodes: int = 0  # nodes expanded in the driver before fan-out
    message: str = ""


def classify(count: int) -> str:
    if count == 0:
        return NO_SOLUTION
    return UNIQUE if count == 1 else MULTIPLE


def split_frontier(grid: Grid, threshold: int) -> tuple[list[Grid], list[Grid], int]:
    """Expand breadth-first until at least `threshold` subtrees are pending.

    Returns (solutions found on the way, pending grids, nodes expanded).
    """
    solutions: list[Grid] = []
    frontier = [grid]
    nodes = 0
    while frontier and len(frontier) < threshold:
        pending: list[Grid] = []
        for g in frontier:
            found, children = g.expand()
            nodes += 1
            solutions.extend(found)
            pending.extend(children)
        frontier = pending
    return solutions, frontier, nodes


def _solve_subtree(grid: Grid) -> list[Grid]:
    return grid.solve()


def _solve_sequential(frontier: list[Grid]) -> list[Grid]:
    out: list[Grid] = []
    for g in frontier:
        out.extend(g.solve())
    return out


def _solve_parallel(frontier: list[Grid], workers: int) -> list[Grid]:
    try:
        executor = ProcessPoolExecutor(max_workers=workers)
    except (PermissionError, OSError) as e:
        logger.warning("process pool unavailable (%s); solving in-process", e)
        return _solve_sequential(frontier)

    out: list[Grid] = []
    with executor:
        futures = [executor.submit(_solve_subtree, g) for g in frontier]
        for future in as_completed(futures):
            out.extend(future.result())
    return out


def dedupe(grids: List[Grid]) -> List[Grid]:
    unique = {g.values(): g for g in grids}
    return [unique[k] for k in sorted(unique)]


def solve_all(grid: Grid, config: Optional[SolverConfig] = None) -> SearchResult:
    """Enumerate every solution of `grid`.

    Raises ConfigurationError when `config` describes another dimension.
    An inconsistent puzzle is not an error: it yields an empty result with
    outcome 'no-solution'.
    """
    config = config or SolverConfig(dimension=grid.dimension)
    if config.dimension != grid.dimension:
        raise ConfigurationError(
            f"config dimension {config.dimension} does not match grid dimension {grid.dimension}"
        )
    start = time.time()
    workers = config.worker_count()
    logger.info("solve start: %d open cells, %d worker(s)", len(grid.open_indices()), workers)

    solutions, frontier, nodes = split_frontier(grid, config.split_threshold)
    logger.debug("frontier: %d subtree(s) after %d node(s)", len(frontier), nodes)

    if workers > 1 and len(frontier) > 1:
        solutions.extend(_solve_parallel(frontier, workers))
    else:
        solutions.extend(_solve_sequential(frontier))

    solutions = dedupe(solutions)
    outcome = classify(len(solutions))
    duration_ms = int((time.time() - start) * 1000)
    logger.info("solve end in %d ms; solutions found %d", duration_ms, len(solutions))
    return SearchResult(
        outcome=outcome,
        solutions=solutions,
        duration_ms=duration_ms,
        nodes=nodes,
        message=MESSAGES[outcome],
    )
