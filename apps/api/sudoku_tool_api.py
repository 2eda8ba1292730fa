# sudoku_tool_api.py
# Optional FastAPI wrapper for the engine.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from sudoku_engine import GridFormat, SolverConfig, SudokuError, solve_all
from sudoku_engine.solver_core import rc_to_key, to_cr

app = FastAPI(title="Sudoku Expansion Engine API")


class GridModel(BaseModel):
    grid: list[list[int]]


class SolveRequest(BaseModel):
    grid: list[list[int]]
    max_solutions: int | None = Field(default=None, ge=1)
    workers: int = Field(default=1, ge=1)


class SolveResponse(BaseModel):
    outcome: str
    message: str
    count: int
    solutions: list[list[list[int]]]


def _load(rows: list[list[int]]):
    try:
        return GridFormat(len(rows)).from_rows(rows)
    except SudokuError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/solve", response_model=SolveResponse)
def api_solve(req: SolveRequest):
    grid = _load(req.grid)
    result = solve_all(grid, SolverConfig(dimension=grid.dimension, workers=req.workers))
    solutions = result.solutions
    if req.max_solutions is not None:
        solutions = solutions[:req.max_solutions]
    return SolveResponse(
        outcome=result.outcome,
        message=result.message,
        count=len(result.solutions),
        solutions=[s.to_rows() for s in solutions],
    )


@app.post("/candidates")
def api_cands(payload: GridModel) -> dict[str, dict[str, list[int]]]:
    grid = _load(payload.grid)
    out = {}
    for i, cands in sorted(grid.candidates().items()):
        c, r = to_cr(grid.dimension, i)
        out[rc_to_key(r + 1, c + 1)] = sorted(cands)
    return {"candidates": out}


@app.post("/validate")
def api_validate(payload: GridModel):
    grid = _load(payload.grid)
    return {"ok": grid.is_valid(), "status": grid.status()}
