"""
Glass Solver - FastAPI Backend Server

Provides API endpoints for solving windows and storing drawn puzzles.
"""

from fastapi import FastAPI, HTTPException, APIRouter
from fastapi.responses import Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import Optional
import uvicorn

from glass_solver import Triangle, InvalidPuzzleError, solve, validate_triangles, ALL_PUZZLES
from glass_solver import config
from glass_solver.puzzle_io import format_puzzle, parse_puzzle
from glass_solver.viz import solution_svg
from app import database

# Initialize database on import
database.init_db()

app = FastAPI(title="Glass Solver")
api_router = APIRouter(prefix="/api")

# Enable CORS
origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class PuzzleRequest(BaseModel):
    triangles: list[list[int]]  # One [x1, y1, x2, y2, x3, y3] per triangle


class SolveResponse(BaseModel):
    success: bool
    order: list[int] | None = None  # Triangle numbers in insertion order
    error: str | None = None


class SavePuzzleRequest(BaseModel):
    name: str
    triangles: list[list[int]]


class PuzzleResponse(BaseModel):
    id: Optional[int] = None
    name: str
    triangles: list[list[int]]
    created_at: Optional[str] = None


def triangles_from_rows(rows: list[list[int]]) -> list[Triangle]:
    """Number the triangles by position, as in a puzzle file."""
    return [Triangle.from_coords(num, row) for num, row in enumerate(rows)]


def run_solve(triangles: list[Triangle]) -> SolveResponse:
    """Solve and turn the outcome into a response."""
    try:
        solution = solve(triangles)
    except InvalidPuzzleError as e:
        return SolveResponse(success=False, error=str(e))

    if solution is None:
        return SolveResponse(success=False, error=config.NO_SOLUTION_MESSAGE)
    return SolveResponse(success=True, order=[t.num for t in solution])


def load_stored_puzzle(puzzle_id: int) -> tuple[dict, list[Triangle]]:
    stored = database.get_puzzle(puzzle_id)
    if stored is None:
        raise HTTPException(status_code=404, detail="Puzzle not found")
    return stored, parse_puzzle(stored["body"])


# Routes
@api_router.post("/solve", response_model=SolveResponse)
async def solve_triangles(request: PuzzleRequest):
    """
    Solve a window given as a list of triangles.

    Returns triangle numbers (their position in the request) in insertion order.
    """
    try:
        triangles = triangles_from_rows(request.triangles)
    except InvalidPuzzleError as e:
        return SolveResponse(success=False, error=str(e))
    return run_solve(triangles)


@api_router.get("/demos")
async def get_demos():
    """List the built-in puzzles."""
    return {
        "demos": [
            {"name": name, "triangle_count": len(triangles)}
            for name, triangles in ALL_PUZZLES.items()
        ]
    }


@api_router.get("/demos/{name}", response_model=PuzzleResponse)
async def get_demo(name: str):
    """Get the triangles of a built-in puzzle."""
    if name not in ALL_PUZZLES:
        raise HTTPException(status_code=404, detail="Demo not found")
    return PuzzleResponse(
        name=name,
        triangles=[t.to_coords() for t in ALL_PUZZLES[name]]
    )


# === Stored Puzzle Endpoints ===

@api_router.post("/puzzles", response_model=PuzzleResponse)
async def save_puzzle(request: SavePuzzleRequest):
    """Store a drawn puzzle. Rejects triangles that cannot form a window."""
    try:
        triangles = triangles_from_rows(request.triangles)
        validate_triangles(triangles)
    except InvalidPuzzleError as e:
        raise HTTPException(status_code=400, detail=str(e))

    puzzle_id = database.save_puzzle(request.name, format_puzzle(triangles), len(triangles))
    print(f"[DEBUG] Saved puzzle {puzzle_id} {request.name!r} with {len(triangles)} triangles")
    stored = database.get_puzzle(puzzle_id)
    return PuzzleResponse(
        id=puzzle_id,
        name=stored["name"],
        triangles=[t.to_coords() for t in triangles],
        created_at=stored["created_at"]
    )


@api_router.get("/puzzles")
async def get_puzzles(limit: int = 50):
    """List stored puzzles, newest first."""
    return {"puzzles": database.list_puzzles(limit)}


@api_router.get("/puzzles/{puzzle_id}", response_model=PuzzleResponse)
async def get_puzzle(puzzle_id: int):
    """Get a stored puzzle's triangles."""
    stored, triangles = load_stored_puzzle(puzzle_id)
    return PuzzleResponse(
        id=stored["id"],
        name=stored["name"],
        triangles=[t.to_coords() for t in triangles],
        created_at=stored["created_at"]
    )


@api_router.post("/puzzles/{puzzle_id}/solve", response_model=SolveResponse)
async def solve_stored_puzzle(puzzle_id: int):
    """Solve a stored puzzle and record the outcome."""
    _, triangles = load_stored_puzzle(puzzle_id)
    result = run_solve(triangles)
    database.record_solve(puzzle_id, result.success, result.order)
    print(f"[DEBUG] Solved puzzle {puzzle_id}: success={result.success} order={result.order}")
    return result


@api_router.get("/puzzles/{puzzle_id}/solves")
async def get_puzzle_solves(puzzle_id: int):
    """Solve history of a stored puzzle."""
    load_stored_puzzle(puzzle_id)
    return {"puzzle_id": puzzle_id, "solves": database.get_solves(puzzle_id)}


@api_router.get("/puzzles/{puzzle_id}/svg")
async def get_puzzle_svg(puzzle_id: int):
    """Drawing of a stored puzzle, shards labelled in insertion order."""
    _, triangles = load_stored_puzzle(puzzle_id)
    try:
        solution = solve(triangles)
    except InvalidPuzzleError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if solution is None:
        raise HTTPException(status_code=422, detail=config.NO_SOLUTION_MESSAGE)
    return Response(content=solution_svg(solution), media_type="image/svg+xml")


@api_router.get("/stats")
async def get_stats():
    """Get global statistics."""
    return database.get_global_stats()


# Register the API router
app.include_router(api_router)

if __name__ == "__main__":
    print("Starting Glass Solver server at http://localhost:8000")
    uvicorn.run(app, host="0.0.0.0", port=8000)
