"""
Glass Solver - Database module for stored puzzles and solve results
"""

import json
import sqlite3
from typing import Optional

from glass_solver import config

# Database file location
DB_PATH = config.DB_PATH


def get_connection():
    """Get a database connection."""
    conn = sqlite3.connect(DB_PATH)
    conn.row_factory = sqlite3.Row
    return conn


def init_db():
    """Initialize the database with required tables."""
    conn = get_connection()
    cursor = conn.cursor()

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS puzzles (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            body TEXT NOT NULL,
            triangle_count INTEGER NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS solves (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            puzzle_id INTEGER NOT NULL REFERENCES puzzles(id),
            success BOOLEAN NOT NULL,
            solution TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)

    # Index for fetching a puzzle's solve history
    cursor.execute("""
        CREATE INDEX IF NOT EXISTS idx_solves_puzzle
        ON solves(puzzle_id)
    """)

    conn.commit()
    conn.close()
    print(f"Database initialized at {DB_PATH}")


def save_puzzle(name: str, body: str, triangle_count: int) -> int:
    """
    Save a puzzle in file format. Returns the new puzzle id.
    """
    conn = get_connection()
    cursor = conn.cursor()

    cursor.execute("""
        INSERT INTO puzzles (name, body, triangle_count)
        VALUES (?, ?, ?)
    """, (name, body, triangle_count))

    puzzle_id = cursor.lastrowid
    conn.commit()
    conn.close()
    return puzzle_id


def get_puzzle(puzzle_id: int) -> Optional[dict]:
    """Get a stored puzzle, or None if it does not exist."""
    conn = get_connection()
    cursor = conn.cursor()

    cursor.execute("""
        SELECT id, name, body, triangle_count, created_at FROM puzzles
        WHERE id = ?
    """, (puzzle_id,))

    row = cursor.fetchone()
    conn.close()

    if row:
        return {
            "id": row["id"],
            "name": row["name"],
            "body": row["body"],
            "triangle_count": row["triangle_count"],
            "created_at": row["created_at"]
        }
    return None


def list_puzzles(limit: int = 50) -> list:
    """List stored puzzles, newest first, with their solve counts."""
    conn = get_connection()
    cursor = conn.cursor()

    cursor.execute("""
        SELECT p.id, p.name, p.triangle_count, p.created_at,
               COUNT(s.id) as solve_count
        FROM puzzles p
        LEFT JOIN solves s ON s.puzzle_id = p.id
        GROUP BY p.id
        ORDER BY p.id DESC
        LIMIT ?
    """, (limit,))

    rows = cursor.fetchall()
    conn.close()

    return [
        {
            "id": row["id"],
            "name": row["name"],
            "triangle_count": row["triangle_count"],
            "solve_count": row["solve_count"],
            "created_at": row["created_at"]
        }
        for row in rows
    ]


def record_solve(puzzle_id: int, success: bool, solution: Optional[list[int]]) -> int:
    """Record the outcome of solving a stored puzzle. Returns the solve id."""
    conn = get_connection()
    cursor = conn.cursor()

    cursor.execute("""
        INSERT INTO solves (puzzle_id, success, solution)
        VALUES (?, ?, ?)
    """, (puzzle_id, success, json.dumps(solution) if solution is not None else None))

    solve_id = cursor.lastrowid
    conn.commit()
    conn.close()
    return solve_id


def get_solves(puzzle_id: int) -> list:
    """Solve history for a puzzle, oldest first."""
    conn = get_connection()
    cursor = conn.cursor()

    cursor.execute("""
        SELECT id, success, solution, created_at FROM solves
        WHERE puzzle_id = ?
        ORDER BY id ASC
    """, (puzzle_id,))

    rows = cursor.fetchall()
    conn.close()

    return [
        {
            "id": row["id"],
            "success": bool(row["success"]),
            "solution": json.loads(row["solution"]) if row["solution"] else None,
            "created_at": row["created_at"]
        }
        for row in rows
    ]


def get_global_stats() -> dict:
    """Get global statistics."""
    conn = get_connection()
    cursor = conn.cursor()

    cursor.execute("SELECT COUNT(*) as total FROM puzzles")
    puzzles = cursor.fetchone()["total"]

    cursor.execute("SELECT COUNT(*) as total FROM solves")
    solves = cursor.fetchone()["total"]

    cursor.execute("SELECT COUNT(*) as total FROM solves WHERE success = 1")
    solved = cursor.fetchone()["total"]

    conn.close()

    return {
        "total_puzzles": puzzles,
        "total_solves": solves,
        "successful_solves": solved
    }


if __name__ == "__main__":
    # Test the database
    init_db()

    puzzle_id = save_puzzle("test", "2\n0 0 1 0 1 1\n1 1 0 1 0 0\n", 2)
    print(f"Saved puzzle: {puzzle_id}")

    record_solve(puzzle_id, True, [0, 1])
    print(f"Solves: {get_solves(puzzle_id)}")

    stats = get_global_stats()
    print(f"Stats: {stats}")
