"""
Configuration for the glass solver.
"""
import os
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent

# Bundled puzzle files
PUZZLES_DIR = Path(__file__).parent / "data"
DEMO_PUZZLE = "shattered-glass.in.txt"

# Puzzle store used by the web app
DB_PATH = Path(os.environ.get("GLASS_SOLVER_DB", PROJECT_ROOT / "app" / "puzzles.db"))

NO_SOLUTION_MESSAGE = "No solution! The puzzle cannot be solved."

# SVG rendering
SVG_SCALE = 60  # pixels per grid unit
SVG_MARGIN = 20
SVG_BACKGROUND = "#ffffff"
SVG_FILL = "#3b6fd8"
SVG_OUTLINE = "#000000"
SVG_BORDER = "#2e7d32"
SVG_LABEL = "#ffffff"
