import os
import shutil
import tempfile

# Must run before glass_solver.config is imported: app.server creates the
# database at import time.
DB_DIR = tempfile.mkdtemp(prefix="glass-solver-tests-")
os.environ["GLASS_SOLVER_DB"] = os.path.join(DB_DIR, "puzzles.db")


def pytest_sessionfinish(session, exitstatus):
    shutil.rmtree(DB_DIR, ignore_errors=True)
