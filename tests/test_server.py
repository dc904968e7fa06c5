import os
import tempfile
import unittest
from unittest import mock

from fastapi.testclient import TestClient

from app import database, server
from glass_solver import config
from glass_solver.puzzles import PINWHEEL, SHATTERED_GLASS


def rows(triangles):
    return [t.to_coords() for t in triangles]


class ServerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        patcher = mock.patch.object(database, "DB_PATH", os.path.join(self.tmp.name, "test.db"))
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self.tmp.cleanup)
        database.init_db()
        self.client = TestClient(server.app)

    def test_import_time_store_is_outside_the_source_tree(self) -> None:
        self.assertEqual(str(config.DB_PATH), os.environ["GLASS_SOLVER_DB"])
        self.assertNotEqual(config.DB_PATH.parent, config.PROJECT_ROOT / "app")

    def save(self, name, triangles) -> int:
        response = self.client.post("/api/puzzles", json={"name": name, "triangles": rows(triangles)})
        self.assertEqual(response.status_code, 200)
        return response.json()["id"]

    def test_solve(self) -> None:
        response = self.client.post("/api/solve", json={"triangles": rows(SHATTERED_GLASS)})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            "success": True,
            "order": [0, 1, 2, 3, 4, 7, 5, 9, 8, 6],
            "error": None,
        })

    def test_solve_without_solution(self) -> None:
        body = self.client.post("/api/solve", json={"triangles": rows(PINWHEEL[:3])}).json()
        self.assertFalse(body["success"])
        self.assertIsNone(body["order"])
        self.assertEqual(body["error"], config.NO_SOLUTION_MESSAGE)

    def test_solve_invalid_triangles(self) -> None:
        body = self.client.post("/api/solve", json={"triangles": [[0, 0, 1, 1]]}).json()
        self.assertFalse(body["success"])
        self.assertIn("6 coordinates", body["error"])

        body = self.client.post("/api/solve", json={"triangles": []}).json()
        self.assertEqual(body["error"], "The puzzle has no triangles")

    def test_demos(self) -> None:
        demos = self.client.get("/api/demos").json()["demos"]
        self.assertIn({"name": "pinwheel", "triangle_count": 4}, demos)

        demo = self.client.get("/api/demos/pinwheel").json()
        self.assertEqual(demo["triangles"], rows(PINWHEEL))
        self.assertEqual(self.client.get("/api/demos/stained-glass").status_code, 404)

    def test_store_and_solve_puzzle(self) -> None:
        puzzle_id = self.save("pinwheel", PINWHEEL)

        stored = self.client.get(f"/api/puzzles/{puzzle_id}").json()
        self.assertEqual(stored["name"], "pinwheel")
        self.assertEqual(stored["triangles"], rows(PINWHEEL))

        result = self.client.post(f"/api/puzzles/{puzzle_id}/solve").json()
        self.assertEqual(result["order"], [0, 1, 3, 2])

        solves = self.client.get(f"/api/puzzles/{puzzle_id}/solves").json()["solves"]
        self.assertEqual(len(solves), 1)
        self.assertEqual(solves[0]["solution"], [0, 1, 3, 2])

        listed = self.client.get("/api/puzzles").json()["puzzles"]
        self.assertEqual(listed[0]["solve_count"], 1)

        self.assertEqual(self.client.get("/api/stats").json(), {
            "total_puzzles": 1,
            "total_solves": 1,
            "successful_solves": 1,
        })

    def test_failed_solve_is_recorded(self) -> None:
        puzzle_id = self.save("broken", PINWHEEL[:3])
        result = self.client.post(f"/api/puzzles/{puzzle_id}/solve").json()
        self.assertFalse(result["success"])

        solves = self.client.get(f"/api/puzzles/{puzzle_id}/solves").json()["solves"]
        self.assertEqual(solves[0]["success"], False)
        self.assertEqual(self.client.get(f"/api/puzzles/{puzzle_id}/svg").status_code, 422)

    def test_invalid_puzzle_is_not_stored(self) -> None:
        response = self.client.post(
            "/api/puzzles", json={"name": "flat", "triangles": [[0, 0, 1, 1, 2, 2]]}
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.client.get("/api/stats").json()["total_puzzles"], 0)

    def test_unknown_puzzle(self) -> None:
        self.assertEqual(self.client.get("/api/puzzles/99").status_code, 404)
        self.assertEqual(self.client.post("/api/puzzles/99/solve").status_code, 404)
        self.assertEqual(self.client.get("/api/puzzles/99/solves").status_code, 404)

    def test_svg(self) -> None:
        puzzle_id = self.save("glass", SHATTERED_GLASS)
        response = self.client.get(f"/api/puzzles/{puzzle_id}/svg")
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.headers["content-type"].startswith("image/svg+xml"))
        self.assertEqual(response.text.count("<polygon"), 10)


if __name__ == "__main__":
    unittest.main()
