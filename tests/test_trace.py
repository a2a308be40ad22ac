import unittest

from maze3d.errors import EmptyPathError
from maze3d.grid import CELL_BARRIER, CELL_PATH, CELL_SPACE, CELL_VOID, MazeGrid
from maze3d.solver import solve
from maze3d.trace import trace_path


class TracePathTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = MazeGrid.full(2, 3, 3, CELL_SPACE)
        self.grid.cells[0, 1, 1] = CELL_BARRIER
        self.grid.cells[1, 1, 1] = CELL_VOID

    def test_empty_path_raises(self) -> None:
        with self.assertRaises(EmptyPathError):
            trace_path(self.grid, [])

    def test_round_trip_recovers_path_cells(self) -> None:
        path = solve(self.grid, (0, 0, 0), (0, 2, 2)).path
        traced = trace_path(self.grid, path)
        self.assertEqual(set(traced.coords_of(CELL_PATH)), set(path))
        self.assertEqual(traced.kind(0, 1, 1), CELL_BARRIER)
        self.assertEqual(traced.kind(1, 1, 1), CELL_VOID)
        self.assertEqual(traced.count(CELL_SPACE), self.grid.count(CELL_SPACE) - len(path))

    def test_source_grid_is_untouched(self) -> None:
        before = self.grid.clone()
        trace_path(self.grid, [(0, 0, 0)])
        self.assertEqual(self.grid, before)


if __name__ == "__main__":
    unittest.main()
