import itertools
import unittest

from maze3d.config import MazeConfig
from maze3d.errors import ConfigurationError
from maze3d.grid import CELL_BARRIER, CELL_SPACE, CELL_VOID
from maze3d.template import config_for_scale, generate_template


class TemplateTests(unittest.TestCase):
    def test_template_is_deterministic(self) -> None:
        config = MazeConfig(width=7, height=6, depth=5, void_space=[(1, 2, 3)])
        self.assertEqual(generate_template(config), generate_template(config))

    def test_shape_is_depth_height_width(self) -> None:
        grid = generate_template(MazeConfig(width=4, height=3, depth=2))
        self.assertEqual(grid.shape, (2, 3, 4))

    def test_pillars_exactly_at_even_coordinates(self) -> None:
        config = MazeConfig(width=6, height=5, depth=4)
        grid = generate_template(config)
        for z, y, x in itertools.product(range(4), range(5), range(6)):
            expected = CELL_BARRIER if (z % 2 == 0 and y % 2 == 0 and x % 2 == 0) else CELL_SPACE
            self.assertEqual(grid.kind(z, y, x), expected, (z, y, x))

    def test_void_overrides_pillar_and_space(self) -> None:
        config = MazeConfig(width=3, height=3, depth=3, void_space=[(0, 0, 0), (1, 1, 1)])
        grid = generate_template(config)
        self.assertEqual(grid.kind(0, 0, 0), CELL_VOID)
        self.assertEqual(grid.kind(1, 1, 1), CELL_VOID)
        self.assertEqual(grid.count(CELL_VOID), 2)
        self.assertEqual(grid.count(CELL_BARRIER), 7)

    def test_out_of_bounds_void_ignored_when_sliced(self) -> None:
        config = MazeConfig(width=3, height=3, depth=3, void_space=[(0, 1, 1), (3, 3, 3)], slice_off_void=True)
        grid = generate_template(config)
        self.assertEqual(grid.coords_of(CELL_VOID), [(0, 1, 1)])

    def test_config_for_scale(self) -> None:
        config = config_for_scale("small", x_chance=0)
        self.assertEqual(config.shape, (5, 5, 5))
        self.assertEqual(config.x_chance, 0)
        with self.assertRaises(ConfigurationError):
            config_for_scale("huge")


if __name__ == "__main__":
    unittest.main()
