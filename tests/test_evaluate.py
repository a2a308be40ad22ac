import csv
import json
import os
import tempfile
import unittest
from pathlib import Path

os.environ.setdefault("MPLBACKEND", "Agg")

from maze3d.eval.evaluate import CHANCE_PRESETS, parse_args, run_all_experiments, run_case


class RunCaseTests(unittest.TestCase):
    def test_open_preset_is_a_straight_diagonal(self) -> None:
        res = run_case("small", "open", seed=0)
        self.assertIsNotNone(res)
        self.assertTrue(res.solvable)
        self.assertEqual(res.barrier_count, 0)
        self.assertEqual(res.path_length, 12)
        self.assertEqual(res.manhattan_distance, 12)
        self.assertAlmostEqual(res.detour_ratio, 1.0)

    def test_same_seed_same_result(self) -> None:
        a = run_case("small", "default", seed=11)
        b = run_case("small", "default", seed=11)
        self.assertEqual(a.barrier_count, b.barrier_count)
        self.assertEqual(a.path_length, b.path_length)
        self.assertEqual(a.solvable, b.solvable)


class RunAllExperimentsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.output_dir = Path(self.tmp.name) / "out"

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def test_writes_tables_and_charts(self) -> None:
        results = run_all_experiments(
            output_dir=str(self.output_dir),
            seeds_per_case=2,
            scales=["small"],
            presets=["open", "default"],
        )
        self.assertEqual(len(results), 4)

        with open(self.output_dir / "results_table.csv", newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        self.assertEqual(len(rows), 4)
        self.assertEqual({r["preset"] for r in rows}, {"open", "default"})

        summary = json.loads((self.output_dir / "summary.json").read_text(encoding="utf-8"))
        self.assertEqual([r["seed"] for r in summary], [r.seed for r in results])

        charts = self.output_dir / "charts"
        for name in ("barrier_density.png", "path_length.png", "runtime.png"):
            self.assertTrue((charts / name).exists(), name)


class ParseArgsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        args = parse_args([])
        self.assertEqual(args.output_dir, "output")
        self.assertEqual(args.seeds, 5)
        self.assertEqual(args.base_seed, 42)

    def test_presets_cover_all_chance_modes(self) -> None:
        self.assertEqual(sorted(CHANCE_PRESETS.values()), [0, 1, 3, 6])


if __name__ == "__main__":
    unittest.main()
