import csv
import os
import tempfile
import unittest

from random_walk_maze.maze import MIX_FACTOR, Maze
from random_walk_maze.simulator import (
    METRICS, aggregate_results, count_degrees, plot_metric, run_single, write_csv,
)


class TestRunSingle(unittest.TestCase):

    def test_comb_metrics(self):
        row = run_single(4, 3, steps=0, seed=1)
        self.assertEqual(row["steps"], 0)
        self.assertEqual(row["dead_ends"], 3)
        self.assertEqual(row["junctions"], 1)
        self.assertAlmostEqual(row["horizontal_open_fraction"], 2 / 11)
        self.assertEqual((row["root_x"], row["root_y"]), (0, 0))

    def test_default_steps_match_init(self):
        row = run_single(3, 4, seed=9)
        self.assertEqual(row["steps"], 3 * 4 * MIX_FACTOR)

    def test_reused_plus_severed_is_steps(self):
        row = run_single(6, 6, steps=750, seed=2)
        self.assertEqual(row["edges_reused"] + row["edges_severed"], 750)
        self.assertGreater(row["edges_reused"], 0)
        self.assertGreater(row["edges_severed"], 0)

    def test_seeded_runs_repeat(self):
        first = run_single(8, 5, steps=400, seed=33)
        second = run_single(8, 5, steps=400, seed=33)
        first.pop("elapsed_sec")
        second.pop("elapsed_sec")
        self.assertEqual(first, second)

    def test_count_degrees_totals(self):
        dead_ends, junctions = count_degrees(Maze(1, 1))
        self.assertEqual((dead_ends, junctions), (0, 0))
        dead_ends, junctions = count_degrees(Maze(5, 1))
        self.assertEqual((dead_ends, junctions), (2, 0))


class TestAggregation(unittest.TestCase):

    def setUp(self):
        self.rows = [run_single(4, 4, steps=100, seed=s) for s in range(3)]
        self.rows.append(run_single(2, 3, steps=50, seed=0))

    def test_groups_by_size(self):
        summary = aggregate_results(self.rows)
        groups = {row["group"]: row for row in summary}
        self.assertEqual(set(groups), {(4, 4), (2, 3)})
        self.assertEqual(groups[(4, 4)]["count"], 3)
        self.assertEqual(groups[(4, 4)]["steps_avg"], 100)
        self.assertEqual(groups[(2, 3)]["steps_stdev"], 0)
        for metric in METRICS:
            self.assertIn(f"{metric}_max", groups[(4, 4)])

    def test_write_csv_round_trip(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "nested", "raw.csv")
            write_csv(path, self.rows)
            with open(path, newline="", encoding="utf-8") as f:
                read = list(csv.DictReader(f))
        self.assertEqual(len(read), len(self.rows))
        self.assertEqual(list(read[0].keys()), list(self.rows[0].keys()))
        self.assertEqual(int(read[-1]["steps"]), 50)

    def test_write_csv_skips_empty(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "empty.csv")
            write_csv(path, [])
            self.assertFalse(os.path.exists(path))

    def test_plot_metric_writes_png(self):
        summary = []
        for row in aggregate_results(self.rows):
            width, height = row["group"]
            summary.append(dict(row, width=width, height=height))
        with tempfile.TemporaryDirectory() as tmp:
            out = os.path.join(tmp, "plots", "dead_ends_avg.png")
            plot_metric(summary, "dead_ends_avg", out)
            self.assertTrue(os.path.getsize(out) > 0)


if __name__ == "__main__":
    unittest.main()
