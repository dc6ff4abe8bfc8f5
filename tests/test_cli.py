import contextlib
import io
import os
import tempfile
import unittest

from random_walk_maze.cli import build_parser, main, parse_size


def run_cli(*argv):
    out = io.StringIO()
    with contextlib.redirect_stdout(out):
        main(list(argv))
    return out.getvalue()


class TestCli(unittest.TestCase):

    def test_show_comb(self):
        output = run_cli("show", "--width", "3", "--height", "3", "--no-mix")
        self.assertTrue(output.startswith("+-+-+-+\n|     |\n+ +-+-+\n"))
        self.assertIn("root at (0, 0) after 0 steps", output)

    def test_show_directions_after_steps(self):
        output = run_cli("show", "--width", "4", "--height", "2", "--seed", "3", "--steps", "25", "--directions")
        self.assertEqual(output.count("X"), 1)
        self.assertIn("after 25 steps", output)

    def test_show_is_reproducible(self):
        args = ("show", "--width", "6", "--height", "4", "--seed", "42")
        self.assertEqual(run_cli(*args), run_cli(*args))

    def test_single_cell_mix_is_usage_error(self):
        err = io.StringIO()
        with contextlib.redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
            run_cli("show", "--width", "1", "--height", "1")
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("1x1", err.getvalue())

    def test_invalid_dimension_is_usage_error(self):
        err = io.StringIO()
        with contextlib.redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
            run_cli("show", "--width", "0", "--height", "3")
        self.assertEqual(ctx.exception.code, 2)

    def test_stats_writes_csvs(self):
        with tempfile.TemporaryDirectory() as tmp:
            out_dir = os.path.join(tmp, "metrics")
            output = run_cli("stats", "--runs", "2", "--sizes", "3x3", "4x2",
                             "--steps", "60", "--seed", "7", "--out_dir", out_dir, "--no-plots")
            self.assertIn(out_dir, output)
            self.assertTrue(os.path.exists(os.path.join(out_dir, "raw_results.csv")))
            self.assertTrue(os.path.exists(os.path.join(out_dir, "summary.csv")))
            with open(os.path.join(out_dir, "raw_results.csv"), encoding="utf-8") as f:
                self.assertEqual(len(f.read().strip().splitlines()), 1 + 4)

    def test_parse_size(self):
        self.assertEqual(parse_size("12x7"), (12, 7))
        self.assertEqual(parse_size("3X3"), (3, 3))
        parser = build_parser()
        err = io.StringIO()
        with contextlib.redirect_stderr(err), self.assertRaises(SystemExit):
            parser.parse_args(["stats", "--sizes", "twelve"])


if __name__ == "__main__":
    unittest.main()
