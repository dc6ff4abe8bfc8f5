"""
Command line front-end.

  random-walk-maze show --width 8 --height 5 --seed 42 --directions
  random-walk-maze graph --width 6 --height 6 --seed 1 --out maze_tree
  random-walk-maze stats --runs 20 --sizes 5x5 10x10 --out_dir walk_metrics
"""
import argparse
import os
import random
import time

from .errors import MazeError
from .maze import Maze
from .render import render
from .simulator import DEFAULT_SIZES, aggregate_results, plot_metric, run_single, write_csv
from .tree_graph import render_tree

# --- Configuration ---
DEFAULT_WIDTH = 12
DEFAULT_HEIGHT = 8
PLOT_METRICS = [
    "dead_ends_avg",
    "junctions_avg",
    "horizontal_open_fraction_avg",
    "elapsed_sec_avg",
]


def parse_size(text):
    try:
        w, h = text.lower().split("x")
        return int(w), int(h)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}")


def build_maze(args):
    maze = Maze(args.width, args.height)
    rng = random.Random(args.seed)
    if args.steps is not None:
        for _ in range(args.steps):
            maze.step(rng)
    elif not args.no_mix:
        maze.init(rng)
    return maze


def cmd_show(args):
    maze = build_maze(args)
    print(render(maze, show_directions=args.directions))
    print(f"root at {maze.root_position()} after {maze.steps_taken} steps "
          f"({maze.edges_reused} reused edges)")


def cmd_graph(args):
    maze = build_maze(args)
    path = render_tree(maze, args.out, fmt=args.format, view=args.view)
    print(f"Wrote tree to {path}")


def cmd_stats(args):
    all_rows = []
    seed_base = args.seed if args.seed is not None else int(time.time())
    for width, height in args.sizes:
        for i in range(args.runs):
            all_rows.append(run_single(width, height, steps=args.steps, seed=seed_base + i))

    os.makedirs(args.out_dir, exist_ok=True)
    write_csv(os.path.join(args.out_dir, "raw_results.csv"), all_rows)

    expanded = []
    for row in aggregate_results(all_rows):
        width, height = row["group"]
        new_row = {k: v for k, v in row.items() if k != "group"}
        new_row["width"] = width
        new_row["height"] = height
        expanded.append(new_row)
    write_csv(os.path.join(args.out_dir, "summary.csv"), expanded)

    if not args.no_plots:
        for metric in PLOT_METRICS:
            plot_metric(expanded, metric, os.path.join(args.out_dir, f"{metric}.png"))

    print(f"Wrote results to {args.out_dir}")


def add_maze_options(p):
    p.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    p.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--steps", type=int, default=None, help="Walk exactly this many steps instead of a full mix")
    p.add_argument("--no-mix", action="store_true", help="Keep the initial comb tree")


def build_parser():
    parser = argparse.ArgumentParser(description="Perfect maze re-rooted by a random walk.")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_show = sub.add_parser("show", help="Print the maze as text.")
    add_maze_options(p_show)
    p_show.add_argument("--directions", action="store_true", help="Draw parent pointer glyphs in cells")
    p_show.set_defaults(func=cmd_show)

    p_graph = sub.add_parser("graph", help="Render the spanning tree with graphviz.")
    add_maze_options(p_graph)
    p_graph.add_argument("--out", type=str, default="maze_tree")
    p_graph.add_argument("--format", type=str, default="png")
    p_graph.add_argument("--view", action="store_true")
    p_graph.set_defaults(func=cmd_graph)

    p_stats = sub.add_parser("stats", help="Run repeated walks and write metrics.")
    p_stats.add_argument("--runs", type=int, default=10, help="Runs per maze size")
    p_stats.add_argument("--sizes", type=parse_size, nargs="*", default=DEFAULT_SIZES)
    p_stats.add_argument("--steps", type=int, default=None, help="Steps per run (default: full mix)")
    p_stats.add_argument("--seed", type=int, default=None, help="Base seed; run i uses seed + i")
    p_stats.add_argument("--out_dir", default="walk_metrics")
    p_stats.add_argument("--no-plots", action="store_true")
    p_stats.set_defaults(func=cmd_stats)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except MazeError as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
