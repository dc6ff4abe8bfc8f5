import csv
import os
import random
import statistics
import time

from .maze import MIX_FACTOR, Maze

DEFAULT_SIZES = [(5, 5), (10, 10), (25, 25)]

METRICS = [
    "elapsed_sec",
    "steps",
    "edges_reused",
    "edges_severed",
    "dead_ends",
    "junctions",
    "horizontal_open_fraction",
]


def count_degrees(maze):
    """Returns (dead_ends, junctions): cells with one open side and cells with three or more."""
    dead_ends = junctions = 0
    for y in range(maze.height):
        for x in range(maze.width):
            degree = len(maze.open_directions(x, y))
            if degree == 1:
                dead_ends += 1
            elif degree >= 3:
                junctions += 1
    return dead_ends, junctions


def run_single(width, height, steps=None, seed=None):
    """
    Walks the root of a fresh comb maze and measures the resulting tree.

    steps defaults to the same count init() uses (width * height * MIX_FACTOR).
    The walk draws from its own random.Random(seed), so rows are reproducible.
    """
    rng = random.Random(seed)
    maze = Maze(width, height)
    if steps is None:
        steps = width * height * MIX_FACTOR

    t0 = time.perf_counter()
    for _ in range(steps):
        maze.step(rng)
    elapsed = time.perf_counter() - t0

    dead_ends, junctions = count_degrees(maze)
    open_walls = maze.open_wall_count()
    horizontal_open = maze.horizontal_walls.count(False)
    root_x, root_y = maze.root_position()
    return {
        "width": width,
        "height": height,
        "seed": seed,
        "elapsed_sec": elapsed,
        "steps": maze.steps_taken,
        "edges_reused": maze.edges_reused,
        "edges_severed": maze.steps_taken - maze.edges_reused,
        "dead_ends": dead_ends,
        "junctions": junctions,
        "horizontal_open_fraction": horizontal_open / open_walls if open_walls else 0.0,
        "root_x": root_x,
        "root_y": root_y,
    }


def aggregate_results(rows, group_by=("width", "height")):
    grouped = {}
    for r in rows:
        key = tuple(r[k] for k in group_by)
        grouped.setdefault(key, []).append(r)

    def agg_stat(values):
        if not values:
            return {"avg": 0, "min": 0, "max": 0, "stdev": 0}
        return {
            "avg": statistics.mean(values),
            "min": min(values),
            "max": max(values),
            "stdev": statistics.pstdev(values) if len(values) > 1 else 0,
        }

    summary = []
    for key, items in grouped.items():
        entry = {"group": key, "count": len(items)}
        for m in METRICS:
            for stat_name, value in agg_stat([it[m] for it in items]).items():
                entry[f"{m}_{stat_name}"] = value
        summary.append(entry)
    return summary


def write_csv(path, rows):
    if not rows:
        return
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        for r in rows:
            writer.writerow(r)


def plot_metric(summary, metric_key, out_path):
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    labels = [f"{row['width']}x{row['height']}" for row in summary]
    values = [row.get(metric_key, 0) for row in summary]
    plt.figure(figsize=(max(6, len(labels) * 0.8), 4))
    plt.bar(range(len(values)), values)
    plt.xticks(range(len(values)), labels)
    plt.xlabel("maze size")
    plt.ylabel(metric_key)
    plt.tight_layout()
    directory = os.path.dirname(out_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    plt.savefig(out_path)
    plt.close()
