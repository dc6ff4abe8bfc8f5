from graphviz import Digraph

from .maze import ROOT

ROOT_COLOR = "#f1c40f"
NODE_COLOR = "#bdc3c7"


def node_name(x, y):
    return f"{x},{y}"


def to_digraph(maze, name="maze_tree"):
    """
    Builds a graphviz Digraph of the maze's spanning tree.

    One node per cell, pinned at its grid position, and one edge per parent
    pointer drawn child -> parent. The root is the only node with no
    outgoing edge and is filled with ROOT_COLOR.
    """
    dot = Digraph(name=name, engine="neato")
    dot.attr("node", shape="circle", style="filled", fillcolor=NODE_COLOR,
             fontsize="8", width="0.3", fixedsize="true")
    for y in range(maze.height):
        for x in range(maze.width):
            attrs = {"pos": f"{x},{-y}!"}
            if maze.parent_of(x, y) is ROOT:
                attrs["fillcolor"] = ROOT_COLOR
            dot.node(node_name(x, y), **attrs)

    for y in range(maze.height):
        for x in range(maze.width):
            direction = maze.parent_of(x, y)
            if direction is ROOT:
                continue
            px, py = maze.neighbor(x, y, direction)
            dot.edge(node_name(x, y), node_name(px, py))
    return dot


def render_tree(maze, out_path, fmt="png", view=False):
    """Writes the tree drawing next to out_path and returns the rendered file's path."""
    dot = to_digraph(maze)
    dot.format = fmt
    return dot.render(out_path, view=view, cleanup=True)
