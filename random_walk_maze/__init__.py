from .errors import DegenerateGrid, InvalidDimension, MazeError, OutOfBounds
from .maze import DIRECTIONS, DOWN, LEFT, MIX_FACTOR, RIGHT, ROOT, UP, Maze
from .render import render

__all__ = [
    "Maze", "render",
    "ROOT", "UP", "DOWN", "LEFT", "RIGHT", "DIRECTIONS", "MIX_FACTOR",
    "MazeError", "InvalidDimension", "OutOfBounds", "DegenerateGrid",
]
