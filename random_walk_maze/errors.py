class MazeError(Exception):
    """Base class for everything the maze raises."""


class InvalidDimension(MazeError, ValueError):
    """Width or height is not a positive integer."""


class OutOfBounds(MazeError, IndexError):
    """A coordinate or move falls outside the grid (or outside a wall array)."""


class DegenerateGrid(MazeError):
    """The grid has a single cell, so the root has nowhere to move."""
