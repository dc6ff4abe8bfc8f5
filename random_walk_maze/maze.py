from .errors import DegenerateGrid, InvalidDimension, OutOfBounds

# --- Configuration ---
MIX_FACTOR = 10  # init() performs width * height * MIX_FACTOR steps

# --- Parent pointers ---
# A cell's pointer is either ROOT or the direction to walk to reach its parent.
ROOT = None
UP, DOWN, LEFT, RIGHT = 'U', 'D', 'L', 'R'

# Sampling order: rng.randrange(4) indexes into this tuple.
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# (dx, dy) for each direction. Origin (0, 0) is top-left, y grows downward.
OFFSETS = {UP: (0, -1), DOWN: (0, 1), LEFT: (-1, 0), RIGHT: (1, 0)}
OPPOSITE = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}


def cell_index(x, y, width, height):
    """Row-major index of cell (x, y)."""
    if not (0 <= x < width and 0 <= y < height):
        raise OutOfBounds(f"cell ({x}, {y}) outside {width}x{height} grid")
    return x + y * width


def horizontal_wall_index(x, y, width, height):
    """Index of the wall between (x, y) and (x, y + 1)."""
    if not (0 <= x < width and 0 <= y < height - 1):
        raise OutOfBounds(f"no horizontal wall below ({x}, {y}) in {width}x{height} grid")
    return x + y * width


def vertical_wall_index(x, y, width, height):
    """Index of the wall between (x, y) and (x + 1, y)."""
    if not (0 <= x < width - 1 and 0 <= y < height):
        raise OutOfBounds(f"no vertical wall right of ({x}, {y}) in {width}x{height} grid")
    return x + y * (width - 1)


class Maze:
    """
    A perfect maze whose spanning tree is re-rooted by a random walk.

    Maze Representation:
      - self.parents[i] holds the parent pointer of cell i = x + y * width:
        ROOT for the single root cell, otherwise one of UP/DOWN/LEFT/RIGHT,
        the direction from the cell to its parent.
      - self.horizontal_walls[x + y * width] is True when the wall between
        (x, y) and (x, y + 1) is closed.
      - self.vertical_walls[x + y * (width - 1)] is True when the wall between
        (x, y) and (x + 1, y) is closed.
      - A wall is open exactly when one of its two cells is the other's parent,
        so there are always width * height - 1 open walls.

    Coordinates: (x, y) where x is the column (0 to width-1) and y is the row
                 (0 to height-1). Origin (0, 0) is top-left.

    Randomness is never global: step() and init() take a random.Random (or any
    object with randrange) so a fixed seed reproduces the same walk.
    """
    def __init__(self, width, height):
        """
        Builds the initial "comb" tree.

        Every cell points LEFT along its row, except column 0. Cell (0, 0) is
        the root and the rest of column 0 points UP. So all vertical walls
        start open, and horizontal walls start closed except in column 0.

        Parameters:
          width (int): Number of cells horizontally (columns), at least 1
          height (int): Number of cells vertically (rows), at least 1
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidDimension(f"{name} must be a positive integer, got {value!r}")

        self.width = width
        self.height = height
        self.root = (0, 0)

        self.parents = [LEFT] * (width * height)
        for y in range(height):
            self.parents[y * width] = UP
        self.parents[0] = ROOT

        self.horizontal_walls = [True] * (width * (height - 1))
        for y in range(height - 1):
            self.horizontal_walls[y * width] = False
        self.vertical_walls = [False] * ((width - 1) * height)

        self.steps_taken = 0
        self.edges_reused = 0

    # --- Queries ---
    def root_position(self):
        return self.root

    def parent_of(self, x, y):
        return self.parents[cell_index(x, y, self.width, self.height)]

    def is_horizontal_wall_open(self, x, y):
        """True if the wall between (x, y) and (x, y + 1) is open."""
        return not self.horizontal_walls[horizontal_wall_index(x, y, self.width, self.height)]

    def is_vertical_wall_open(self, x, y):
        """True if the wall between (x, y) and (x + 1, y) is open."""
        return not self.vertical_walls[vertical_wall_index(x, y, self.width, self.height)]

    def open_wall_count(self):
        return self.horizontal_walls.count(False) + self.vertical_walls.count(False)

    def open_directions(self, x, y):
        """
        Returns the set of directions with an open wall out of (x, y).

        This is the per-cell adjacency view a visualizer draws from: a side
        not in the set gets a wall, the outer border is always closed.
        """
        cell_index(x, y, self.width, self.height)
        opened = set()
        if y > 0 and self.is_horizontal_wall_open(x, y - 1):
            opened.add(UP)
        if y < self.height - 1 and self.is_horizontal_wall_open(x, y):
            opened.add(DOWN)
        if x > 0 and self.is_vertical_wall_open(x - 1, y):
            opened.add(LEFT)
        if x < self.width - 1 and self.is_vertical_wall_open(x, y):
            opened.add(RIGHT)
        return opened

    def neighbor(self, x, y, direction):
        """Cell one step from (x, y) in direction, or None off the grid."""
        dx, dy = OFFSETS[direction]
        nx, ny = x + dx, y + dy
        if 0 <= nx < self.width and 0 <= ny < self.height:
            return nx, ny
        return None

    # --- Wall bookkeeping ---
    def _set_wall(self, x, y, direction, closed):
        """Opens or closes the wall on the given side of (x, y)."""
        if direction == UP:
            self.horizontal_walls[horizontal_wall_index(x, y - 1, self.width, self.height)] = closed
        elif direction == DOWN:
            self.horizontal_walls[horizontal_wall_index(x, y, self.width, self.height)] = closed
        elif direction == LEFT:
            self.vertical_walls[vertical_wall_index(x - 1, y, self.width, self.height)] = closed
        else:
            self.vertical_walls[vertical_wall_index(x, y, self.width, self.height)] = closed

    # --- Random walk ---
    def move(self, direction):
        """
        Moves the root one cell in direction and re-roots the tree.

        Algorithm:
          1. Open the wall between the old root and the new root.
          2. Read the new root's parent pointer before overwriting it:
             - If it points back at the old root (the opposite of direction),
               the walk retraced a tree edge; the wall just opened is that
               same edge and nothing else changes.
             - Otherwise the new root's old parent edge leaves the tree, so
               its wall is closed.
          3. The old root now points toward the new root; the new root
             becomes ROOT.

        Only two pointers change, so every other cell keeps its path to the
        root. Exactly one edge is added and at most one removed, keeping the
        open wall set equal to the tree's edge set.

        Returns:
          bool: True if the traversed edge was already a tree edge (reused)
        """
        if self.width * self.height < 2:
            raise DegenerateGrid("a 1x1 maze has no neighbor to move the root to")
        if direction not in OFFSETS:
            raise ValueError(f"unknown direction {direction!r}")

        old_x, old_y = self.root
        target = self.neighbor(old_x, old_y, direction)
        if target is None:
            raise OutOfBounds(f"cannot move {direction} from ({old_x}, {old_y})")
        new_x, new_y = target

        self._set_wall(old_x, old_y, direction, False)

        old_parent = self.parents[cell_index(new_x, new_y, self.width, self.height)]
        reused = old_parent == OPPOSITE[direction]
        if not reused:
            self._set_wall(new_x, new_y, old_parent, True)

        self.parents[cell_index(old_x, old_y, self.width, self.height)] = direction
        self.parents[cell_index(new_x, new_y, self.width, self.height)] = ROOT
        self.root = target

        self.steps_taken += 1
        if reused:
            self.edges_reused += 1
        return reused

    def step(self, rng):
        """
        Moves the root to a uniformly chosen in-bounds neighbor.

        Directions are drawn with rng.randrange(4) and rejected until one stays
        on the grid. With two or more cells the root always has a valid
        direction, so the loop ends; a 1x1 grid raises DegenerateGrid up front.
        """
        if self.width * self.height < 2:
            raise DegenerateGrid("a 1x1 maze has no neighbor to move the root to")
        x, y = self.root
        while True:
            direction = DIRECTIONS[rng.randrange(4)]
            if self.neighbor(x, y, direction) is not None:
                break
        self.move(direction)

    def init(self, rng):
        """Mixes the comb into a random tree with width * height * MIX_FACTOR steps."""
        if self.width * self.height < 2:
            raise DegenerateGrid("a 1x1 maze cannot be mixed")
        for _ in range(self.width * self.height * MIX_FACTOR):
            self.step(rng)
