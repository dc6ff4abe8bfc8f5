from .maze import DOWN, LEFT, RIGHT, ROOT, UP

# Parent pointer glyphs shown at cell centers when show_directions is set.
GLYPHS = {UP: "^", DOWN: "v", LEFT: "<", RIGHT: ">", ROOT: "X"}


def render(maze, show_directions=False):
    """
    Draws the maze as text, one character per wall slot.

    Layout for a width x height maze: 2*height+1 lines of 2*width+1 characters.
      - even row, even column: '+' corner
      - even row, odd column: horizontal wall slot ('-' closed, ' ' open)
      - odd row, even column: vertical wall slot ('|' closed, ' ' open)
      - odd row, odd column: cell center (' ', or the parent glyph)
    The outer border is always closed. Never mutates the maze.
    """
    lines = []
    for row in range(2 * maze.height + 1):
        y = row // 2
        chars = []
        for col in range(2 * maze.width + 1):
            x = col // 2
            if row % 2 == 0 and col % 2 == 0:
                chars.append("+")
            elif row % 2 == 0:
                # Wall slot between (x, y-1) and (x, y).
                if y == 0 or y == maze.height:
                    chars.append("-")
                else:
                    chars.append(" " if maze.is_horizontal_wall_open(x, y - 1) else "-")
            elif col % 2 == 0:
                # Wall slot between (x-1, y) and (x, y).
                if x == 0 or x == maze.width:
                    chars.append("|")
                else:
                    chars.append(" " if maze.is_vertical_wall_open(x - 1, y) else "|")
            elif show_directions:
                chars.append(GLYPHS[maze.parent_of(x, y)])
            else:
                chars.append(" ")
        lines.append("".join(chars))
    return "\n".join(lines)
