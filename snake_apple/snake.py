"""
snake.py - The snake's positional state machine.

Cells are (x, y) grid coordinates as plain signed ints, so stepping off the
low edge gives -1 rather than wrapping. Whether a cell is inside the arena
is decided by the game, which knows the arena size.
"""

import enum


class Direction(enum.Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self):
        return self.value

    @property
    def opposite(self):
        dx, dy = self.value
        return Direction((-dx, -dy))


# Order in which held direction keys are considered each tick
DIRECTION_PRIORITY = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)

INITIAL_LENGTH = 3


def choose_direction(held, current):
    """
    Pick the one direction change to honor this tick.

    Returns the first held direction in Up, Down, Left, Right order that is
    not a reversal of `current`, or None.
    """
    for direction in DIRECTION_PRIORITY:
        if direction in held and direction is not current.opposite:
            return direction
    return None


class Snake:
    """
    Attributes
    ----------
    body      : list  - [(x, y), ...] ordered head to tail; body[0] is the head.
    color     : Color - fill color for every segment.
    """

    def __init__(self, start_x, start_y, color, direction=Direction.RIGHT, length=INITIAL_LENGTH):
        if length < 1:
            raise ValueError(f"A snake needs at least one segment, got {length}")
        dx, dy = direction.delta
        # Segments trail behind the head, opposite to the facing direction
        self.body = [(start_x - i * dx, start_y - i * dy) for i in range(length)]
        self._direction = direction
        self._grow = False
        self.color = color

    def __len__(self):
        return len(self.body)

    @property
    def direction(self):
        return self._direction

    @property
    def growing(self):
        return self._grow

    def set_direction(self, direction):
        """Turn the snake. An exact reversal is refused and returns False."""
        if direction is self._direction.opposite:
            return False
        self._direction = direction
        return True

    def advance(self):
        head_x, head_y = self.body[0]
        dx, dy = self._direction.delta
        self.body.insert(0, (head_x + dx, head_y + dy))
        if self._grow:
            self._grow = False
        else:
            self.body.pop()

    def grow(self):
        """Keep the tail on the next advance()."""
        self._grow = True

    def head_position(self):
        return self.body[0]

    def occupies(self, cell):
        return cell in self.body

    def check_collision(self):
        head = self.body[0]
        return head in self.body[1:]

    def draw(self, framebuffer, cell_size):
        for x, y in self.body:
            framebuffer.fill_rect(x * cell_size, y * cell_size, cell_size, cell_size, self.color)
