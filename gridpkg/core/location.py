"""Location and direction value types for grids."""

import random
from typing import NamedTuple

from gridpkg.utils.errors import InvalidArgumentError

FULL_CIRCLE = 360
HALF_CIRCLE = 180
RIGHT_ANGLE = 90
HALF_RIGHT = 45


class Direction:
    """
    A compass heading in degrees, normalised to [0, 360).

    North is 0 and angles grow clockwise, so EAST is 90.
    """

    __slots__ = ("_degrees",)

    NORTH: "Direction"
    NORTHEAST: "Direction"
    EAST: "Direction"
    SOUTHEAST: "Direction"
    SOUTH: "Direction"
    SOUTHWEST: "Direction"
    WEST: "Direction"
    NORTHWEST: "Direction"

    def __init__(self, degrees: int = 0):
        self._degrees = int(degrees) % FULL_CIRCLE

    @property
    def degrees(self) -> int:
        return self._degrees

    def to_right(self, degrees: int = RIGHT_ANGLE) -> "Direction":
        """Return the direction reached by turning clockwise."""
        return Direction(self._degrees + degrees)

    def to_left(self, degrees: int = RIGHT_ANGLE) -> "Direction":
        """Return the direction reached by turning counter-clockwise."""
        return Direction(self._degrees - degrees)

    def reverse(self) -> "Direction":
        return Direction(self._degrees + HALF_CIRCLE)

    def rounded_to_compass(self) -> "Direction":
        """Round to the nearest of the eight compass directions."""
        return Direction(int(round(self._degrees / HALF_RIGHT)) * HALF_RIGHT)

    @staticmethod
    def random_direction() -> "Direction":
        """Return one of the four main compass directions at random."""
        return random.choice((Direction.NORTH, Direction.EAST,
                              Direction.SOUTH, Direction.WEST))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Direction):
            return NotImplemented
        return self._degrees == other._degrees

    def __hash__(self) -> int:
        return hash(self._degrees)

    def __repr__(self) -> str:
        return f"Direction({self._degrees})"


Direction.NORTH = Direction(0)
Direction.NORTHEAST = Direction(45)
Direction.EAST = Direction(90)
Direction.SOUTHEAST = Direction(135)
Direction.SOUTH = Direction(180)
Direction.SOUTHWEST = Direction(225)
Direction.WEST = Direction(270)
Direction.NORTHWEST = Direction(315)

# (row delta, column delta) for each compass heading
_COMPASS_OFFSETS = {
    0: (-1, 0),
    45: (-1, 1),
    90: (0, 1),
    135: (1, 1),
    180: (1, 0),
    225: (1, -1),
    270: (0, -1),
    315: (-1, -1),
}


class Location(NamedTuple):
    """A (row, col) position in a grid. Locations order row-major."""
    row: int
    col: int

    def neighbor(self, direction: Direction) -> "Location":
        """
        Return the adjacent location in the given direction.

        The direction is rounded to the nearest compass heading first.

        Raises:
            InvalidArgumentError: If direction is not a Direction
        """
        if not isinstance(direction, Direction):
            raise InvalidArgumentError(f"Expected a Direction, got {direction!r}")
        d_row, d_col = _COMPASS_OFFSETS[direction.rounded_to_compass().degrees]
        return Location(self.row + d_row, self.col + d_col)
