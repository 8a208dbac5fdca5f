"""RGB color values for grid objects."""

import operator
from typing import NamedTuple

from gridpkg.utils.errors import InvalidArgumentError


class _RGB(NamedTuple):
    red: int
    green: int
    blue: int


class Color(_RGB):
    """
    An immutable RGB color with components in 0..255.

    Raises:
        InvalidArgumentError: If a component is not an integer in 0..255
    """

    __slots__ = ()

    def __new__(cls, red: int, green: int, blue: int) -> "Color":
        components = []
        for name, value in (("red", red), ("green", green), ("blue", blue)):
            try:
                component = operator.index(value)
            except (TypeError, ValueError):
                raise InvalidArgumentError(f"Color component {name}={value!r} is not an integer") from None
            if not 0 <= component <= 255:
                raise InvalidArgumentError(f"Color component {name}={value} is outside 0..255")
            components.append(component)
        return super().__new__(cls, *components)

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(self.red, self.green, self.blue)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
