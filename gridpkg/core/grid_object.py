"""Base implementation of the grid-object capability."""

from typing import Optional

from gridpkg.core.location import Location
from gridpkg.interfaces.grid import Grid
from gridpkg.utils.errors import InvalidArgumentError, PlacementError


class GridObject:
    """
    An entity that can occupy a location within a grid.

    A grid object may be created already placed, by passing a grid and a
    location to the constructor, or created on its own and placed later
    with ``add_to_grid`` (or ``Grid.add``).
    """

    def __init__(self, grid: Optional[Grid] = None, location: Optional[Location] = None):
        """
        Initialize the object, placing it when a grid is given.

        Args:
            grid: Grid in which the object will reside
            location: Location the object will occupy

        Raises:
            InvalidArgumentError: If only one of grid and location is given
        """
        self._grid: Optional[Grid] = None
        self._location: Optional[Location] = None
        if (grid is None) != (location is None):
            raise InvalidArgumentError("grid and location must be given together")
        if grid is not None:
            grid.add(self, location)

    @property
    def grid(self) -> Optional[Grid]:
        return self._grid

    @property
    def location(self) -> Optional[Location]:
        return self._location

    def is_in_grid(self) -> bool:
        return self._grid is not None

    def add_to_grid(self, grid: Grid, location: Location) -> None:
        """
        Place this object in a grid.

        Raises:
            PlacementError: If already in a grid, or the location is unusable
        """
        if self.is_in_grid():
            raise PlacementError(f"{self!r} is already in a grid")
        grid.add(self, location)

    def remove_from_grid(self) -> None:
        """Take this object out of its grid; a no-op if it is not in one."""
        if self._grid is not None:
            self._grid.remove(self._location)

    def change_location(self, new_location: Location) -> None:
        """
        Move this object within its grid.

        Raises:
            PlacementError: If not in a grid, or the new location is unusable
        """
        if self._grid is None:
            raise PlacementError(f"{self!r} is not in a grid")
        grid = self._grid
        new_location = Location(*new_location)
        if new_location == self._location:
            return
        if not grid.is_valid(new_location) or not grid.is_empty(new_location):
            raise PlacementError(f"Cannot move {self!r} to {new_location}")
        grid.remove(self._location)
        grid.add(self, new_location)

    def _set_placement(self, grid: Optional[Grid], location: Optional[Location]) -> None:
        # Called by grids when this object is added or removed
        self._grid = grid
        self._location = location

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(location={self._location})"
