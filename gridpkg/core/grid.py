"""Baseline bounded and unbounded grid implementations."""

from typing import Dict, List, Optional

import numpy as np

from gridpkg.core.grid_object import GridObject
from gridpkg.core.location import Location
from gridpkg.interfaces.grid import Grid
from gridpkg.utils.errors import InvalidArgumentError, PlacementError

_is_occupied = np.vectorize(lambda cell: cell is not None, otypes=[bool])


class _BaseGrid(Grid):
    """Shared add/remove bookkeeping for the baseline grids."""

    def add(self, obj: GridObject, location: Location) -> None:
        if not isinstance(obj, GridObject):
            raise InvalidArgumentError(f"{obj!r} is not a GridObject")
        location = Location(*location)
        if not self.is_valid(location):
            raise PlacementError(f"{location} is not a valid location in {self!r}")
        if self.object_at(location) is not None:
            raise PlacementError(f"{location} is already occupied in {self!r}")
        if obj.is_in_grid():
            raise PlacementError(f"{obj!r} is already in a grid")
        self._store(location, obj)
        obj._set_placement(self, location)

    def remove(self, location: Location) -> Optional[GridObject]:
        location = Location(*location)
        if not self.is_valid(location):
            raise PlacementError(f"{location} is not a valid location in {self!r}")
        obj = self.object_at(location)
        if obj is not None:
            self._store(location, None)
            obj._set_placement(None, None)
        return obj

    def _store(self, location: Location, obj: Optional[GridObject]) -> None:
        raise NotImplementedError


class BoundedGrid(_BaseGrid):
    """A grid with fixed row and column extents, backed by a numpy array."""

    def __init__(self, rows: int, cols: int):
        """
        Initialize an empty grid.

        Args:
            rows: Number of rows (positive)
            cols: Number of columns (positive)

        Raises:
            InvalidArgumentError: If either dimension is not positive
        """
        if int(rows) <= 0 or int(cols) <= 0:
            raise InvalidArgumentError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self._cells = np.full((int(rows), int(cols)), None, dtype=object)

    @property
    def num_rows(self) -> int:
        return self._cells.shape[0]

    @property
    def num_cols(self) -> int:
        return self._cells.shape[1]

    def is_valid(self, location: Location) -> bool:
        row, col = location
        return 0 <= row < self.num_rows and 0 <= col < self.num_cols

    def object_at(self, location: Location) -> Optional[GridObject]:
        location = Location(*location)
        if not self.is_valid(location):
            return None
        return self._cells[location.row, location.col]

    def all_objects(self) -> List[GridObject]:
        return [self._cells[row, col] for row, col in np.argwhere(_is_occupied(self._cells))]

    def num_objects(self) -> int:
        return int(np.count_nonzero(_is_occupied(self._cells)))

    def _store(self, location: Location, obj: Optional[GridObject]) -> None:
        self._cells[location.row, location.col] = obj

    def __repr__(self) -> str:
        return f"BoundedGrid({self.num_rows}, {self.num_cols})"


class UnboundedGrid(_BaseGrid):
    """A grid with no fixed extent; any non-negative row and column is valid."""

    def __init__(self):
        self._objects: Dict[Location, GridObject] = {}

    @property
    def num_rows(self) -> None:
        return None

    @property
    def num_cols(self) -> None:
        return None

    def is_valid(self, location: Location) -> bool:
        row, col = location
        return row >= 0 and col >= 0

    def object_at(self, location: Location) -> Optional[GridObject]:
        return self._objects.get(Location(*location))

    def all_objects(self) -> List[GridObject]:
        return [self._objects[loc] for loc in sorted(self._objects)]

    def num_objects(self) -> int:
        return len(self._objects)

    def _store(self, location: Location, obj: Optional[GridObject]) -> None:
        if obj is None:
            self._objects.pop(location, None)
        else:
            self._objects[location] = obj

    def __repr__(self) -> str:
        return "UnboundedGrid()"
