"""Abstract grid capability shared by bounded and unbounded grids."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

from gridpkg.core.location import Location

if TYPE_CHECKING:
    from gridpkg.core.grid_object import GridObject


class Grid(ABC):
    """Abstract base class for a 2-D container of located objects."""

    @property
    @abstractmethod
    def num_rows(self) -> Optional[int]:
        """Number of rows, or None if the grid is unbounded."""
        pass

    @property
    @abstractmethod
    def num_cols(self) -> Optional[int]:
        """Number of columns, or None if the grid is unbounded."""
        pass

    @abstractmethod
    def is_valid(self, location: Location) -> bool:
        """
        Check whether a location lies within this grid.

        Args:
            location: Location to check

        Returns:
            bool: True if objects may be placed at the location
        """
        pass

    @abstractmethod
    def add(self, obj: "GridObject", location: Location) -> None:
        """
        Place an object at a location.

        Args:
            obj: Object to place
            location: Empty, valid location

        Raises:
            PlacementError: If the location is invalid or occupied
        """
        pass

    @abstractmethod
    def remove(self, location: Location) -> Optional["GridObject"]:
        """
        Remove and return the object at a location, if any.

        Raises:
            PlacementError: If the location is invalid
        """
        pass

    @abstractmethod
    def object_at(self, location: Location) -> Optional["GridObject"]:
        """Return the object at a location, or None."""
        pass

    @abstractmethod
    def all_objects(self) -> List["GridObject"]:
        """Return every object in the grid in row-major location order."""
        pass

    def is_bounded(self) -> bool:
        return self.num_rows is not None and self.num_cols is not None

    def is_empty(self, location: Location) -> bool:
        return self.object_at(location) is None

    def num_objects(self) -> int:
        return len(self.all_objects())
