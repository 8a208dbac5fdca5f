"""Tests for the baseline grids and GridObject."""

import pytest

from gridpkg.core.grid import BoundedGrid, UnboundedGrid
from gridpkg.core.grid_object import GridObject
from gridpkg.core.location import Location
from gridpkg.utils.errors import InvalidArgumentError, PlacementError


class TestBoundedGrid:
    """Test BoundedGrid functionality."""

    def setup_method(self):
        self.grid = BoundedGrid(3, 4)

    def test_dimensions(self):
        """Test the grid dimensions."""
        assert self.grid.num_rows == 3
        assert self.grid.num_cols == 4
        assert self.grid.is_bounded() is True

    @pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2)])
    def test_rejects_non_positive_dimensions(self, rows, cols):
        """Test that non-positive dimensions are rejected."""
        with pytest.raises(InvalidArgumentError):
            BoundedGrid(rows, cols)

    def test_is_valid(self):
        """Test location validity."""
        assert self.grid.is_valid(Location(0, 0))
        assert self.grid.is_valid(Location(2, 3))
        assert not self.grid.is_valid(Location(3, 0))
        assert not self.grid.is_valid(Location(0, -1))

    def test_add_and_lookup(self):
        """Test adding objects and looking them up."""
        obj = GridObject()
        self.grid.add(obj, Location(1, 2))

        assert self.grid.object_at(Location(1, 2)) is obj
        assert obj.grid is self.grid
        assert obj.location == Location(1, 2)
        assert not self.grid.is_empty(Location(1, 2))
        assert self.grid.num_objects() == 1

    def test_add_rejects_occupied_and_invalid(self):
        """Test that occupied and invalid locations are rejected."""
        self.grid.add(GridObject(), Location(0, 0))

        with pytest.raises(PlacementError):
            self.grid.add(GridObject(), Location(0, 0))
        with pytest.raises(PlacementError):
            self.grid.add(GridObject(), Location(5, 5))

    def test_add_rejects_non_grid_objects(self):
        """Test that only grid objects can be added."""
        with pytest.raises(InvalidArgumentError):
            self.grid.add("fish", Location(0, 0))

    def test_object_cannot_be_in_two_grids(self):
        """Test that an object cannot be added to a second grid."""
        obj = GridObject(self.grid, Location(0, 0))
        with pytest.raises(PlacementError):
            BoundedGrid(2, 2).add(obj, Location(1, 1))

    def test_remove(self):
        """Test removing an object."""
        obj = GridObject(self.grid, Location(2, 2))

        assert self.grid.remove(Location(2, 2)) is obj
        assert obj.is_in_grid() is False
        assert self.grid.remove(Location(2, 2)) is None
        with pytest.raises(PlacementError):
            self.grid.remove(Location(7, 7))

    def test_all_objects_in_row_major_order(self):
        """Test that all objects are listed in row-major order."""
        late = GridObject(self.grid, Location(2, 0))
        early = GridObject(self.grid, Location(0, 3))
        middle = GridObject(self.grid, Location(1, 1))

        assert self.grid.all_objects() == [early, middle, late]
        assert self.grid.num_objects() == 3


class TestUnboundedGrid:
    """Test UnboundedGrid functionality."""

    def setup_method(self):
        self.grid = UnboundedGrid()

    def test_no_dimensions(self):
        """Test that an unbounded grid has no dimensions."""
        assert self.grid.num_rows is None
        assert self.grid.num_cols is None
        assert self.grid.is_bounded() is False

    def test_any_non_negative_location_is_valid(self):
        """Test location validity in an unbounded grid."""
        assert self.grid.is_valid(Location(10000, 5))
        assert not self.grid.is_valid(Location(-1, 0))

    def test_add_remove(self):
        """Test adding and removing objects."""
        obj = GridObject(self.grid, Location(500, 7))

        assert self.grid.object_at(Location(500, 7)) is obj
        assert self.grid.all_objects() == [obj]
        assert self.grid.remove(Location(500, 7)) is obj
        assert self.grid.num_objects() == 0


class TestGridObject:
    """Test GridObject placement helpers."""

    def test_unplaced(self):
        """Test a grid object outside any grid."""
        obj = GridObject()
        assert obj.grid is None
        assert obj.location is None
        assert obj.is_in_grid() is False

    def test_grid_and_location_go_together(self):
        """Test that grid and location must be given together."""
        with pytest.raises(InvalidArgumentError):
            GridObject(BoundedGrid(2, 2))

    def test_add_to_grid(self):
        """Test adding an object to a grid."""
        grid = BoundedGrid(2, 2)
        obj = GridObject()
        obj.add_to_grid(grid, Location(1, 1))

        assert obj.location == Location(1, 1)
        with pytest.raises(PlacementError):
            obj.add_to_grid(grid, Location(0, 0))

    def test_change_location(self):
        """Test moving an object within its grid."""
        grid = BoundedGrid(2, 2)
        obj = GridObject(grid, Location(0, 0))
        blocker = GridObject(grid, Location(1, 1))

        obj.change_location(Location(0, 1))

        assert obj.location == Location(0, 1)
        assert grid.is_empty(Location(0, 0))
        with pytest.raises(PlacementError):
            obj.change_location(blocker.location)

    def test_change_location_requires_grid(self):
        """Test that moving needs a grid."""
        with pytest.raises(PlacementError):
            GridObject().change_location(Location(0, 0))

    def test_remove_from_grid(self):
        """Test removing an object from its grid."""
        grid = UnboundedGrid()
        obj = GridObject(grid, Location(3, 3))

        obj.remove_from_grid()
        obj.remove_from_grid()

        assert grid.num_objects() == 0
        assert obj.is_in_grid() is False
