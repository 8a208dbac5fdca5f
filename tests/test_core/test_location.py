"""Tests for Location, Direction and Color."""

import pytest

from gridpkg.core.color import Color, RED
from gridpkg.core.location import Direction, Location
from gridpkg.utils.errors import InvalidArgumentError


class TestDirection:
    """Test Direction arithmetic."""

    def test_normalisation(self):
        """Test normalising degrees."""
        assert Direction(450) == Direction.EAST
        assert Direction(-90) == Direction.WEST

    def test_turning(self):
        """Test turning left and right."""
        assert Direction.NORTH.to_right() == Direction.EAST
        assert Direction.NORTH.to_left() == Direction.WEST
        assert Direction.NORTH.to_right(45) == Direction.NORTHEAST
        assert Direction.EAST.reverse() == Direction.WEST

    def test_rounding(self):
        """Test rounding to a compass direction."""
        assert Direction(50).rounded_to_compass() == Direction.NORTHEAST
        assert Direction(350).rounded_to_compass() == Direction.NORTH

    def test_random_direction(self):
        """Test picking a random direction."""
        assert Direction.random_direction() in (
            Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST
        )

    def test_hashable(self):
        """Test that directions are hashable."""
        assert len({Direction(0), Direction(360), Direction.NORTH}) == 1


class TestLocation:
    """Test Location helpers."""

    def test_ordering(self):
        """Test that locations order row-major."""
        assert sorted([Location(1, 0), Location(0, 5)]) == [Location(0, 5), Location(1, 0)]

    @pytest.mark.parametrize("direction,expected", [
        (Direction.NORTH, Location(1, 2)),
        (Direction.EAST, Location(2, 3)),
        (Direction.SOUTHWEST, Location(3, 1)),
    ])
    def test_neighbor(self, direction, expected):
        """Test finding the neighboring location."""
        assert Location(2, 2).neighbor(direction) == expected

    def test_neighbor_requires_direction(self):
        """Test that neighbor needs a Direction."""
        with pytest.raises(InvalidArgumentError):
            Location(0, 0).neighbor(90)


class TestColor:
    """Test Color values."""

    def test_named_constants(self):
        """Test that named colors compare equal to their components."""
        assert Color(255, 0, 0) == RED
        assert isinstance(RED, Color)

    @pytest.mark.parametrize("components", [
        (300, -5, 0),
        (256, 0, 0),
        (0, 0, -1),
        ("red", 0, 0),
        (0.5, 0, 0),
    ])
    def test_invalid_components_raise(self, components):
        """Test that the constructor rejects non-integer or out-of-range components."""
        with pytest.raises(InvalidArgumentError):
            Color(*components)

    def test_hex(self):
        """Test the hex representation."""
        assert Color(0, 128, 255).to_hex() == "#0080ff"
