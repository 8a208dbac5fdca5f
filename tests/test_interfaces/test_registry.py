"""Tests for TypeSet."""

import pytest

from gridpkg.core.grid import BoundedGrid, UnboundedGrid
from gridpkg.interfaces.grid import Grid
from gridpkg.interfaces.registry import TypeSet, qualified_name


class ZebraGrid(BoundedGrid):
    pass


class AardvarkGrid(BoundedGrid):
    pass


class TestTypeSet:
    """Test TypeSet functionality."""

    def setup_method(self):
        self.types = TypeSet(Grid)

    def test_add_reports_novelty(self):
        """Test that add reports whether the class was new."""
        assert self.types.add(BoundedGrid) is True
        assert self.types.add(BoundedGrid) is False
        assert len(self.types) == 1

    def test_rejects_other_types(self):
        """Test that classes outside the base type are rejected."""
        with pytest.raises(TypeError):
            self.types.add(dict)
        with pytest.raises(TypeError):
            self.types.add("BoundedGrid")

    def test_listing_is_sorted_by_qualified_name(self):
        """Test that listings are sorted by qualified name."""
        for cls in (ZebraGrid, UnboundedGrid, AardvarkGrid, BoundedGrid):
            self.types.add(cls)

        listing = self.types.list_registered()

        assert listing == tuple(sorted(listing, key=qualified_name))
        assert listing.index(AardvarkGrid) < listing.index(ZebraGrid)

    def test_membership_and_iteration(self):
        """Test membership and iteration."""
        self.types.add(UnboundedGrid)

        assert UnboundedGrid in self.types
        assert BoundedGrid not in self.types
        assert list(self.types) == [UnboundedGrid]

    def test_qualified_name(self):
        """Test building qualified names."""
        assert qualified_name(BoundedGrid) == "gridpkg.core.grid.BoundedGrid"
