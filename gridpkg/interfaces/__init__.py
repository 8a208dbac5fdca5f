"""Abstract interfaces for gridpkg components."""

from gridpkg.interfaces.grid import Grid
from gridpkg.interfaces.registry import TypeSet, qualified_name

__all__ = [
    "Grid",
    "TypeSet",
    "qualified_name",
]
